[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vdrweb"
version = "0.1.0"
description = "Building blocks for a web front end to a video disk recorder: EPG ids, search timer records, OSD rendering, file cache and MD5"
requires-python = ">=3.10"
dependencies = []
keywords = ["vdr", "epg", "epgsearch", "osd", "television", "search-timer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video :: Display",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vdrweb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
