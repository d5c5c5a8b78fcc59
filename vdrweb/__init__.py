"""Building blocks for a web front end to a video disk recorder: EPG ids, search timer records, OSD rendering, file cache and MD5."""

__version__ = "0.1.0"