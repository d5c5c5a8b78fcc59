# vdrweb

Building blocks for a browser front end to a video disk recorder. The
package has no runtime dependencies beyond the standard library.

## What is inside

| Module | Purpose |
| --- | --- |
| `vdrweb.epg_ids` | `encode_dom_id` / `decode_dom_id` for HTML-safe EPG event ids, `duration` and `elapsed_time`, `epg_images` and `rec_images` to find image files on disk |
| `vdrweb.search_timer` | `SearchTimer` and `UseChannel`: parse and write the colon-separated search timer format |
| `vdrweb.epgsearch_data` | `ExtEPGInfo`, `ChannelGroup`, `Blacklist`, `SearchResult` parsed from their text records; `QueryStore` keeps queries by MD5 hash; `merge_results` |
| `vdrweb.osd_status` | `OsdStatusMonitor` follows on-screen-display events and renders them as HTML; `OsdItem`; `encode_html` |
| `vdrweb.filecache` | `FileObject`, `FileCache` and `live_file_cache()`: a size-bounded, least-recently-used cache of file contents that reloads changed files |
| `vdrweb.md5` | `Md5`, `print_md5`, `md5_string` |
| `vdrweb.large_string` | `LargeString`, a growable text buffer |
| `vdrweb.string_match` | `StringMatch`, case-insensitive regular-expression matching; empty or invalid patterns never match |
| `vdrweb.features` | `SplitVersion`, `FeatureSpec`, `Features`: plugin version checks, with specs `EPGSEARCH`, `STREAMDEV_SERVER`, `TVSCRAPER` |
| `vdrweb.i18n` | `character_encoding()`: an HTML-ready spelling of the system charset |

## Examples

EPG event ids that are safe to use in HTML:

```python
from vdrweb.epg_ids import encode_dom_id, decode_dom_id

dom_id = encode_dom_id("S19.2E-1-1089-12003", 4711)  # 'event_S19p2Em1m1089m12003_4711'
channel_id, event_id = decode_dom_id(dom_id)         # ('S19.2E-1-1089-12003', 4711)
```

Search timers round-trip through their text form. The last four arguments
are the default priority, lifetime and margins; the second may be a function
that maps a channel id to its name:

```python
from vdrweb.search_timer import SearchTimer

timer = SearchTimer.from_text(line, None, 50, 99, 2, 10)
text = timer.to_text()
```

Rendering the on-screen display:

```python
from vdrweb.osd_status import OsdStatusMonitor

osd = OsdStatusMonitor()
osd.osd_title("Recordings")
osd.osd_item("News\t20:00", 0)
osd.osd_current_item("News\t20:00")
page_fragment = osd.html()
```

Hashing and version checks:

```python
from vdrweb.md5 import md5_string
from vdrweb.features import EPGSEARCH, Features, SplitVersion

md5_string("abc")                           # '900150983cd24fb0d6963f7d28e17f72'
SplitVersion("1.1.8") < SplitVersion("1.1.9")  # True
Features(EPGSEARCH, None).loaded()          # False
```

## What it does not do

The package holds data formats, parsers and renderers only. It does not
run a web server, does not talk to a recorder or to the EPG search service
(search timers and results are only read from and written to text), does
not start any streaming processes, and does not preload a set of static
assets into the file cache: files enter `FileCache` when `get` is called.

## Tests

The test suite uses pytest and is installed with the `test` extra.