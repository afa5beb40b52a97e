# dtail

Building blocks for following and grepping log files: terminal colours,
logging, client option handling and filtered reading of plain or compressed
files.

## What is in the package

- **Terminal colours** (`dtail.color`, `dtail.paint`): the `FgColor`,
  `BgColor` and `Attribute` enums hold ANSI escape sequences;
  `to_fg_color`, `to_bg_color` and `to_attribute` parse names such as
  `"red"` or `"bold"` (case insensitive) and raise `ValueError` for unknown
  names. `paint_str`, `paint_str_with_attr`, `paint_str_fg`, `paint_str_bg`,
  `paint_str_attr`, `paint`, `paint_with_attr` and `paint_with_attrs` wrap
  text in these codes; the `paint*` variants keep a trailing newline after
  the reset codes.
- **Colour table** (`dtail.colortable`): `color_table()` returns every
  foreground/background/attribute combination as painted text.
- **Configuration** (`dtail.config`): dataclasses with defaults for client
  colours (`ClientConfig`, `TermColors` and its parts), shared settings
  (`CommonConfig`) and the server (`ServerConfig`, `Permissions`,
  `Scheduled`, `Continuous`). `ServerConfig.user_permissions(user_name)`
  returns a user's path patterns, falling back to the defaults, and raises
  `PermissionError` when the list is empty. `env(name)` is true when the
  variable is set to `"yes"`; `hostname()` honours `DTAIL_HOSTNAME_OVERRIDE`.
- **Logging** (`dtail.level`, `dtail.loggers`, `dtail.dlog`, `dtail.brush`):
  `Level` and `parse_level`; `NoneLogger`, `StdoutLogger`, `FileLogger`
  (daily or signal rotation, see `new_strategy`) and `FoutLogger` (file and
  stdout), with `factory()` handing out shared instances and
  `factory_rotate()` rotating them all. `DLog` formats messages per level
  and source, colouring them through `colorfy` when the logger supports it.
  `install_rotation_handler()` rotates the factory loggers on `SIGHUP`.
- **Client options** (`dtail.args`): `Args.serialize_options()` builds the
  `key=value` option string (`quiet`, `plain`, `serverless`, `max`,
  `before`, `after`) joined by `:`; `deserialize_options(opts)` parses such
  pairs back, decoding `base64%` values, into a dict plus an `LContext`.
- **File reading** (`dtail.readfile`, `dtail.line`, `dtail.fsstats`,
  `dtail.lcontext`): `CatFile` reads a whole file, `TailFile` follows a file
  from its end. `.gz`/`.gzip` and `.zst` files are decompressed on the fly,
  overlong lines are split, and a followed file that shrinks raises
  `TruncatedError`. Lines can be filtered by a regex with grep-style
  before/after context and a maximum match count. `ReadStats` tracks the
  share of matched lines transmitted over the last 100 lines.
- **Small helpers**: `dtail.done.Done` (an idempotent shutdown signal),
  `dtail.prompt.Prompt` (a question asked on standard input),
  `dtail.permissions.to_read` (always grants read access; no ACL check is
  made).

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Colour table

To see how every colour combination looks in your terminal:

```
dtail-colortable
```

Add `--wide` to show a sample paragraph for each combination.

## Examples

Grepping a file with context:

```python
from dtail.lcontext import LContext
from dtail.readfile import CatFile

reader = CatFile("app.log", "app.log")
for line in reader.start(LContext(before_context=2, after_context=2), regex="ERROR"):
    print(line.count, line.content.decode(), end="")
```

Following a file until told to stop:

```python
from dtail.done import Done
from dtail.readfile import TailFile

stop = Done()
for line in TailFile("app.log", "app.log").start(regex=r"WARN|ERROR", stop=stop):
    print(line.content.decode(), end="")
```

Painting text:

```python
from dtail.color import to_attribute, to_bg_color, to_fg_color
from dtail.paint import paint_str_with_attr

print(paint_str_with_attr("disk almost full", to_fg_color("white"),
                          to_bg_color("red"), to_attribute("bold")))
```

Option strings:

```python
from dtail.args import deserialize_options

options, ltx = deserialize_options(["max=3", "before=2", "quiet=true"])
# options == {"quiet": "true"}; ltx.max_count == 3, ltx.before_context == 2
```

## What the package does not do

There is no network side: no server to run, no client that connects to
remote hosts, and no way to build a server list. There is no mapreduce
query engine either. The package reads and filters local files (or standard
input) and provides the colouring, logging and option handling around that.