# utilbox

A collection of small helpers for day-to-day Python work: string checks
and conversions, map helpers, number conversion, time arithmetic and
formatting, process and user information, and a small chainable HTTP
requester.

## Installation

```
pip install utilbox
```

To run the test suite:

```
pip install "utilbox[test]"
pytest
```

## Modules at a glance

| Module | What it offers |
| --- | --- |
| `utilbox.mathutil` | Lenient conversion to int, uint, float and string; `percent`; `elapsed_time`; random ints |
| `utilbox.strcheck` | Character and string checks: blank, alphanumeric, prefixes, byte positions |
| `utilbox.strsplit` | `cut`, `split` variants that trim and drop empty items, `substr` |
| `utilbox.strconvert` | `any_to_string`, `to_bool`, `to_ints`, `to_slice`, `to_time` |
| `utilbox.strformat` | Trimming, `filter_email`, `snake_case`, `camel_case`, `upper_word`, `upper_first` |
| `utilbox.strencode` | HTML and JavaScript escaping, base64, escaping of the query part of a URL |
| `utilbox.strutil` | Padding, repeating, multi-replace, pretty JSON, Jinja2 text rendering, `Str` |
| `utilbox.strrandom` | MD5 digests, random characters and bytes, time-based ids |
| `utilbox.similar` | Edit-distance similarity between two strings |
| `utilbox.bytepool` | `ByteChanPool`, a bounded pool of reusable byte buffers |
| `utilbox.value` | `Value`, a box for any value with typed accessors |
| `utilbox.maputil` | `Aliases`, `Data`, `SMap`, dotted-path lookup with `get_by_path` |
| `utilbox.structs` | `Aliases` with a checker, a lockable `MapDataStore`, `parse_tag_value_ini` |
| `utilbox.gofunc` | Function names, formatted call stacks and caller information |
| `utilbox.stdutil` | Raise-if-set helpers, `go` to run a callable in a thread, `wait_close_signals`, string conversion |
| `utilbox.optional` | `Optional` with `map`, `get`, `or_else` |
| `utilbox.timex` | `TimeX` datetime wrapper and helpers such as `day_start`, `format_by_tpl`, `to_layout` |
| `utilbox.testutil` | Capturing or discarding stdout/stderr, temporarily replacing environment variables |
| `utilbox.httpmock` | Building fake requests and running them through a WSGI application |
| `utilbox.netutil` | First non-loopback IPv4 address; the unspecified IPv4/IPv6 addresses |
| `utilbox.sysutil` | Running commands, OS detection, users and home directories, process checks |
| `utilbox.httpreq` | The chainable `HttpReq`, status-code checks, content-type constants, request/response dumps |

## Examples

### Conversions

```python
from utilbox import mathutil, strconvert

mathutil.must_int("  42 ")        # 42
mathutil.must_int("oops")         # 0
mathutil.to_float("123.5")        # 123.5
strconvert.to_bool("yes")         # True
strconvert.to_ints("1,2,3")       # [1, 2, 3]
strconvert.to_slice("a, , b,c")   # ['a', 'b', 'c']
```

### Strings

```python
from utilbox import strformat, strsplit, strutil

strformat.snake_case("RangePrice")       # 'range_price'
strformat.camel_case("range_price")      # 'rangePrice'
strformat.upper_word("hi lo wr")         # 'Hi Lo Wr'
strsplit.split_n("a, , b,c", ",", 2)     # ['a', 'b,c']
strsplit.substr("abcDef", 2, 2)          # 'cD'
strutil.pad_left("ab", "0", 5)           # '000ab'
strutil.replaces("{name} is {age}", {"{name}": "tom", "{age}": "20"})  # 'tom is 20'
```

### Maps

```python
from utilbox import maputil

data = {"key1": {"sk0": "sv0"}, "key2": ["sv1", "sv2"]}
maputil.get_by_path("key1.sk0", data)   # ('sv0', True)
maputil.get_by_path("key2.1", data)     # ('sv2', True)

aliases = maputil.Aliases()
aliases.add_alias("real", "r")
aliases.resolve_alias("r")              # 'real'
```

### Time

Layouts use the reference time `2006-01-02 15:04:05`; templates use the
letters Y, y, M, D, H, I and S.

```python
from utilbox import timex

tx = timex.now()
tx.date_format("Y-M-D H:I")
tx.yesterday().day_start()
timex.to_layout("Y-M-D H:I:S")          # '2006-01-02 15:04:05'
```

### HTTP

```python
from utilbox import httpreq

resp = (
    httpreq.HttpReq("https://api.example.com")
    .with_header("Accept", "application/json")
    .send("/items")
)
httpreq.is_ok(resp.status)
httpreq.build_basic_auth("user", "password")
```

Error statuses are returned as responses rather than raised. Any callable
taking a `urllib.request.Request`, or an object with a `do(request)`
method, can be set with `client()`.

### Environment in tests

```python
import os
from utilbox import testutil

testutil.mock_env_value("APP_MODE", "test", lambda value: print(value))
os.environ.get("APP_MODE")               # restored afterwards
```

## Errors

Conversions that cannot succeed raise exceptions such as
`mathutil.ConvertError`, `strconvert.InvalidParamError` or `ValueError`.
`must_int`, `must_uint`, `must_int64`, `must_float` and `must_bool` fall
back to a zero value instead; `mathutil.must_string` and
`stdutil.must_string` still raise `ConvertError` for values they cannot
convert.

## What it does not do

utilbox is a library only: it installs no command-line program.
`httpmock` runs requests against WSGI applications only, and
`sysutil.kill` is not supported on Windows.