# samplekit

A collection of small, self-contained programs and helpers: text
utilities, line and character counting, temperature conversion, bit
tricks, a tree sort, a directed graph, an S-expression encoder/decoder
with a pretty printer, value formatting and display, a deep-equality
check, a method lister, bzip2 compression, image generators (Lissajous
GIFs, Mandelbrot PNGs), a JPEG converter, tiny HTTP servers and clients,
and SHA-2 hashing.

## Installing

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from samplekit.word import is_palindrome
from samplekit.textutil import basename, comma
from samplekit.tempconv import Celsius, c_to_f
from samplekit.bits import pop_count
from samplekit.treesort import tree_sort
from samplekit.sexpr import marshal, marshal_indent, unmarshal
from samplekit.equal import equal

is_palindrome("A man, a plan, a canal: Panama")   # True
basename("a/b.c.go")                              # "b.c"
comma("1234567890")                               # "1,234,567,890"
print(c_to_f(Celsius(100)))                       # 212°F
pop_count(0xFF)                                   # 8

data = [5, 2, 9, 1]
tree_sort(data)                                   # data is now [1, 2, 5, 9]

equal([1, 2, 3], [1, 2, 3])                       # True
```

`marshal` turns a value (`None`, ints, strings, lists, tuples, dicts and
dataclasses) into S-expression bytes, `marshal_indent` does the same with
line breaks to fit an 80-column margin, and `unmarshal(data, cls)` reads
the bytes back into a value of type `cls`. Unsupported values (floats,
booleans and the like) and malformed input raise `SExprError`.

The modules:

- `samplekit.echo` – `echo(newline, sep, args, out)`.
- `samplekit.word` – `is_palindrome` (ignores case and non-letters) and
  `is_palindrome_naive` (a byte-wise first attempt).
- `samplekit.textutil` – `basename`, `comma`, `ints_to_string`, `nonempty`.
- `samplekit.lines` – `count_lines`, `count_files`, `duplicates`, `dedup`
  and `char_count` (returns a `CharCounts` with `counts`, `utflen` and
  `invalid`).
- `samplekit.tempconv` – `Celsius`, `Fahrenheit`, `Kelvin` (floats that
  print with their unit), `c_to_f`, `f_to_c`, `c_to_k`.
- `samplekit.bits` – `pop_count` for unsigned 64-bit integers, and the
  `Flags` interface bit field with `is_up`, `turn_down`, `set_broadcast`,
  `is_cast`.
- `samplekit.sequences` – `reverse` (in place), `rotate`,
  `remove_adjacent_duplicates`, `maps_equal`, `slices_equal` and
  `IntSlice`, an immutable integer run whose `append` doubles capacity.
- `samplekit.treesort` – `tree_sort`, an in-place sort through a binary tree.
- `samplekit.graph` – `Graph` with `add_edge` and `has_edge`.
- `samplekit.formatting` – `format_atom` and `display(name, x, out)` for
  walking nested lists, dicts and dataclasses.
- `samplekit.methods` – `print_methods(x, out)` lists a value's public
  methods with their signatures.
- `samplekit.bzip` – `Writer`, a bzip2-compressing writer over a binary
  stream; also usable as a context manager. `close` does not close the
  underlying stream.
- `samplekit.lissajous` – `lissajous(out, rng)` writes an animated GIF.
- `samplekit.mandelbrot` – `render(width, height, shade)` returns a Pillow
  image; shades are `mandelbrot`, `acos_color`, `sqrt_color`, `newton`.
- `samplekit.jpeg` – `to_jpeg(src, dst)` converts a PNG or JPEG image to
  JPEG and returns the input format; other input raises `ValueError`.
- `samplekit.servers` – `Counter`, `echo_response`, `describe_request`
  and `make_app` (a WSGI app that echoes paths and reports a count at
  `/count`).
- `samplekit.fetch` – `fetch(url, out)`, `fetch_timing(url)` and
  `fetch_all(urls)`, which fetches concurrently.
- `samplekit.hashing` – `command_line_hash(algo, text)` for `SHA512` and
  `SHA384`; any other name raises `ValueError`.

## Commands

| Command | What it does |
| --- | --- |
| `samplekit-echo [-n] [-s SEP] ARGS...` | print the arguments joined by a separator (`-n` omits the newline) |
| `samplekit-lines dup [FILES...]` | print lines that occur more than once, with their counts; without files, reads standard input up to a line `end` |
| `samplekit-lines dedup` | print each distinct line of standard input once |
| `samplekit-lines charcount` | count characters, UTF-8 lengths and invalid bytes on standard input |
| `samplekit-cf NUMBERS...` | show each number as Fahrenheit and Celsius, converted both ways and to Kelvin |
| `samplekit-bzipper < in > out.bz2` | bzip2-compress standard input to standard output |
| `samplekit-lissajous > out.gif` | write an animated Lissajous GIF; `samplekit-lissajous web` serves one per request on localhost:8000 |
| `samplekit-mandelbrot [--function F] [--size N] > out.png` | write a PNG of `mandelbrot`, `acos`, `sqrt` or `newton` (default 1024×1024) |
| `samplekit-jpeg < in.png > out.jpg` | convert a PNG or JPEG on standard input to JPEG |
| `samplekit-server [--mode echo\|count\|describe] [--host H] [--port P]` | run a small HTTP server (default: counting echo server on localhost:8000) |
| `samplekit-fetch [--all] URLS...` | print each URL's status and body (`http://` is prepended when missing); `--all` fetches in parallel and reports times and sizes |
| `samplekit-hash [-a ALGO] [-t TEXT]` | print the hex digest of a text by `SHA512` or `SHA384`; any other name, including the default `SHA256`, prints the hex of the text `Not a valid algorithm` |

Examples:

```
samplekit-echo -s , a b c
samplekit-cf 100 -40
samplekit-mandelbrot | samplekit-jpeg > mandelbrot.jpg
samplekit-hash -a SHA512 -t "Hello World!"
```

## What it does not do

The package has no SVG surface plotter, no unpacking of query parameters
into objects and no search endpoint built on that, no issue-tracker
search client or reports of its results, and no JSON output of sample
records.