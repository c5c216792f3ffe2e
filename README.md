# dbfkit

Building blocks for working with dBASE (`.dbf`) table files: resolving
character-set names, choosing the dBASE language-driver byte for an
encoding, encoding and decoding text, and handling the "date of last update"
stored in a table header.

## Installation

```
pip install dbfkit
```

## Encoding names

`dbfkit.aliases.resolve_alias` and `dbfkit.ibm_aliases.resolve_ibm_alias`
map an encoding alias to its canonical name, or return `None` when the alias
is unknown. Matching is exact and case-sensitive. The first covers the
ISO-8859, Macintosh, Windows, KOI8, EUC-JP, Big5 and Shift_JIS families; the
second covers IBM, EBCDIC and DOS code pages.

```python
from dbfkit.aliases import resolve_alias
from dbfkit.ibm_aliases import resolve_ibm_alias

resolve_alias("latin2")      # "ISO-8859-2"
resolve_ibm_alias("cp866")   # "IBM866"
resolve_alias("no-such")     # None
```

## Encodings, language drivers and codecs

`dbfkit.encoding` combines both alias tables:

- `canonical_encoding(name)` returns the canonical name, or `None`.
- `language_driver_code(encoding)` returns the dBASE language-driver byte
  (header offset 29) for an encoding. Encodings without a known driver get
  `DEFAULT_LANGUAGE_DRIVER`, which is `0x57` (ANSI).
- `python_codec(name)` returns the name of the Python codec that handles
  the encoding, and raises `LookupError` when there is none.
- `encode_text(text, encoding)` encodes text; characters the encoding lacks
  become `?`.
- `decode_text(data, encoding)` decodes bytes; undecodable bytes become
  U+FFFD.

```python
from dbfkit.encoding import language_driver_code, python_codec, encode_text, decode_text

language_driver_code("cp866")        # 0x65
language_driver_code("UTF-8")        # 0x57
python_codec("cp866")                # "cp866"
decode_text(encode_text("Привет", "cp866"), "cp866")   # "Привет"
```

## Header date of last update

`dbfkit.header.UpdateDate` is the header's three-byte year/month/day value.
The year is stored as years since 1900, so 1900 to 2155 can be held; each
field must fit in one byte, otherwise `ValueError` is raised.

- `UpdateDate.from_date(when)` encodes a date or datetime, dropping the time
  of day; years outside 1900–2155 raise `ValueError`.
- `UpdateDate.from_bytes(data)` reads the first three bytes; fewer than three
  raise `ValueError`.
- `UpdateDate.today()` encodes today's local date.
- `to_bytes()` returns the three bytes; `to_date()` returns a `datetime.date`,
  rolling out-of-range months and days over into neighbouring months and
  years (month 0 is December of the year before, day 0 the last day of the
  previous month).
- The `year` property gives the calendar year.

`low_def_time(when)` reduces a date or datetime to a plain date.

```python
import datetime
from dbfkit.header import UpdateDate

stamp = UpdateDate.from_date(datetime.date(2018, 12, 1))
list(stamp.to_bytes())                  # [118, 12, 1]
UpdateDate(118, 0, 1).to_date()         # datetime.date(2017, 12, 1)
```

## What this package does not do

There is no table type here: dbfkit does not open, parse, create or save
`.dbf` files, does not define field descriptors or records, and has no
command-line tool. It offers only the encoding helpers and the header date
described above.

## Running the tests

```
pip install dbfkit[test]
pytest
```