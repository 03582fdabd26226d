# s1pview

Read one-port Touchstone files (`.s1p`) and turn each measurement point into
log-magnitude data, ready to be drawn as a line chart.

Each data line of an `.s1p` file holds three numbers separated by spaces:
frequency, the real part and the imaginary part of the reflection
coefficient. Lines that are empty or start with `#` or `!` are skipped. For
every point the log magnitude is computed as
`20 * log10(sqrt(real² + imag²))`; a point of zero magnitude gives `-inf`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
s1pview path/to/measurement.s1p
s1pview --bounds path/to/measurement.s1p
s1pview file:///path/to/measurement.s1p
```

By default one line is printed per point: the frequency and the log
magnitude, separated by a space. With `--bounds` only the axis bounds are
printed, as `min_x max_x min_y max_y`. The file may be given as a path or as
a `file:` URL.

A file whose extension is not `.s1p` (in any letter case), a file that
cannot be opened, or a data line that does not hold exactly three numbers
is reported on standard error, and the command exits with status 1.

## Library use

```python
from s1pview.touchstone import TouchstoneParser, ParseError
from s1pview.processing import LogMagProcessor
from s1pview.data_handler import DataHandler
from s1pview.graph import calculate_bounds

handler = DataHandler("measurement.s1p", TouchstoneParser(""), LogMagProcessor())
try:
    frequency, log_mag = handler.processed_data()
except ParseError as error:
    print(error)
else:
    print(calculate_bounds(frequency, log_mag))
```

The modules:

- `s1pview.touchstone`: `TouchstoneParser(file_path)` reads its
  `file_path` with `parse()`, which returns a list of `Sample` records
  (`frequency`, `real`, `imag`) and keeps them in `data`. It raises
  `FileOpenError` when the file cannot be opened and `FileFormatError` when
  its name or contents are wrong; both derive from `ParseError`.
  `is_s1p_file(path)` checks the extension alone.
- `s1pview.processing`: `LogMagProcessor.process(real, imag)` returns the log
  magnitude in dB. Other conversions can be supplied by subclassing
  `DataProcessor`.
- `s1pview.data_handler`: `DataHandler(file_path, parser, processor)` keeps
  its `file_path` in step with the parser's. When a parser is attached and
  the handler has no path of its own, the handler takes the parser's path;
  otherwise the parser takes the handler's. Assigning `None` to `parser`
  leaves the current parser in place. `processed_data()` returns the
  frequencies and processed values as two lists, and raises `RuntimeError`
  when no parser or processor is set.
- `s1pview.graph`: `calculate_bounds(x_axis, y_axis)` returns a `Bounds`
  (`min_x`, `max_x`, `min_y`, `max_y`); an empty axis spans 0 to 0.
  `GraphData` tracks the current `bounds` and fills an attached
  `LineSeries` with `(x, y)` points through `set_data`, `set_series` and
  `update_series`. Callables appended to `GraphData.bounds_changed` are
  called with the new bounds. `update_series` raises `ValueError` when the
  axes differ in length.
- `s1pview.manager`: `DataUiManager(data_handler, ui_handler, on_error)`
  loads a newly chosen file with `file_path_changed(file_path)`, passes the
  data to the UI handler's `set_data`, and hands parse error messages to
  `on_error`; on an error, or when the data handler lacks a parser or
  processor, empty data is shown. `file_url_to_path(url)` turns a `file:`
  URL into a local path and returns `""` for any other scheme.

## What it does not do

There is no chart window or other graphical display. `GraphData` and
`LineSeries` only hold the points and bounds a chart would draw; the
`s1pview` command prints them as text.