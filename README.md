# datui

A terminal viewer for tabular data. Run it on a file to browse its rows
and columns in the terminal.

## Supported formats

The reader is picked by the file extension. Case does not matter.

| Extension            | Read as                                         |
|----------------------|-------------------------------------------------|
| `.csv`               | comma-separated values                          |
| `.tsv`               | tab-separated values                            |
| `.psv`               | pipe-separated values                           |
| `.json`              | a JSON array of objects, or a single object     |
| `.jsonl`, `.ndjson`  | one JSON object per line (blank lines skipped)  |
| `.parquet`           | Parquet, read with `pandas.read_parquet`        |

Any other extension is reported as `Unsupported file type`.

Parquet files need a Parquet engine that pandas can use. This package does
not install one. Without an engine, opening a `.parquet` file fails with an
error.

## Installation

```
pip install .
```

## Usage

```
datui data.csv
```

Options:

- `--skip-lines N`: drop the first N lines of a CSV file before it is parsed.
- `--skip-rows N`: skip N rows when the CSV file is parsed.
- `--no-header true|false`: with `true`, the CSV file has no header row, and
  its columns are named `column_1`, `column_2`, and so on.
- `--delimiter BYTE`: a delimiter given as a byte value (0–255). It is
  accepted and stored in the open options, but the CSV reader always splits
  on commas. Use a `.tsv` or `.psv` file for tab or pipe separators.
- `--debug`: show a status line with event, key and frame counters and the
  last key pressed.
- `--version`: print the version and exit.

`--skip-lines`, `--skip-rows` and `--no-header` apply only to `.csv` files.

If a file cannot be opened, the viewer exits, prints `Error: <message>` to
standard error and returns exit status 1.

## Keys

| Key                 | Action                                        |
|---------------------|-----------------------------------------------|
| Down / `j`          | select the next row; scroll at the bottom     |
| Up / `k`            | select the previous row; scroll at the top    |
| Right / `l`         | scroll one column to the right                |
| Left / `h`          | scroll one column to the left                 |
| PgDown / PgUp       | move a page down or up                        |
| Home                | go back to the first row                      |
| `i`                 | show or hide the info panel                   |
| `q` / Esc           | quit                                          |

A bar at the bottom of the screen lists the main keys.

The info panel appears on the right, at most 50 columns wide. It shows the
number of rows and columns, a gauge for the position of the selected row, and
the schema: each column name with its type (`i64`, `f64`, `bool`, `str`,
`datetime[...]`, `cat`, ...).

Columns are sized to fit their contents. Columns that do not fit on the
screen are hidden; scroll right to reach them. A text column at the right
edge is cut off to fit.

## Using it from Python

The viewer's parts can be used without a terminal. `datui.render` provides a
`Rect`, a `Buffer` of character cells and a `split` layout helper. Each
widget draws into a `Buffer`.

```python
from datui.datatable import DataTable, DataTableState
from datui.options import OpenOptions
from datui.render import Buffer, Rect

state = DataTableState.from_csv("data.csv", OpenOptions().with_skip_rows(2))
area = Rect(0, 0, 80, 10)
buf = Buffer(area)

DataTable().render(area, buf, state)   # sets state.visible_rows from the area
state.collect()                        # loads the visible window
DataTable().render(area, buf, state)

print(state.num_rows)
print("\n".join(buf.lines()))
```

Other pieces:

- `datui.app.App`: takes a queue of events and handles them with
  `App.event` (events are in `datui.events`). `App.render` draws the whole
  screen.
- `datui.info.DataTableInfo`, `datui.controls.Controls` and
  `datui.debug.DebugState`: the info panel, the key bar and the debug line.
- `datui.schema.SchemaView`: a bordered table of a pandas DataFrame's column
  names and types. The viewer itself does not use it.
- `datui.cli`: `parse_args`, `open_options_from_args`, `run` and `main`,
  the functions behind the `datui` command.

## Limitations

- The viewer is read-only. It cannot edit, sort, filter or search data.
- Every file is loaded fully into memory as a pandas DataFrame.
- The Tab key changes an internal focus value, but nothing on screen
  responds to it.

## Running the tests

```
pip install .[test]
pytest
```