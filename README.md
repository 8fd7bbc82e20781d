# trafficflow

Forecasts how traffic intensity on a road grows over the years.

Each data set holds four values:

- `N1`: the traffic intensity in the first year of the forecast, a whole number
- `ΔN1`: the growth in year 1, in percent
- `a`, `b`: the coefficients of the growth law

The forecast runs from year `T0` to `Tmax` with step `ΔT`. The first value is
`N1`. Each later value is the one before it multiplied by `1 + rate / 100`
and cut down to a whole number. The rate comes from the year `T` of that
previous value:

- it is `ΔN1` when `T` is 1
- otherwise it is `(a + b) / ∛(T − 1)`

A step taken from a year below 1 is an error. So is a value that leaves the
range of an unsigned 32-bit integer.

## Installation

```
pip install .
```

## Command line

```
trafficflow create roads.tfp --t0 1 --tmax 20 --delta-t 1 --row 1000 5,0 1,5 2,0
trafficflow show roads.tfp
trafficflow calc roads.tfp --table roads.csv --chart roads.png
```

- `create PATH` writes a project file.
  - `--t0`, `--tmax`, `--delta-t` give the period. A value left out is stored as 0.
  - `--row N1 DN1 A B` adds one data set and may be repeated. Empty values count as 0.
- `show PATH` prints the period and the data sets of a project file.
- `calc PATH` prints the forecast table.
  - `--table FILE` also writes the table to a text file.
  - `--chart FILE` also draws the chart as a PNG image. The extension is changed to `.png` if it is another one.

Tables are printed with cells separated by `;` and a tab. The exported table
file has the same layout, is encoded in cp1251 and uses CRLF line ends.

Decimal values may be written with a comma or a point. They are shown with
three decimals and a comma.

Errors are reported on standard error, and the command then exits with
status 1.

## Library use

```python
from trafficflow.model import InputRow, Project, calculate
from trafficflow.storage import save_project, load_project, export_table
from trafficflow.chart import save_chart

project = Project(
    t0=1, tmax=20, delta_t=1,
    rows=[InputRow(number=1, n1=1000, delta_n1=5.0, a=1.5, b=2.0)],
)
save_project("roads.tfp", project)

table = calculate(load_project("roads.tfp"))
export_table("roads.csv", table.to_cells())
save_chart(table, "roads.png")
```

The modules are:

- `trafficflow.model`
  - `parse_project` builds a `Project` from the text of the period fields and the table cells. It raises `ValidationError` if a cell is empty or malformed, or if a field is out of range: `T0` and `Tmax` must be 0–65535, and `ΔT` must be 1–255.
  - `compute_series` gives the `(year, value)` points for one data set.
  - `calculate` gives a `ResultTable`.
- `trafficflow.validation` checks single typed keys and edited values.
  - `check_integer_key`, `check_float_key`, `check_period_key` and `check_cell_key` raise `KeyRejected` with a status message.
  - `validate_unsigned` and `validate_cell` check a whole value.
- `trafficflow.storage` reads and writes project files. `read_project`, `write_project`, `load_project` and `save_project` raise `StorageError`. `format_table` and `export_table` write table text.
- `trafficflow.grid`: `InputGrid` edits the data sets the way a table would.
  - It adds, inserts and deletes rows.
  - It sorts by the text of a column. Sorting the same column again reverses the order.
  - A `▲` or `▼` mark shows the sort in the header.
- `trafficflow.chart`: `series_points` lists the lines of the chart, and `save_chart` draws them to a PNG file.

## Project file format

The file is binary and little-endian. The order of the data is:

1. `T0` as a u16
2. `Tmax` as a u16
3. `ΔT` as a u8
4. the number of data sets as a u32
5. for each data set, `N1` as a u32, then `ΔN1`, `a` and `b` as float32 values

## What it does not do

There is no graphical window. Data is entered through the command line or
the library. Charts are saved only as PNG images.