# hobbykit

A collection of small, independent utilities. Each one lives in its own
module, and most of them also come with a command-line tool.

The package needs only the standard library and runs on Python 3.10 or later.
Install it with your usual installer. The `test` extra adds pytest.

## Command-line tools

| Command | What it does |
| --- | --- |
| `hobbykit-endian` | Reports whether this machine is little or big endian. |
| `hobbykit-peid FILE` | Tells whether `FILE` is a 32-bit or 64-bit Windows executable. |
| `hobbykit-spline` | Prints sample tables for the Hermite, x-form Hermite and spline curves, and for the tangent converter. |
| `hobbykit-pathfind` | Floods step distances over the built-in 8×8 map, then prints the distance map and the waypoints from (4, 4) to (0, 7). |
| `hobbykit-sortbench [LENGTH]` | Times the interleave-based merge sort against quicksort and the built-in sort on random, ascending and descending data. |
| `hobbykit-gear [options]` | Writes the outline of a gear wheel or a rack as an SVG file. The default file is `gear.svg`. |

### Gear options

```
hobbykit-gear -o wheel.svg -c 16 -r 300 -d 80 -z 1 -v -f
```

- `-o` output file name
- `-f` fill the background
- `-v` add a viewBox
- `-i` use the inverted-wheel presets
- `-r` radius, `-d` tooth depth, `-c` number of cogs, `-z` zoom
- `-l` draw a straight rack of the given length, `-w` rack width increase
- `-gt`, `-gb`, `-gc` graphical ratio of the top, the bottom and the curve
- `-st`, `-sb`, `-sc` number of steps for the top, the bottom and the curve
- `-b` bend ratio
- `-h` print the help text to standard error (the file is still written)

An option is only read when at least one more argument follows it. Unknown
options are ignored.

## Library use

### Sorting

`hobbykit.sorting` has an in-place merge sort built on an interleaving merge
(`interleave`, `binary_sort`, `binary_sort_chunked`). It also has `quicksort`
and chunked variants of quicksort and the built-in sort. Some of these finish
with an interleave merge (`quicksort_merge`, `stdsort_merge`).
`count_inversions` counts adjacent pairs that are out of order.

```python
from hobbykit.sorting import binary_sort, count_inversions

values = [5.0, 1.0, 4.0, 2.0, 3.0]
binary_sort(values)
assert count_inversions(values) == 0
```

`hobbykit.sortbench` provides the random number generators and data fillers
that the benchmark uses (`RotatingRandom`, `LegacyRandom`, `random_values`,
`ascending_values`, `descending_values`), along with `run_benchmark`, which
writes its report to a text stream and returns one result per run.

### Curves

```python
from hobbykit.spline import hermite, spline, TangentConverter

conv = TangentConverter.from_hermite(1.0, 2.0, 3.0, 4.0)
t0, t1 = conv.hermite_tangents()
y = hermite(0.5, 1.0, t0, t1, 4.0)
s0, s1 = conv.spline_tangents()
same_curve = spline(0.5, 1.0, s0, s1, 4.0)
```

`hermite_x1` to `hermite_x4` are the x-form variants. They take the
neighbouring sample values in place of the tangents.

### Path finding

```python
from hobbykit.pathfind import Grid, find_path

grid = Grid([
    "....",
    ".##.",
    "....",
])                              # '#' is blocked, '.' is open
result = find_path(grid, (0, 0), (3, 2), 4)
print(result.render())
```

Use 4 or 8 directions. `distance_map` returns the step count to every
reachable cell. `find_path` raises `ValueError` when the target cannot be
reached.

### Executables

`hobbykit.peid.identify(stream)` and `identify_file(path)` return an
`ExecutableKind` for a Windows PE file.

### SVG and gears

`hobbykit.svg` has small SVG string helpers (`attribute`, `point`,
`translate`, …), an `SvgWriter` context manager and `Limits` for picking
round tick steps. `hobbykit.gear` parses the command-line options into
`GearOptions` (`parse_args`), builds the outline (`gear_outline`) and writes
the document (`write_gear`).

### APE gain tags

`hobbykit.apeformat` parses APEv1/v2 tags, Lyrics3 v2 tags and ID3v1 tags
at the end of an MP3 file, and keeps the ReplayGain and MP3Gain fields in a
`GainTagInfo`. `hobbykit.apetag` works on files directly:

- `read_gain_tags(path)` reads the tags.
- `write_gain_tags(path, info, file_tags, preserve_timestamp)` rewrites the
  APE tag with the gain fields. Other fields, and any Lyrics3 or ID3v1 tag,
  are kept.
- `remove_gain_tags(path, preserve_timestamp)` removes the gain fields.

## What the package does not do

- It has no tool for estimating CPU speed (MIPS or MFLOPS); the only timing
  tool is the sorting benchmark.
- The APE tag functions only read and write the stored gain values. They do
  not analyse audio or change the volume of an MP3 file, and there is no
  command-line tool for them.