# advent

A small framework for daily puzzle solutions: it scaffolds a module for each
day, runs solutions, times them, and keeps a benchmark table in your
`README.md` up to date.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

Every command is run through the `advent` entry point, from the root of a
project that holds the `advent` package directory and a `data` directory:

```
advent scaffold 7             # create advent/solutions/day07.py and empty input/example files
advent scaffold 7 --overwrite # scaffold, replacing an existing solution module
advent scaffold 7 --download  # scaffold, then fetch the input and puzzle text
advent download 7             # fetch the input and puzzle description via the `aoc` tool
advent read 7                 # print the puzzle description via the `aoc` tool
advent solve 7                # run both parts of day 7 in a child Python process
advent solve 7 --release      # the same, with the child run under `python -O`
advent solve 7 --dhat         # the same, with the child run under `-X tracemalloc`
advent solve 7 --submit 1     # run, then submit the answer to part 1
advent all                    # run every day that has a solution module
advent time                   # benchmark days that have no complete timings yet
advent time 7                 # benchmark one day
advent time --all --store     # benchmark every day and store the results
advent today                  # in December (1st-25th, UTC-5): scaffold, download and read today's puzzle
```

A day is a number from 1 to 25; it is shown padded to two digits (`07`).

Inputs are read from `data/inputs/<day>.txt` and examples from
`data/examples/<day>.txt`. Downloaded puzzle text goes to
`data/puzzles/<day>.md`. Stored timings live in `data/timings.json`.

`all` and `time` skip a day whose `advent/solutions/dayNN.py` does not exist
in the working directory, reporting it as "Not solved.".

Downloading, reading and submitting need the external `aoc` command on your
`PATH`. If `AOC_YEAR` is set, its value is passed to `aoc` as `--year`.

A solution module can also be run directly; `--time` benches each part
(10 to 10000 runs, about a second) and `--submit <part>` submits that part:

```
python -m advent.solutions.day01 --time
```

## Benchmark table

`advent time --store` merges the new timings into `data/timings.json` and
replaces the part of `README.md` between two `<!--- benchmarking table --->`
markers with a table of timings per day and the total run time.

## Library use

```python
from advent.day import Day, all_days
from advent.timings import Timings

day = Day.parse("8")
print(day)                  # 08
timings = Timings.read_from_file("data/timings.json")
print(timings.total_millis())
```

Solutions live in `advent.solutions` as `day01`, `day02`, `day03`, `day05`
and `day06`, each providing `part_one(input)` and `part_two(input)`.

## What is not included

There is no solution for day 4, and the package has no two-dimensional grid
helper; puzzles that need one must bring their own.