# advent2023

Solutions for days 19 to 25 of a December puzzle calendar, together with a
small toolkit to run them, time them and keep a benchmark table in your
`README.md` up to date.

## Layout of your working directory

Puzzle inputs are read relative to the current directory:

- `data/inputs/NN.txt` – your personal puzzle input for day `NN`
- `data/examples/NN.txt` – the example input from the puzzle text
- `data/timings.json` – stored benchmark results

Day numbers are always written with two digits (`01` to `25`).

## Command line

Install the package, then use the `advent2023` command:

```
advent2023 solve 19              # run day 19 once on data/inputs/19.txt
advent2023 solve 19 --release    # the same, with Python started as `python -O`
advent2023 all                   # run every day that has a solution module
advent2023 all --release         # the same, with `python -O`
advent2023 time --all --store    # benchmark all days, store timings and update README.md
advent2023 time 21               # benchmark a single day
```

Each day runs in its own child process as `python -m advent2023.dayNN`.
You can also start a day module directly; with `--time` every part is run
repeatedly (about a second's worth, between 10 and 10,000 runs) and the
average time is printed:

```
python -m advent2023.day22 --time
```

`time` without a day and without `--all` only benchmarks the days that do not
yet have timings for both parts. With `--store`, the new results are merged
into `data/timings.json` and the table between the two
`<!--- benchmarking table --->` markers in `README.md` is rewritten. Days
without a solution module are reported as "Not solved.".

## Using the solutions from Python

Every day module offers `part_one(text)` and `part_two(text)`, taking the
puzzle input as a string:

```python
from advent2023.days import Day
from advent2023.inputs import read_file
from advent2023 import day19

text = read_file("inputs", Day.parse("19"))
print(day19.part_one(text), day19.part_two(text))
```

The available days are `day19` (workflows and part ratings, built on
`advent2023.workflows`), `day20` (pulse propagation), `day21` (garden step
counting), `day22` (falling bricks), `day23` (longest hiking path), `day24`
(hailstone trajectories) and `day25` (splitting a wiring graph). A part that
has no answer returns `None`: day 25 has no second part, and day 24's second
part needs at least three hailstones.

Helpers such as `advent2023.mathutil.gcd` / `lcm`, the `Day` type and
`all_days()` in `advent2023.days`, the `Timings` store in
`advent2023.timings` and the table writer in `advent2023.readme_benchmarks`
can be used on their own as well.

## What is not included

- Only days 19 to 25 have solutions; running other days prints "Not solved.".
- There is no command to download puzzle inputs or descriptions, to create
  files for a new day, or to submit answers. Put your inputs into
  `data/inputs/` yourself.

## Running the tests

```
pip install -e ".[test]"
pytest
```