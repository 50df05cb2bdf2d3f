# philosophers

A simulation of the dining philosophers problem. Each philosopher runs in its
own thread and shares one fork (a lock) with each neighbour. A monitor thread
watches for starvation and, optionally, for everyone having eaten enough.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [meals_each]
```

All times are in milliseconds. Every argument must be a positive integer
that fits in a 32-bit signed integer; a single leading `+` is accepted, and
nothing else but digits. If `meals_each` is given, the simulation stops once
every philosopher has eaten that many times.

Example:

```
philo 5 800 200 200 7
```

Each state change is printed on standard output as one line: the
milliseconds since the philosopher sat down (right-aligned in 8 columns), a
tab, the philosopher's number (right-aligned in 4 columns), a space and the
message. Messages are coloured with ANSI escape codes:

| Message            | Colour  |
|--------------------|---------|
| `has taken a fork` | green   |
| `is eating`        | magenta |
| `is sleeping`      | cyan    |
| `is thinking`      | cyan    |
| `died`             | red     |

Philosophers are numbered from 1. A philosopher dies when more than
`time_to_die` ms pass since the start of its last meal (or since it sat
down). Once a philosopher dies, or everyone has eaten enough, nothing more
is printed. A lone philosopher has only one fork: it takes it, waits
`time_to_die` ms and dies.

Exit status:

- `0` the simulation ran to its end;
- `1` invalid arguments (`Error: Invalid arguments passed.` is written to
  standard error, in red);
- `2` the table could not be set up for lack of memory;
- `3` the threads could not be started.

## As a library

```python
import sys
from philosophers.args import parse_args
from philosophers.table import Table

settings = parse_args(["4", "410", "200", "200", "3"])
table = Table(settings, sys.stdout)
table.run()
print(table.casualty)  # number of the philosopher who died, or None
```

- `philosophers.args`: `parse_args` builds a frozen `Settings`
  (`philosophers`, `time_to_die`, `time_to_eat`, `time_to_sleep`, `meals`)
  from the arguments after the program name, raising `ArgumentError` (a
  `ValueError`) when they are invalid. `parse_positive`, `parse_long` and
  `is_numeric` are the helpers it uses.
- `philosophers.clock`: `timestamp`, `time_since`, `sleep_ms` and
  `bounded_wait`, all in milliseconds.
- `philosophers.table`: `Table`, `Philosopher`, the `Action` enum and
  `format_line`, which formats one output line.
- `philosophers.cli`: `main(argv=None)`, the `philo` command, returning the
  exit status.

## Tests

```
pip install ".[test]"
pytest
```