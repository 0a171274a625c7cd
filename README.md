# dining

A simulation of the dining philosophers problem. Each philosopher runs in its
own thread. A philosopher takes the two forks beside it, eats, sleeps and
thinks, and repeats this. The simulation stops when a philosopher starves, or
when every philosopher has eaten the required number of meals.

## Installation

```
pip install .
```

## Usage

```
dining NUMBER_OF_PHILOSOPHERS TIME_TO_DIE TIME_TO_EAT TIME_TO_SLEEP [MEALS]
```

You can also run `python -m dining.cli` with the same arguments.

All times are in milliseconds.

- `NUMBER_OF_PHILOSOPHERS`: how many philosophers sit at the table. There is one fork for each philosopher.
- `TIME_TO_DIE`: a philosopher dies if this much time passes after it last started eating and it has not started another meal.
- `TIME_TO_EAT`: how long a meal takes. During a meal the philosopher holds both of its forks.
- `TIME_TO_SLEEP`: how long a philosopher sleeps after eating.
- `MEALS` (optional): the simulation ends once every philosopher has eaten this many times. If it is `0`, the program exits at once with status 0.

An argument may contain only digits, spaces and `+`. Leading whitespace and one
leading `+` are allowed before the number. The first four values must be
positive. No value may be above 2147483647, and the program refuses more than
62250 philosophers. If an argument is invalid, the program prints a message,
for example `invalid input` or `Please enter positive numbers`, and exits with
status 1.

A single philosopher has only one fork. It picks that fork up and can never
eat, so it starves once `TIME_TO_DIE` has passed.

### Example

```
dining 5 800 200 200 7
```

Each event is printed on its own line. A line holds the time in milliseconds
since the start, the philosopher's number, and the event. The output looks
like this (the exact timings vary):

```
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
200 1 is sleeping
400 1 is thinking
...
```

When a philosopher starves, the program prints `<time> <id> died`. No other
events are printed after that.

## Library use

The same pieces can be used from Python:

- `dining.parsing.parse_args(args)` turns the argument list, without the program name, into a frozen `Config` with the fields `count`, `time_to_die`, `time_to_eat`, `time_to_sleep` and `max_meals`. `max_meals` is `None` when no meal count was given. It raises `ArgumentError`, a subclass of `ValueError`, for bad input, and `NoMealsRequired` when the meal count is zero. `parse_int` and `check_characters` are the two checks it uses.
- `dining.simulation.Table(config, output=None)` sets up the philosophers and forks. `Table.run()` runs the simulation until it ends. Status lines are written to `output`, or to standard output if no stream is given. `Status`, `Fork`, `Philosopher` and `assign_forks` describe the table.
- `dining.sync.LockedValue` is a value protected by a lock. It has `get()`, `set(value)` and `increment()`.
- `dining.timing.now_ms()` returns the current wall-clock time in whole milliseconds. `dining.timing.precise_sleep(milliseconds)` sleeps for the given time and wakes often so that it does not oversleep.
- `dining.cli.main(argv=None)` is the command's entry point. It returns the exit status.