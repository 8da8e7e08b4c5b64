# clubledger

`clubledger` reads the event log for one working day at a computer club.
It replays the log and prints every event, together with the events the
club generates in response. It finishes with the revenue and occupied time
of each table.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Usage

```
clubledger day.txt
```

The report goes to standard output and the exit status is 0. If the
command is run without an argument, it prints a usage line to standard
error and exits with status 1.

### Input format

```
3
09:00 19:00
10
08:48 1 client1
09:41 1 client1
09:48 1 client2
09:54 2 client1 1
10:25 2 client2 2
12:33 4 client1
```

1. Number of tables. Must be a positive integer.
2. Opening and closing time as `HH:MM HH:MM`. Closing must be later than opening.
3. Price per hour. Must be a positive integer.
4. One event per line: `HH:MM <id> <client> [table]`. The table number is
   given only for id 2 and must be between 1 and the number of tables.

Client names may contain only ASCII letters, digits, `-` and `_`.

Incoming event ids:

| id | meaning |
|----|---------|
| 1  | client arrives |
| 2  | client sits at a table |
| 3  | client waits in the queue |
| 4  | client leaves |

Outgoing event ids:

| id | meaning |
|----|---------|
| 11 | client leaves, either at closing time or because the queue is full |
| 12 | the first client in the queue takes a table that has just been freed |
| 13 | error, followed by its name |

Error names:

- `YouShallNotPass`: a client arrives while already in the club.
- `NotOpenYet`: a client arrives before opening or after closing time.
- `ClientUnknown`: a client who is not in the club sits, waits or leaves.
- `PlaceIsBusy`: a client asks for a table that is occupied.
- `ICanWaitNoLonger!`: a client asks to wait while a table is free.

A client who asks to wait when the queue already holds as many clients as
there are tables is sent away at once with event 11. A client who changes
tables is billed for the table they leave. At closing time the clients
still in the club leave in alphabetical order, each with event 11, and
their tables are billed up to closing time.

### Output

The output has four parts:

1. The opening time.
2. Every event, in the order it was processed.
3. The closing time.
4. One line per table: `<table> <revenue> <HH:MM occupied>`.

Each session at a table is billed per started hour at the hourly rate. The
occupied time counts exact minutes.

### Errors

If the input is bad, the command prints one line and exits with status 1:

- the offending line, when a configuration line or an event line is malformed;
- `Empty file`, `Missing time configuration line` or `Missing hourly rate line`
  when the input ends too early;
- `Failed to open file: <path>` when the file cannot be opened.

## Library use

```python
from clubledger.manager import simulate

lines = ["2", "09:00 23:00", "100", "10:00 1 alice", "10:05 2 alice 1"]
for line in simulate(lines):
    print(line)
```

`run(path)` does the same for a file. Both return the report as a list of
lines and raise `ClubInputError` on bad input. The message of that error is
the line the command would print.

The parts can also be used on their own:

```python
from clubledger.manager import ClubManager, parse_config, parse_event

config = parse_config(["2", "09:00 23:00", "100"])
manager = ClubManager(config)
manager.process(parse_event("10:00 1 alice", config))
manager.finalize_day()
print("\n".join(manager.report()))
```

The package has these modules:

- `clubledger.clocktime`: `ClockTime` and `parse_time`
- `clubledger.client`: `Client`
- `clubledger.config`: `ClubConfig`
- `clubledger.table`: `Table`
- `clubledger.events`: `EventId` and the event classes