# cpsolvers

Solutions to a collection of short competitive-programming problems, grouped
by difficulty rating. Each problem is a plain Python function that takes the
data of one test case and returns its answer, so the solutions can be reused,
tested or combined freely. A small command-line tool reads the usual
multi-test-case input format for some of the problems and prints the answers.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Using the functions

The solutions live in modules named after their rating band:

| Module                   | Problems                 |
|--------------------------|--------------------------|
| `cpsolvers.rating800a`   | rating 800, first half   |
| `cpsolvers.rating800b`   | rating 800, second half  |
| `cpsolvers.rating900a`   | rating 900, first half   |
| `cpsolvers.rating900b`   | rating 900, second half  |
| `cpsolvers.rating1100a`  | rating 1100, first half  |
| `cpsolvers.rating1100b`  | rating 1100, second half |

Every function works on one test case and returns its answer as a Python
value: yes/no answers are `bool`, and where a problem has no answer the
function returns `None`. Input that a function cannot work with, such as an
empty list where a value is required, raises `ValueError`.

```python
from cpsolvers.rating800a import count_extremely_round
from cpsolvers.rating900b import longest_divisor_interval
from cpsolvers.rating1100a import berries_needed, count_orders
from cpsolvers.rating1100b import max_aquarium_height, stable_descending_order

count_extremely_round(9)                          # 9
longest_divisor_interval(12)                      # 4
berries_needed(5)                                 # 10
count_orders([10, 20, 30], [5, 15, 25])           # 1
max_aquarium_height([3, 1, 2, 4, 6, 2, 5], 9)     # 4
stable_descending_order([3, 1, 3, 2])             # [0, 2, 3, 1]
```

`stable_descending_order` returns the indices of the values sorted from
largest to smallest, keeping equal values in their original order.

## Using the command line

The `cpsolve` command takes the name of a problem and reads its input from
standard input: a test-case count followed by the cases, as whitespace
separated numbers. It prints one answer line per test case.

```
printf '2\n1\n3\n' | cpsolve cloudberry-jam
```

prints `2` and `6`. The problems the command knows are:

- `cloudberry-jam`
- `maximum-sum`
- `sort-the-subarray`
- `quests`
- `yarik-and-array`
- `building-an-aquarium`
- `cardboard-for-pictures` (a case with no answer prints no line)

`cpsolve --help` lists them. When the input ends early or cannot be answered,
the command prints an error to standard error and exits with status 1.

The same is available from Python through `cpsolvers.cli.run(problem, text)`,
which takes the problem name and the whole input as a string and returns the
output text; an unknown problem name raises `ValueError`.

## What it does not do

Only the seven problems above can be run from the command line. All other
problems, including every rating 800 and 900 problem and the first half of
the rating 1100 problems apart from `cloudberry-jam`, are available only as
Python functions; there is no input reader for them.