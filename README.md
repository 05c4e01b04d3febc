# genalgo

A small genetic algorithm that maximises objective functions over integer
parameters. Each candidate holds a genotype of bounded, stepped genes. For
breeding, the genes are encoded as one binary string. Roulette-wheel selection,
single-point crossover and bit-flip mutation then evolve the population.

## Installation

```
pip install .
```

## Command line

```
genalgo [KIND] [--candidates N] [--max-populations N] [--min-improvement P] [--pop-check N]
```

`KIND` picks the problem:

| kind | genes                  | objective        |
|------|------------------------|------------------|
| 1    | x1, x2 in 0..10        | 2 · x1 · x2      |
| 2    | x1, x2 in 0..100       | x1 · x2 + x2     |
| 3    | x1, x2, x3 in 0..100   | x1 + x2 + x3     |

If `KIND` is left out, the program prints `Choose candidate type:` and reads the
first word from standard input. Any other number, or an answer that is not a
number, selects kind 1.

The options and their defaults are:

| option              | default | meaning                                                   |
|---------------------|---------|-----------------------------------------------------------|
| `--candidates`      | 20      | candidates in the first population                        |
| `--max-populations` | 200     | stop once the population number reaches this             |
| `--min-improvement` | 2       | percent change of the best value treated as a plateau     |
| `--pop-check`       | 5       | the run stops early when each of the last `pop-check - 1` changes between generations is below `--min-improvement` percent |

For each generation the program prints a line such as
`== Population #3 || best val: 180`. At the end it prints how many generations
ran, a report of the best candidate of the last population, and the best value
found over the whole run.

## Library use

```python
import random

from genalgo.algorithm import Algorithm
from genalgo.candidate import ProductPlusCandidate

rng = random.Random(1)
algorithm = Algorithm(ProductPlusCandidate(rng=rng), 20, 200, 2, 5, rng=rng)
best = algorithm.run()
```

`Algorithm.run()` returns the best rating found. Pass `out=` with a text stream
to send the progress lines somewhere other than standard output. A `pop_check`
below 1 raises `ValueError`.

The building blocks are:

- `genalgo.param.Param(x_start, x_end, dx, val=None, *, name="", rng=None)`: a
  gene whose value is one point of an evenly spaced grid. If no `val` is given,
  a random point is chosen. The gene has a `value` property, `values_count`,
  `set_range()`, `randomize()`, `index_of()` (nearest grid index, clamped to the
  range) and `describe()`.
- `genalgo.candidate.Candidate`: the abstract base for a genotype. A subclass
  declares its genes in `GENES` as `(name, start, end, step)` tuples and
  implements `calc_rate()`, which stores and returns the rating. Candidates
  also provide `create()`, `copy()`, `to_binary()`, `set_from_binary()`,
  `gene_value()`, `max_bits()` and `describe()`. `set_from_binary()` clamps
  each gene to its range. It raises `ValueError` when the bits for a gene are
  missing or are not binary.
- `ProductCandidate`, `ProductPlusCandidate` and `SumCandidate`: the three
  built-in problems from the table above.
- `genalgo.candidate.decimal_to_binary()` and `needed_bits()`: the helpers
  behind the binary encoding.
- `genalgo.population.Population`: one generation. Its methods are:
  - `calculate()` rates every candidate.
  - `best_rate()` gives the highest stored rating, or -1 when the population is empty.
  - `select()` does roulette-wheel selection.
  - `cross()` exchanges the bit tails of two candidates.
  - `mutation()` flips each bit with a 5 % chance.
  - `next_generation()` breeds a new population. Each pair is mutated with a
    chance of about one in four; otherwise it is crossed.
  - `selection_test(n)` runs selection `n` times and returns `SelectionResult`
    records (id, hits, percent), the most picked first.
  - `describe()` lists the ratings.
- `genalgo.algorithm.Algorithm`: the generational loop. It has the stop checks
  `is_max_population()`, `is_min_improvement()` and `is_stop()`.
- `genalgo.cli.make_candidate(kind)`: builds a pattern candidate for a kind
  number. `genalgo.cli.main(argv=None)` is the command above.

Every class that draws random numbers takes an optional `rng`
(`random.Random`), so a run can be made reproducible.

## What it does not do

The package only prints its progress and its result. It does not save runs,
export populations or plot results. It also does not read objective functions
from a file: new problems are added by subclassing `Candidate`.

## Tests

```
pip install .[test]
pytest
```