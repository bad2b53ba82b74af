# fugegga

A compact genetic-algorithm library for cooperative coevolution. Populations
of bit-string genotypes evolve generation by generation, and each one keeps a
set of representatives (its best members) for another population to cooperate
with. The package also holds the parameter set of a fuzzy-system coevolution
experiment and a command-line option parser for such runs.

## Modules

- `fugegga.randomness`: `RandomGenerator`, a thread-safe, seedable generator,
  and `get_generator()`, which returns one shared instance.
  `random(low, high)` and `random_real(low, high)` return an offset in
  `[0, |high - low|]` (not shifted by `low`); `random_no_rand_max(low, high)`
  returns an integer between the two bounds, both included. `reset_seed(seed)`
  reseeds it.
- `fugegga.bits`: `bits_to_uint` (bits read most significant first, as an
  unsigned 32-bit value), `bits_to_string` (its decimal text), `invert_bits`
  and `elapsed_ms(start, end)` (seconds in, milliseconds out).
- `fugegga.genotype`: `Genotype` (a list of bits, `Genotype.zeros(length)`,
  `copy()`), `PopEntity` (a genotype and a fitness, ordered by fitness,
  `PopEntity.with_length(length)`, `copy()`), and the subclasses `Individual`
  and `Representative`.
- `fugegga.statistics`: `StatisticEngine`. Call `add_fitness` for each value,
  then `build_stats()`; it exposes `min_fitness`, `max_fitness`,
  `mean_fitness` and `standard_deviation` (population deviation). A minimum of
  zero counts as unset. `build_stats()` raises `ValueError` when no value was
  recorded. `EvolutionaryMeasure`, `PopulationDiversity`, `Entropic` and
  `AllPairPossibility` only hold a list of individuals; they compute nothing.
- `fugegga.selection`: `Elitism` (fittest first), `ElitismWithRandom` (the
  `quantity - 1` fittest plus one random entity), `RankBasedSelection` (each
  pick is the fittest of a random sample of a tenth of the population, so
  repeats are possible) and `TournamentSelection`, which selects nothing.
- `fugegga.reproduction`: `OnePoint` crossover of consecutive pairs (the bits
  from a random cut point up to, but not including, the last bit are swapped)
  and `Toggling` mutation (each bit flipped with a per-bit probability, or one
  random bit when that probability is zero).
- `fugegga.population`: `Population`, a named list of randomly initialised
  entities with its representatives: `replace`, `randomize`,
  `set_representatives`, `representatives`, `entity_at`, `entity_copy`,
  `select`, `select_copies`, `entities`, `entities_copy` and
  `Population.from_population`.
- `fugegga.evolution`: `EvolutionEngine`, the generation loop. Subclass it and
  implement `evaluate_population(population, generation)`, returning `False`
  to stop early. Two engines can be joined with a shared barrier such as
  `threading.Barrier(2)` passed to `start_evolution`.
- `fugegga.loggers`: `LoggerLevel`, the abstract `Logger` and
  `PopulationLogger`, which keeps a snapshot of the population on every
  `log()` and writes them with `save_logs()` to a CSV file with the columns
  `Genotype,Fitness,Elite`.
- `fugegga.parameters`: `SystemParameters`, a dataclass with every experiment
  parameter (integers left unset hold -1), and `get_parameters()`, which
  returns a shared instance. `set_nb_out_vars` also sizes the per-output
  thresholds; `threshold_value`, `set_threshold_value` and `resize_threshold`
  manage them.
- `fugegga.runsettings`: `RunSettings` and `apply_run_settings(params,
  settings)`, which copies a full set of run values into a `SystemParameters`,
  creates the save directory, stores the save path with a trailing `/` and
  gives every output variable the same threshold.
- `fugegga.cli`: `parse_arguments`, `CommandOptions`, `ArgumentError`,
  `help_text` and `main`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from fugegga.evolution import EvolutionEngine
from fugegga.population import Population
from fugegga.randomness import RandomGenerator


class OnesCount(EvolutionEngine):
    def evaluate_population(self, population, generation):
        for entity in population.entities():
            entity.fitness = sum(entity.genotype.bits) / len(entity.genotype)
        return True


rng = RandomGenerator(42)
population = Population("demo", 20, 16, rng)
engine = OnesCount(population, 30, 0.8, 0.1, 0.05, rng)

elite_selection, rank_selection = engine.entity_selectors()
engine.start_evolution(
    30,
    elite_selection, 2,
    rank_selection, 18,
    engine.mutation_methods()[0],
    engine.crossover_methods()[0],
    1,
)
print(max(entity.fitness for entity in population.entities()))
```

Each generation the population is rebuilt from the evolved individuals
followed by the elites, so keep the two counts summing to the population size.

## Command line

```
fugegga --help
fugegga -d data.csv -s script.js -g no
fugegga --evaluate -d data.csv -f system.ffs
```

Options:

- `-d PATH`: dataset; it is also recorded as `dataset_name` in the shared
  parameters.
- `-s PATH`: run script.
- `-f PATH`: fuzzy system file, needed for `--evaluate` and `--predict`.
- `-g yes|no`: whether a GUI is wanted.
- `--verbose`, `--evaluate`, `--predict`.
- `--help`: print the option list.

Each path must exist. An automatic run needs both a dataset and a script;
evaluation or prediction needs a dataset and a fuzzy system, and the two cannot
be asked for together. On an invalid command line the error is printed and the
exit status is 1; otherwise it is 0.

## What it does not do

The command only checks the command line. It does not read datasets, run
scripts, build or evaluate fuzzy systems, make predictions, or show a GUI or
plots; those are left to the program that uses the parsed `CommandOptions`.