# pokedsl

A small pure-Python library for describing monster-battling game data (types,
abilities, items, moves, species and type charts), loading it from RON files
into a dex, and computing stats across game generations. It has no
dependencies beyond the standard library.

## Modules

- `pokedsl.generation`: `Generation` (a number from 1 to 255; anything else
  raises `ValueError`) and generation-dependent values: `Always`, `GenEqual`,
  `GenFrom` (the value from a generation onwards) and `GenUntil` (the value
  before a generation). Each of the last three falls back to an `otherwise`
  value; `get(generation)` picks the one that applies.
- `pokedsl.stats`: the `Stat` enum and the frozen `Stats` block of six 16-bit
  values (`hp`, `atk`, `def_`, `spa`, `spd`, `spe`). `stats[Stat.ATK]` reads a
  value and `stats.with_stat(stat, value)` returns a changed copy. In
  generation 1 `spa` also stands for the single Special stat.
- `pokedsl.nature`: the 25 `Nature` values with `increased_stat()`,
  `decreased_stat()` and `is_neutral()`.
- `pokedsl.formulas`: `stat_formula(generation)` returns a
  `Gen12StatFormula` for generations 1 and 2 and a `Gen3OnwardsStatFormula`
  otherwise; `nature_factor(stat, nature)` gives 1.1, 0.9 or 1.0.
- `pokedsl.config`: `Config.from_generation(generation)` pairs a generation
  with its stat formula.
- `pokedsl.pokemon`: `StoredPokemon` (species by id) and `Pokemon` (species
  resolved), with `current_form()` and `calc_stats(config)`.
- `pokedsl.dsl`: the description language used inside records: conditions
  (`AlwaysCondition`, `And`, `Or`, `Not`, `Predicate`, with the battle
  predicates `Prob` and `TargetPredicate`), effects (`NoEffect`,
  `ConditionalEffect`, `Sequence`), `Exact` numbers, attempts
  (`SimpleAttempt`, `Cascade`, `Combo`), triggers (`TurnStart`, `TurnEnd`,
  `DamageDealt`), `TriggerEffect` and `Effectiveness`.
- `pokedsl.store`: `Key`, `Interner`, `Store`, and the errors `ResolveError`
  and `NotFoundError`.
- `pokedsl.records`: raw records (`RawTypeData`, `RawAbilityData`,
  `RawItemData`, `RawMoveData`, `RawTypeChartData`, `RawSpeciesData`,
  `RawFormData`) and the resolved data they become. `SpeciesData.get_form(i)`
  returns the base form for index 0 or an unknown index;
  `TypeChartData.effectiveness(config, attacking, defending)` falls back to the
  chart's default, or `Effectiveness.NORMAL` when it has none.
- `pokedsl.dex`: `Dex` resolves raw records and stores them by interned id.
  `load_all(records)` adds them in phase order (types, abilities and items,
  then moves and type charts, then species). Referring to an id that has not
  been added raises `NotFoundError`.
- `pokedsl.ron`: `loads(text)` reads a RON document into lists, dicts,
  tuples, scalars and `Tagged` values; bad input raises `RonError` with the
  line and column.
- `pokedsl.loader`: `parse_ron(contents)` turns a document holding one record
  or a list of records into raw records; `load_ron_from_dir(dex, path)` reads
  every `.ron` file in a directory, in file-name order, and loads them into a
  dex. A file that fails to parse is named on standard error and the
  `RonError` is raised.
- `pokedsl.engine`: `Battle`, `Faction`, `Team`, `Fighter`, `Slot`, the id and
  reference types that address them, `BattleFormat.SINGLES` and
  `BattleFormat.DOUBLES`, `SwitchIn` and `Turn`. `Battle.start()` gives every
  team its active slots, filled with its first fighters in order.

## Data files

A data file holds one record or a list of them:

```
[
    Type(id: "grass"),
    Species(
        id: "bulbasaur",
        base: (
            name: "base",
            type_ids: ["grass"],
            stats: (hp: 45, atk: 49, def: 49, spa: 65, spd: 65, spe: 45),
        ),
        forms: [],
    ),
]
```

Stats, and effectiveness in a type chart, may instead be written as
`(from: 2, value: ..., otherwise: ...)`, or with `equal` or `until` in place
of `from`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
pokedsl
```

This loads every `.ron` file in `./data` into a dex and prints it. Another
directory can be given as an argument (`pokedsl path/to/data`). On a load
error the message goes to standard error and the exit status is 1.

## Library example

```python
from pokedsl.config import Config
from pokedsl.dex import Dex
from pokedsl.generation import Generation
from pokedsl.loader import load_ron_from_dir
from pokedsl.nature import Nature
from pokedsl.pokemon import Pokemon
from pokedsl.records import SpeciesData
from pokedsl.stats import Stats

dex = Dex()
load_ron_from_dir(dex, "data")

config = Config.from_generation(Generation(3))
bulbasaur = dex.resolve_ref("bulbasaur", SpeciesData)
pokemon = Pokemon(
    species=bulbasaur,
    level=50,
    ev=Stats(),
    iv=Stats(hp=31, atk=31, def_=31, spa=31, spd=31, spe=31),
    nature=Nature.MODEST,
)
print(pokemon.calc_stats(config))
```

## What it does not do

The battle engine is only a skeleton. It sets up factions, teams and active
slots, but it does not play out turns, deal damage or apply moves. `Battle.fire`
and `TargetPredicate.check` do nothing yet, `Probability` and `Target` have
no members, and `Probability.roll` always succeeds. Data can be read from RON
but not written back, and there is no saving or loading of Pokémon beyond the
`StoredPokemon` record.