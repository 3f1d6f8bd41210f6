from types import SimpleNamespace

from pokedsl.config import Config
from pokedsl.generation import Always, GenFrom, Generation
from pokedsl.nature import Nature
from pokedsl.pokemon import Pokemon, StoredPokemon
from pokedsl.stats import Stats


class FakeSpecies:
    def __init__(self, forms):
        self.forms = forms
        self.requested = []

    def get_form(self, index):
        self.requested.append(index)
        return self.forms[index]


def form(stats_spec):
    return SimpleNamespace(stats=stats_spec)


def test_current_form_uses_index():
    species = FakeSpecies([form(Always(Stats())), form(Always(Stats(hp=5)))])
    mon = Pokemon(species, 10, Stats(), Stats(), Nature.BOLD, current_form_index=1)
    assert mon.current_form() is species.forms[1]
    assert species.requested == [1]


def test_calc_stats_matches_formula():
    spec = GenFrom(Generation(6), Stats(90, 90, 90, 90, 90, 90), Always(Stats(50, 50, 50, 50, 50, 50)))
    mon = Pokemon(FakeSpecies([form(spec)]), 50, Stats(), Stats(), Nature.JOLLY)
    config = Config.from_generation(Generation(7))
    assert mon.calc_stats(config) == config.stat_formula.calc(config, mon)


def test_calc_stats_depends_on_generation():
    spec = GenFrom(Generation(6), Stats(90, 90, 90, 90, 90, 90), Always(Stats(50, 50, 50, 50, 50, 50)))
    mon = Pokemon(FakeSpecies([form(spec)]), 50, Stats(), Stats(), Nature.SERIOUS)
    old = mon.calc_stats(Config.from_generation(Generation(5)))
    new = mon.calc_stats(Config.from_generation(Generation(6)))
    assert new.hp > old.hp
    assert new.atk > old.atk


def test_stored_pokemon_fields():
    stored = StoredPokemon("bulbasaur", 5, Stats(), Stats(atk=3), Nature.CALM)
    assert stored.species_id == "bulbasaur"
    assert stored.iv.atk == 3
    assert stored == StoredPokemon("bulbasaur", 5, Stats(), Stats(atk=3), Nature.CALM)