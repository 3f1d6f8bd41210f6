import pytest

from pokedsl.config import Config
from pokedsl.dex import Dex
from pokedsl.dsl import (
    AlwaysCondition,
    Effectiveness,
    NoEffect,
    Sequence,
    SimpleAttempt,
    TriggerEffect,
    TurnStart,
)
from pokedsl.generation import Always, GenFrom, Generation
from pokedsl.records import (
    AbilityData,
    ItemData,
    RawAbilityData,
    RawFormData,
    RawItemData,
    RawMoveData,
    RawSpeciesData,
    RawTypeChartData,
    RawTypeData,
    TypeData,
)
from pokedsl.stats import Stats
from pokedsl.store import Key, NotFoundError


def _dex_with_types(*names):
    dex = Dex()
    keys = {name: dex.add(RawTypeData(name)) for name in names}
    return dex, keys


def _attempt():
    return SimpleAttempt(AlwaysCondition(), NoEffect(), NoEffect(), NoEffect())


def test_type_resolves_to_key():
    dex = Dex()
    raw = RawTypeData("fire")
    key = Key(0, TypeData)
    assert raw.resolve(key, dex) == TypeData(key=key)


def test_ability_keeps_triggers():
    trigger = TriggerEffect(TurnStart(), NoEffect())
    raw = RawAbilityData("speed-boost", (trigger,))
    resolved = raw.resolve(Key(2, AbilityData), Dex())
    assert resolved.triggers == (trigger,)
    assert resolved.key == Key(2)


def test_item_keeps_effects():
    active = Sequence((NoEffect(),))
    raw = RawItemData("potion", (), active)
    resolved = raw.resolve(Key(1, ItemData), Dex())
    assert resolved.active == active
    assert resolved.held == ()


def test_move_resolves_types_from_dex():
    dex, keys = _dex_with_types("fire", "flying")
    move = dex.get(dex.add(RawMoveData("fly-fire", ("fire", "flying"), AlwaysCondition(), _attempt())))
    assert move.types[0] is dex.get(keys["fire"])
    assert move.types[1] is dex.get(keys["flying"])


def test_move_with_unknown_type_fails():
    dex, _ = _dex_with_types("fire")
    with pytest.raises(NotFoundError):
        dex.add(RawMoveData("surf", ("water",), AlwaysCondition(), _attempt()))


def test_form_resolve_keeps_name_and_stats():
    dex, keys = _dex_with_types("grass")
    stats = Always(Stats(hp=45))
    form = RawFormData("base", ("grass",), stats).resolve(dex)
    assert form.name == "base"
    assert form.stats == stats
    assert form.types == (dex.get(keys["grass"]),)


def _species():
    return RawSpeciesData(
        "bulbasaur",
        RawFormData("base", ("grass", "poison"), Always(Stats(hp=45))),
        (RawFormData("alt", ("grass",), Always(Stats(hp=80))),),
    )


def test_species_get_form():
    dex, _ = _dex_with_types("grass", "poison")
    species = dex.get(dex.add(_species()))
    assert species.get_form(0).name == "base"
    assert species.get_form(1).name == "alt"
    assert species.get_form(5) is species.base


def test_species_with_unknown_form_type_fails():
    dex, _ = _dex_with_types("grass")
    with pytest.raises(NotFoundError):
        dex.add(_species())


def _chart(default=None):
    return RawTypeChartData(
        "chart",
        default,
        {
            ("fire", "grass"): Always(Effectiveness.SUPER_EFFECTIVE),
            ("ghost", "normal"): GenFrom(
                Generation(2), Effectiveness.NO_EFFECT, Always(Effectiveness.NORMAL)
            ),
        },
    )


def test_type_chart_listed_and_unlisted():
    dex, keys = _dex_with_types("fire", "grass", "ghost", "normal")
    chart = dex.get(dex.add(_chart()))
    config = Config.from_generation(Generation(1))
    assert chart.effectiveness(config, keys["fire"], keys["grass"]) == Effectiveness.SUPER_EFFECTIVE
    assert chart.effectiveness(config, keys["grass"], keys["fire"]) == Effectiveness.NORMAL


def test_type_chart_depends_on_generation():
    dex, keys = _dex_with_types("fire", "grass", "ghost", "normal")
    chart = dex.get(dex.add(_chart()))
    gen1 = Config.from_generation(Generation(1))
    gen2 = Config.from_generation(Generation(2))
    assert chart.effectiveness(gen1, keys["ghost"], keys["normal"]) == Effectiveness.NORMAL
    assert chart.effectiveness(gen2, keys["ghost"], keys["normal"]) == Effectiveness.NO_EFFECT


def test_type_chart_default_used_for_unlisted():
    dex, keys = _dex_with_types("fire", "grass", "ghost", "normal")
    chart = dex.get(dex.add(_chart(Effectiveness.NOT_VERY_EFFECTIVE)))
    config = Config.from_generation(Generation(3))
    assert chart.effectiveness(config, keys["normal"], keys["fire"]) == Effectiveness.NOT_VERY_EFFECTIVE


def test_type_chart_unknown_type_fails():
    dex, _ = _dex_with_types("fire", "grass")
    with pytest.raises(NotFoundError):
        dex.add(_chart())