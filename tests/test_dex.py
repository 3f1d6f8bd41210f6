import pytest

from pokedsl.dex import Dex, phase
from pokedsl.dsl import AlwaysCondition, NoEffect, SimpleAttempt
from pokedsl.generation import Always
from pokedsl.records import (
    AbilityData,
    RawAbilityData,
    RawFormData,
    RawItemData,
    RawMoveData,
    RawSpeciesData,
    RawTypeChartData,
    RawTypeData,
    SpeciesData,
    TypeData,
)
from pokedsl.stats import Stats
from pokedsl.store import NotFoundError


def _move(name, *types):
    return RawMoveData(
        name, types, AlwaysCondition(), SimpleAttempt(AlwaysCondition(), NoEffect(), NoEffect(), NoEffect())
    )


def _species(name, *types):
    return RawSpeciesData(name, RawFormData("base", types, Always(Stats(hp=1))))


@pytest.mark.parametrize(
    "raw, expected",
    [
        (RawTypeData("fire"), 0),
        (RawAbilityData("blaze"), 0),
        (RawItemData("potion", (), NoEffect()), 0),
        (_move("ember", "fire"), 1),
        (RawTypeChartData("chart"), 1),
        (_species("charmander", "fire"), 2),
    ],
)
def test_phase(raw, expected):
    assert phase(raw) == expected


def test_phase_rejects_other_objects():
    with pytest.raises(TypeError):
        phase("not raw")


def test_add_then_get():
    dex = Dex()
    key = dex.add(RawTypeData("fire"))
    assert dex.get(key) == TypeData(key=key)


def test_add_same_id_twice_reuses_key():
    dex = Dex()
    first = dex.add(RawAbilityData("blaze"))
    second = dex.add(RawAbilityData("blaze"))
    assert first == second
    assert dex.get(second).key == first


def test_resolve_id_unknown_raises():
    dex = Dex()
    with pytest.raises(NotFoundError) as info:
        dex.resolve_id("water", TypeData)
    assert info.value.name == "water"


def test_resolve_ids_and_refs_match_get():
    dex = Dex()
    fire = dex.add(RawTypeData("fire"))
    water = dex.add(RawTypeData("water"))
    assert dex.resolve_ids(["water", "fire"], TypeData) == [water, fire]
    refs = dex.resolve_refs(["fire", "water"], TypeData)
    assert refs[0] is dex.get(fire)
    assert refs[1] is dex.get(water)


def test_resolve_ref_of_other_kind_is_dangling():
    dex = Dex()
    dex.add(RawTypeData("fire"))
    with pytest.raises(KeyError):
        dex.resolve_ref("fire", AbilityData)


def test_load_all_orders_by_phase():
    dex = Dex()
    dex.load_all([_species("charmander", "fire"), _move("ember", "fire"), RawTypeData("fire")])
    species = dex.resolve_ref("charmander", SpeciesData)
    assert species.base.types == (dex.resolve_ref("fire", TypeData),)


def test_add_out_of_order_fails():
    dex = Dex()
    with pytest.raises(NotFoundError):
        dex.add(_species("squirtle", "water"))


def test_load_all_stops_at_missing_reference():
    dex = Dex()
    with pytest.raises(NotFoundError) as info:
        dex.load_all([RawTypeData("grass"), _species("squirtle", "water")])
    assert str(info.value) == "Entry with id 'water' was referenced but not previously resolved"
    assert dex.resolve_ref("grass", TypeData).key == dex.resolve_id("grass", TypeData)


def test_repr_lists_stores():
    dex = Dex()
    dex.add(RawTypeData("fire"))
    text = repr(dex)
    assert text.startswith("Dex(abilities=")
    assert "TypeData" in text