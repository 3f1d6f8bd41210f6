from collections import Counter

from pokedsl.nature import Nature
from pokedsl.stats import Stat


def test_adamant():
    assert Nature.ADAMANT.increased_stat() is Stat.ATK
    assert Nature.ADAMANT.decreased_stat() is Stat.SPA
    assert not Nature.ADAMANT.is_neutral()


def test_neutral_natures():
    neutral = set()
    for nature in Nature:
        is_neutral = nature.is_neutral()
        if is_neutral:
            neutral.add(nature)
    assert neutral == {Nature.HARDY, Nature.DOCILE, Nature.BASHFUL, Nature.QUIRKY, Nature.SERIOUS}
    assert Nature.SERIOUS.is_neutral()
    assert not Nature.TIMID.is_neutral()


def test_non_neutral_natures_cover_each_pair_once():
    pairs = []
    for nature in Nature:
        raised = nature.increased_stat()
        lowered = nature.decreased_stat()
        if raised is not lowered:
            pairs.append((raised, lowered))
    assert len(pairs) == len(set(pairs)) == 20
    assert all(Stat.HP not in pair for pair in pairs)
    assert Nature.BRAVE.increased_stat() is Stat.ATK
    assert Nature.BRAVE.decreased_stat() is Stat.SPE


def test_each_stat_raised_by_five():
    raised = Counter()
    lowered = Counter()
    for nature in Nature:
        raised[nature.increased_stat()] += 1
        lowered[nature.decreased_stat()] += 1
    expected = {stat: 5 for stat in (Stat.ATK, Stat.DEF, Stat.SPA, Stat.SPD, Stat.SPE)}
    assert dict(raised) == expected
    assert dict(lowered) == expected
    assert Nature.CALM.increased_stat() is Stat.SPD


def test_display_and_repr_value():
    assert str(Nature.TIMID) == "Timid"
    assert Nature(25) is Nature.SERIOUS