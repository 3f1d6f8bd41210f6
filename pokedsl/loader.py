"""Reading raw dex records from RON documents and directories."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Callable, Optional, Union

from .dsl import (
    AlwaysCondition,
    And,
    Cascade,
    Combo,
    ConditionalEffect,
    DamageDealt,
    Effectiveness,
    Exact,
    NoEffect,
    Not,
    Or,
    Predicate,
    Prob,
    Probability,
    Sequence,
    SimpleAttempt,
    Target,
    TargetPredicate,
    TriggerEffect,
    TurnEnd,
    TurnStart,
)
from .generation import Always, GenEqual, GenFrom, GenSpecific, GenUntil, Generation
from .records import (
    RawAbilityData,
    RawFormData,
    RawItemData,
    RawMoveData,
    RawSpeciesData,
    RawTypeChartData,
    RawTypeData,
)
from .ron import RonError, Tagged, loads
from .stats import Stats

_MISSING = object()

_EFFECTIVENESS = {
    "Normal": Effectiveness.NORMAL,
    "NoEffect": Effectiveness.NO_EFFECT,
    "NotVeryEffective": Effectiveness.NOT_VERY_EFFECTIVE,
    "SuperEffective": Effectiveness.SUPER_EFFECTIVE,
}


def _fields(value: Any, what: str) -> Optional[dict]:
    if isinstance(value, dict):
        return value
    if isinstance(value, Tagged) and isinstance(value.value, dict):
        return value.value
    return None


def _struct(value: Any, what: str) -> dict:
    fields = _fields(value, what)
    if fields is None:
        raise RonError(f"expected a struct for {what}, got {value!r}")
    return fields


def _field(fields: dict, name: str, what: str, default: Any = _MISSING) -> Any:
    if name in fields:
        return fields[name]
    if default is _MISSING:
        raise RonError(f"missing field `{name}` in {what}")
    return default


def _variant(value: Any, what: str) -> tuple[str, Any]:
    if not isinstance(value, Tagged):
        raise RonError(f"expected a {what} variant, got {value!r}")
    return value.name, value.value


def _args(payload: Any, count: int, what: str) -> tuple:
    if not isinstance(payload, tuple) or len(payload) != count:
        raise RonError(f"{what} takes {count} value(s), got {payload!r}")
    return payload


def _unit(name: str, payload: Any, what: str) -> None:
    if payload is not None:
        raise RonError(f"{what} variant `{name}` takes no value")


def _str(value: Any, what: str) -> str:
    if not isinstance(value, str):
        raise RonError(f"expected a string for {what}, got {value!r}")
    return value


def _int(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise RonError(f"expected an integer for {what}, got {value!r}")
    return value


def _list(value: Any, what: str, item: Callable[[Any], Any]) -> tuple:
    if not isinstance(value, list):
        raise RonError(f"expected a list for {what}, got {value!r}")
    return tuple(item(entry) for entry in value)


def _strings(value: Any, what: str) -> tuple[str, ...]:
    return _list(value, what, lambda v: _str(v, what))


def _option(value: Any, inner: Callable[[Any], Any]) -> Any:
    if value is _MISSING:
        return None
    name, payload = _variant(value, "Option")
    if name == "None":
        _unit(name, payload, "Option")
        return None
    if name == "Some":
        return inner(_args(payload, 1, "Some")[0])
    raise RonError(f"unknown Option variant `{name}`")


def _probability(value: Any) -> Probability:
    name, _ = _variant(value, "Probability")
    try:
        return Probability[name]
    except KeyError:
        raise RonError(f"unknown Probability variant `{name}`") from None


def _target(value: Any) -> Target:
    name, _ = _variant(value, "Target")
    try:
        return Target[name]
    except KeyError:
        raise RonError(f"unknown Target variant `{name}`") from None


def _fighter_predicate(value: Any) -> Any:
    raise RonError(f"unknown fighter predicate {value!r}")


def _battle_predicate(value: Any) -> Any:
    name, payload = _variant(value, "BattlePredicate")
    if name == "Prob":
        return Prob(_probability(_args(payload, 1, name)[0]))
    if name == "Target":
        fields = _struct(payload, name)
        return TargetPredicate(
            target=_target(_field(fields, "target", name)),
            cond=_condition(_field(fields, "cond", name), _fighter_predicate),
        )
    raise RonError(f"unknown BattlePredicate variant `{name}`")


def _condition(value: Any, leaf: Callable[[Any], Any] = _battle_predicate) -> Any:
    name, payload = _variant(value, "Condition")
    if name == "Always":
        _unit(name, payload, "Condition")
        return AlwaysCondition()
    if name in ("And", "Or"):
        left, right = _args(payload, 2, name)
        cls = And if name == "And" else Or
        return cls(_condition(left, leaf), _condition(right, leaf))
    if name == "Not":
        return Not(_condition(_args(payload, 1, name)[0], leaf))
    if name == "Predicate":
        return Predicate(leaf(_args(payload, 1, name)[0]))
    raise RonError(f"unknown Condition variant `{name}`")


def _effect(value: Any) -> Any:
    name, payload = _variant(value, "Effect")
    if name == "None":
        _unit(name, payload, "Effect")
        return NoEffect()
    if name == "Condition":
        fields = _struct(payload, name)
        return ConditionalEffect(
            cond=_condition(_field(fields, "cond", name)),
            success=_effect(_field(fields, "success", name)),
            failure=_effect(_field(fields, "failure", name)),
        )
    if name == "Sequence":
        fields = _struct(payload, name)
        return Sequence(_list(_field(fields, "effects", name), "effects", _effect))
    raise RonError(f"unknown Effect variant `{name}`")


def _number(value: Any) -> Exact:
    name, payload = _variant(value, "Number")
    if name != "Exact":
        raise RonError(f"unknown Number variant `{name}`")
    try:
        return Exact(_int(_args(payload, 1, name)[0], "Exact"))
    except ValueError as err:
        raise RonError(str(err)) from None


def _attempt(value: Any) -> Any:
    name, payload = _variant(value, "Attempt")
    if name == "Attempt":
        fields = _struct(payload, name)
        return SimpleAttempt(
            condition=_condition(_field(fields, "condition", name)),
            success=_effect(_field(fields, "success", name)),
            failure=_effect(_field(fields, "failure", name)),
            after=_effect(_field(fields, "after", name)),
        )
    if name == "Cascade":
        fields = _struct(payload, name)
        return Cascade(_list(_field(fields, "attempts", name), "attempts", _attempt))
    if name == "Combo":
        fields = _struct(payload, name)
        return Combo(
            condition=_condition(_field(fields, "condition", name)),
            hits=_number(_field(fields, "hits", name)),
            effect=_effect(_field(fields, "effect", name)),
        )
    raise RonError(f"unknown Attempt variant `{name}`")


def _trigger(value: Any) -> Any:
    name, payload = _variant(value, "Trigger")
    if name == "TurnStart":
        _unit(name, payload, "Trigger")
        return TurnStart()
    if name == "TurnEnd":
        _unit(name, payload, "Trigger")
        return TurnEnd()
    if name == "DamageDealt":
        return DamageDealt(_target(_args(payload, 1, name)[0]))
    raise RonError(f"unknown Trigger variant `{name}`")


def _trigger_effect(value: Any) -> TriggerEffect:
    fields = _struct(value, "TriggerEffect")
    return TriggerEffect(
        trigger=_trigger(_field(fields, "trigger", "TriggerEffect")),
        effect=_effect(_field(fields, "effect", "TriggerEffect")),
    )


def _effectiveness(value: Any) -> Effectiveness:
    name, payload = _variant(value, "Effectiveness")
    _unit(name, payload, "Effectiveness")
    try:
        return _EFFECTIVENESS[name]
    except KeyError:
        raise RonError(f"unknown Effectiveness variant `{name}`") from None


def _generation(value: Any) -> Generation:
    if isinstance(value, Tagged) and isinstance(value.value, tuple):
        value = value.value
    if isinstance(value, tuple) and len(value) == 1:
        value = value[0]
    try:
        return Generation(_int(value, "generation"))
    except ValueError as err:
        raise RonError(str(err)) from None


def _gen_specific(value: Any, inner: Callable[[Any], Any]) -> GenSpecific:
    fields = _fields(value, "GenSpecific")
    if fields is not None:
        for key, cls in (("equal", GenEqual), ("from", GenFrom), ("until", GenUntil)):
            if {key, "value", "otherwise"} <= fields.keys():
                return cls(
                    _generation(fields[key]),
                    inner(fields["value"]),
                    _gen_specific(fields["otherwise"], inner),
                )
    return Always(inner(value))


def _stats(value: Any) -> Stats:
    fields = _struct(value, "Stats")
    names = {"hp": "hp", "atk": "atk", "def": "def_", "spa": "spa", "spd": "spd", "spe": "spe"}
    try:
        return Stats(
            **{attr: _int(_field(fields, key, "Stats"), key) for key, attr in names.items()}
        )
    except ValueError as err:
        raise RonError(str(err)) from None


def _form(value: Any) -> RawFormData:
    fields = _struct(value, "RawFormData")
    return RawFormData(
        name=_str(_field(fields, "name", "RawFormData"), "name"),
        type_ids=_strings(_field(fields, "type_ids", "RawFormData"), "type_ids"),
        stats=_gen_specific(_field(fields, "stats", "RawFormData"), _stats),
    )


def _id(fields: dict, what: str) -> str:
    return _str(_field(fields, "id", what), "id")


def _ability(fields: dict) -> RawAbilityData:
    what = "RawAbilityData"
    return RawAbilityData(
        id=_id(fields, what),
        triggers=_list(_field(fields, "triggers", what), "triggers", _trigger_effect),
    )


def _item(fields: dict) -> RawItemData:
    what = "RawItemData"
    return RawItemData(
        id=_id(fields, what),
        held=_list(_field(fields, "held", what), "held", _trigger_effect),
        active=_effect(_field(fields, "active", what)),
    )


def _move(fields: dict) -> RawMoveData:
    what = "RawMoveData"
    return RawMoveData(
        id=_id(fields, what),
        type_ids=_strings(_field(fields, "type_ids", what), "type_ids"),
        condition=_condition(_field(fields, "condition", what)),
        attempt=_attempt(_field(fields, "attempt", what)),
    )


def _type(fields: dict) -> RawTypeData:
    return RawTypeData(id=_id(fields, "RawTypeData"))


def _species(fields: dict) -> RawSpeciesData:
    what = "RawSpeciesData"
    return RawSpeciesData(
        id=_id(fields, what),
        base=_form(_field(fields, "base", what)),
        forms=_list(_field(fields, "forms", what), "forms", _form),
    )


def _chart_key(value: Any) -> tuple[str, str]:
    if not isinstance(value, tuple) or len(value) != 2:
        raise RonError(f"expected a pair of type ids, got {value!r}")
    return _str(value[0], "attacking type"), _str(value[1], "defending type")


def _type_chart(fields: dict) -> RawTypeChartData:
    what = "RawTypeChartData"
    table = _field(fields, "effectiveness", what)
    if not isinstance(table, dict):
        raise RonError(f"expected a map for effectiveness, got {table!r}")
    return RawTypeChartData(
        id=_id(fields, what),
        default=_option(fields.get("default", _MISSING), _effectiveness),
        effectiveness={
            _chart_key(k): _gen_specific(v, _effectiveness) for k, v in table.items()
        },
    )


_RAW = {
    "Ability": _ability,
    "Item": _item,
    "Move": _move,
    "Type": _type,
    "Species": _species,
    "TypeChart": _type_chart,
}

RawData = Union[
    RawAbilityData, RawItemData, RawMoveData, RawTypeData, RawSpeciesData, RawTypeChartData
]


def _raw(value: Any) -> RawData:
    name, payload = _variant(value, "RawData")
    decode = _RAW.get(name)
    if decode is None:
        raise RonError(f"unknown RawData variant `{name}`")
    if isinstance(payload, tuple):
        payload = _args(payload, 1, name)[0]
    return decode(_struct(payload, name))


def parse_ron(contents: str) -> list[RawData]:
    """Parse a document holding either a list of records or a single record."""
    value = loads(contents)
    if isinstance(value, list):
        return [_raw(entry) for entry in value]
    try:
        return [_raw(value)]
    except RonError as err:
        raise RonError(f"expected a list of records: {err}") from err


def load_ron_from_dir(dex: Any, path: Union[str, Path]) -> None:
    """Load every ``.ron`` file in ``path`` into ``dex``, resolving in phase order."""
    data: list[RawData] = []
    for file in sorted(p for p in Path(path).iterdir() if p.suffix == ".ron"):
        contents = file.read_text(encoding="utf-8")
        try:
            data.extend(parse_ron(contents))
        except RonError as err:
            print(f"Failed to parse {file}: {err}", file=sys.stderr)
            raise
    dex.load_all(data)