"""Merging of configuration layers.

When ``force`` is true, primitive (non-container) values from the lower
layer override existing ones; otherwise the existing value is kept.
Containers (arrays and tables) are always merged with what is there.
Containers and non-containers cannot be mixed.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Iterable, Mapping, TypeVar

from cargoconf.value import Value

T = TypeVar("T")


class MergeError(ValueError):
    """Two configuration values could not be merged."""


def merge_array(high: Iterable[T], low: Iterable[T]) -> list[T]:
    """Join two arrays, placing the higher-precedence items last."""
    return [*low, *high]


def _is_dataclass_instance(obj: Any) -> bool:
    return dataclasses.is_dataclass(obj) and not isinstance(obj, type)


def _is_container(obj: Any) -> bool:
    if isinstance(obj, Value):
        return False
    return isinstance(obj, (list, tuple, dict)) or _is_dataclass_instance(obj)


def _kind(obj: Any) -> str:
    if isinstance(obj, Value):
        obj = obj.val
    if isinstance(obj, (dict, Mapping)) or _is_dataclass_instance(obj):
        return "table"
    if isinstance(obj, (list, tuple)):
        return "array"
    if isinstance(obj, str):
        return "string"
    if isinstance(obj, bool):
        return "boolean"
    if isinstance(obj, int):
        return "integer"
    if isinstance(obj, float):
        return "float"
    return type(obj).__name__


def _merge_dataclass(high: Any, low: Any, force: bool) -> Any:
    changes = {}
    for field in dataclasses.fields(high):
        if not field.init or not field.metadata.get("merge", True):
            continue
        changes[field.name] = merge(
            getattr(high, field.name), getattr(low, field.name), force
        )
    return dataclasses.replace(high, **changes)


def merge(high: Any, low: Any, force: bool) -> Any:
    """Merge ``low`` into ``high`` and return the result.

    ``None`` stands for an absent value. Lists are joined, dicts and
    dataclass instances of the same type are merged member by member;
    dataclass fields whose metadata has ``merge=False`` keep the value
    from ``high``. Any other value, including :class:`Value`, is replaced
    by ``low`` only when ``force`` is true. The inputs are not modified.

    Raises :class:`MergeError` when a container meets a non-container or
    a container of another kind.
    """
    if low is None:
        return high
    if high is None:
        return low
    if not _is_container(high) and not _is_container(low):
        return low if force else high
    if isinstance(high, (list, tuple)) and isinstance(low, (list, tuple)):
        return merge_array(high, low)
    if isinstance(high, dict) and isinstance(low, dict):
        return merge_mapping(high, low, force)
    if (
        _is_dataclass_instance(high)
        and _is_dataclass_instance(low)
        and type(high) is type(low)
    ):
        return _merge_dataclass(high, low, force)
    raise MergeError(f"expected {_kind(high)}, but found {_kind(low)}")


def merge_mapping(
    high: Mapping[str, Any], low: Mapping[str, Any], force: bool
) -> dict[str, Any]:
    """Merge the table ``low`` into ``high`` key by key.

    Keys present only in ``low`` are added; keys present in both are
    merged with :func:`merge`.
    """
    result = dict(high)
    for key, value in low.items():
        if key not in result:
            result[key] = value
            continue
        existing = result[key]
        try:
            result[key] = merge(existing, value, force)
        except MergeError as err:
            raise MergeError(
                f"failed to merge key `{key}` between {existing!r} and {value!r}"
            ) from err
    return result