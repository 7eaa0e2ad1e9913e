from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Union

logger = logging.getLogger(__name__)


class Mode(str, Enum):
    INCLUSIVE = "inclusive"
    EXCLUSIVE = "exclusive"
    EXACT = "exact"


@dataclass(frozen=True)
class Pattern:
    """Active when ``regex`` matches anywhere in the request's full path."""

    regex: re.Pattern

    @classmethod
    def compile(cls, source: str, flags: int = 0) -> "Pattern":
        return cls(re.compile(source, flags))


@dataclass(frozen=True)
class ControllerAction:
    """
    Active when the resolved namespace/url name satisfy any pair.

    Each pair is ``(namespaces, url_names)``; an empty side means "any".
    """

    pairs: tuple[tuple[frozenset[str], frozenset[str]], ...]

    @classmethod
    def of(cls, *pairs) -> "ControllerAction":
        return cls(tuple((_as_names(c), _as_names(a)) for c, a in pairs))


@dataclass(frozen=True)
class FieldEquality:
    """Active when every resolved param stringifies to the expected value."""

    fields: tuple[tuple[str, str], ...]

    @classmethod
    def from_mapping(cls, mapping: Mapping) -> "FieldEquality":
        return cls(tuple((str(k), stringify(v)) for k, v in mapping.items()))


MatchCondition = Union[bool, Mode, Pattern, ControllerAction, FieldEquality, None]

_CONDITION_TYPES = (bool, Mode, Pattern, ControllerAction, FieldEquality)


def stringify(value) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _as_names(value) -> frozenset[str]:
    if value is None:
        return frozenset()
    if isinstance(value, str):
        return frozenset([value]) if value else frozenset()
    return frozenset(str(item) for item in value)


def _is_explicit_pair(item) -> bool:
    return (
        isinstance(item, tuple)
        and len(item) == 2
        and all(isinstance(part, str) for part in item)
    )


def coerce_condition(value) -> MatchCondition:
    """
    Map a loosely shaped ``active`` option onto a ``MatchCondition``.

    Lists/tuples made only of ``(namespace, url_name)`` tuples are explicit
    pairs; any other list/tuple is read as a single ``(namespaces, url_names)``
    pair, and an empty one matches any route. Unrecognised shapes fall back
    to ``None`` (inclusive matching).
    """
    if value is None or isinstance(value, _CONDITION_TYPES):
        return value
    if isinstance(value, str):
        try:
            return Mode(value.strip().lower())
        except ValueError:
            pass
    elif isinstance(value, re.Pattern):
        return Pattern(value)
    elif isinstance(value, Mapping):
        return FieldEquality.from_mapping(value)
    elif isinstance(value, (list, tuple)):
        if not value:
            return ControllerAction.of((None, None))
        if all(_is_explicit_pair(item) for item in value):
            return ControllerAction.of(*value)
        controllers = value[0]
        actions = value[1] if len(value) > 1 else None
        if _is_name_group(controllers) and _is_name_group(actions):
            return ControllerAction.of((controllers, actions))
    logger.debug("Unrecognised active condition %r; using inclusive matching.", value)
    return None


def _is_name_group(value) -> bool:
    if value is None or isinstance(value, str):
        return True
    if isinstance(value, Iterable) and not isinstance(value, Mapping):
        return all(isinstance(item, str) for item in value)
    return False
