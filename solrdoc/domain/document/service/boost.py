"""Boost resolution."""

import inspect
import math
from numbers import Real
from typing import Any

from solrdoc.domain.shared.error import ConfigurationError


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _finite_non_negative(value: Any) -> float | None:
    if not _is_number(value):
        return None
    value = float(value)
    if math.isfinite(value) and value >= 0:
        return value
    return None


def resolve_boost(source: Any, record: Any, default_boost: float) -> float:
    """Resolve a boost source into a finite, non-negative float.

    - number: itself, or the default when negative
    - zero-argument callable: its return value
    - string: the record attribute of that name (called if it is a method),
      or the default when the record has no such attribute
    - None: the default

    Anything that does not end up a finite number >= 0 falls back to the default.

    Raises:
        ConfigurationError: If the source is of an unsupported kind.
    """
    if source is None:
        return default_boost

    if _is_number(source):
        value = source
    elif isinstance(source, str):
        value = getattr(record, source, None)
        if inspect.ismethod(value):
            value = value()
    elif callable(source):
        value = source()
    else:
        raise ConfigurationError(
            f"Unsupported boost source {source!r}: expected a number, "
            "a zero-argument callable or an attribute name",
            code="INVALID_BOOST",
        )

    resolved = _finite_non_negative(value)
    return default_boost if resolved is None else resolved
