"""Capability protocols for values stored in a property.

A stored value MAY implement either, both or neither of these.  Nothing
has to inherit from them: the ``as_*`` helpers query a value once and
hand back either the value (typed as the capability) or ``None``.
"""

from __future__ import annotations

from typing import Any, Protocol, cast


class Cloneable(Protocol):
    """Contract for values that can produce a defensive copy."""

    def clone(self, result: Any = None) -> Any:
        """Return a copy of this value.

        When *result* is given, implementations should copy into it and
        return it; otherwise they allocate a new instance.
        """
        ...  # pragma: no cover


class Equatable(Protocol):
    """Contract for values that can compare themselves by content."""

    def equals(self, other: Any) -> bool:
        """Return ``True`` when *other* holds the same content.

        *other* may be ``None`` or of an unrelated type; implementations
        should return ``False`` rather than raise in that case.
        """
        ...  # pragma: no cover


def as_cloneable(value: Any) -> Cloneable | None:
    """Return *value* as a :class:`Cloneable`, or ``None`` if it is not one."""
    if value is None or not callable(getattr(value, "clone", None)):
        return None
    return cast(Cloneable, value)


def as_equatable(value: Any) -> Equatable | None:
    """Return *value* as an :class:`Equatable`, or ``None`` if it is not one."""
    if value is None or not callable(getattr(value, "equals", None)):
        return None
    return cast(Equatable, value)
