"""A property whose value does not change with respect to simulation time.

The value may still be replaced at runtime.  Every replacement that
cannot be proven equal to the current value, and every toggle of
:attr:`ConstantProperty.is_constant`, raises
:attr:`ConstantProperty.definition_changed` with the property itself as
the only argument.  Subscribers call :meth:`ConstantProperty.get_value`
to learn the new value; no old/new payload is delivered.

Value capabilities
------------------
* ``clone(result=None)`` — used to copy on store and on read.
* ``equals(other)`` — used to suppress redundant notifications.

Values with neither are opaque: stored and returned by reference.
"""

from __future__ import annotations

import logging
from typing import Any

from scene_property.core.events import Event
from scene_property.core.protocols import as_cloneable, as_equatable
from scene_property.exceptions import CloneNotSupportedError

logger = logging.getLogger(__name__)


class ConstantProperty:
    """Observable holder for a single time-invariant value.

    Parameters
    ----------
    value:
        Initial value, or ``None`` for an empty property.
    require_clone:
        Strict mode.  When ``True``, any non-``None`` value must expose
        ``clone`` so that :meth:`get_value` never returns an alias of
        internal state; otherwise :class:`CloneNotSupportedError` is
        raised by :meth:`set_value`.
    """

    def __init__(self, value: Any = None, *, require_clone: bool = False) -> None:
        self._value: Any = None
        self._has_clone: bool = False
        self._has_equals: bool = False
        self._constant: bool = False
        self._require_clone: bool = require_clone
        self._definition_changed: Event = Event()
        self.set_value(value)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(value={self._value!r}, "
            f"is_constant={self._constant}, clone={self._has_clone}, "
            f"equals={self._has_equals})"
        )

    # ------------------------------------------------------------------
    # Flags
    # ------------------------------------------------------------------

    @property
    def is_constant(self) -> bool:
        """Caller-maintained flag; changing it raises :attr:`definition_changed`."""
        return self._constant

    @is_constant.setter
    def is_constant(self, value: bool) -> None:
        if self._constant != value:
            self._constant = value
            logger.debug("is_constant set to %s on %r", value, self)
            self._definition_changed.publish(self)

    @property
    def definition_changed(self) -> Event:
        """Event raised with this property whenever its definition changes."""
        return self._definition_changed

    @property
    def supports_clone(self) -> bool:
        """Whether the current value exposes ``clone``."""
        return self._has_clone

    @property
    def supports_equals(self) -> bool:
        """Whether the current value exposes ``equals``."""
        return self._has_equals

    @property
    def require_clone(self) -> bool:
        """Whether strict clone mode is enabled."""
        return self._require_clone

    # ------------------------------------------------------------------
    # Value access
    # ------------------------------------------------------------------

    def get_value(self, time: Any = None, result: Any = None) -> Any:
        """Return the value of the property.

        *time* is accepted so that constant and time-varying properties
        share one call signature; it has no effect here.

        Clone-capable values are cloned into *result* (or into a new
        instance when *result* is ``None``).  Any other value is returned
        by reference and must be treated as read-only by the caller.

        The clone flag describes the last value passed to :meth:`set_value`,
        which is not always the stored object: after a ``set_value`` whose
        value reported itself equal, the old object is kept.  If that
        object has no ``clone``, this call raises ``AttributeError``.
        :meth:`equals` has the same exposure through ``equals``.
        """
        if self._has_clone:
            return self._value.clone(result)
        return self._value

    def set_value(self, value: Any) -> None:
        """Replace the value, notifying listeners if it actually changed.

        Passing the object already stored is a no-op.  If *value* exposes
        ``equals`` and reports itself equal to the current value, the
        capability flags are refreshed but the stored object is kept and
        no notification is raised.

        Raises
        ------
        CloneNotSupportedError
            In strict mode, when *value* is not ``None`` and lacks ``clone``.
        """
        old_value = self._value
        if old_value is value:
            return

        cloneable = as_cloneable(value)
        equatable = as_equatable(value)

        if self._require_clone and value is not None and cloneable is None:
            raise CloneNotSupportedError(
                f"{type(value).__name__} does not implement clone().",
                hint="Add a clone(result=None) method or disable require_clone.",
            )

        self._has_clone = cloneable is not None
        self._has_equals = equatable is not None

        if equatable is not None and equatable.equals(old_value):
            logger.debug("Ignoring value equal to current on %r", self)
            return

        self._value = value if cloneable is None else cloneable.clone()
        logger.debug("Value replaced on %r", self)
        self._definition_changed.publish(self)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def equals(self, other: Any) -> bool:
        """Return ``True`` if *other* is a property holding the same value.

        Only this property's value capabilities are consulted: when this
        value has ``equals`` it decides, otherwise the two stored values
        must be the same object.  ``a.equals(b)`` and ``b.equals(a)`` can
        therefore disagree when only one side's value has ``equals``.
        """
        if self is other:
            return True
        if not isinstance(other, ConstantProperty):
            return False
        if self._has_equals:
            return bool(self._value.equals(other._value))
        return self._value is other._value
