"""Custom exception hierarchy for scene-property.

Capability absence on a stored value is never an error; these types
cover caller mistakes (bad listeners), the opt-in strict clone mode and
missing optional dependencies.  Exceptions raised by a value's own
``clone``/``equals`` or by listeners are propagated untouched.

Hierarchy
---------
ScenePropertyError
├── InvalidListenerError
├── CloneNotSupportedError
└── MissingDependencyError
"""

from __future__ import annotations


class ScenePropertyError(Exception):
    """Base exception for all scene-property errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Events ----------------------------------------------------------------

class InvalidListenerError(ScenePropertyError, TypeError):
    """Raised when a non-callable object is subscribed to an event."""


# --- Values ----------------------------------------------------------------

class CloneNotSupportedError(ScenePropertyError):
    """Raised in strict mode when a value does not expose ``clone``."""


# --- Environment -----------------------------------------------------------

class MissingDependencyError(ScenePropertyError):
    """Raised when an optional runtime dependency is not available."""
