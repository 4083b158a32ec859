"""scene-property — observable, time-invariant property values.

A small building block for scene-graph front-ends: a value holder that
copies and compares capable values and notifies listeners on change.
"""

from scene_property.core import (
    Cloneable,
    ConstantProperty,
    Equatable,
    Event,
    ListenerHandle,
    as_cloneable,
    as_equatable,
)
from scene_property.version import __version__

__all__: list[str] = [
    "Cloneable",
    "ConstantProperty",
    "Equatable",
    "Event",
    "ListenerHandle",
    "__version__",
    "as_cloneable",
    "as_equatable",
]
