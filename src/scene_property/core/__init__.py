"""Core layer — the property primitive and its building blocks.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``display``.
"""

from scene_property.core.constant_property import ConstantProperty
from scene_property.core.events import Event, ListenerHandle
from scene_property.core.protocols import Cloneable, Equatable, as_cloneable, as_equatable

__all__: list[str] = [
    "Cloneable",
    "ConstantProperty",
    "Equatable",
    "Event",
    "ListenerHandle",
    "as_cloneable",
    "as_equatable",
]
