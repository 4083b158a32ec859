"""Display layer — human-readable inspection of properties.

This is the only layer allowed to write to a stream.  Rich is optional:
every entry point degrades to plain text when it is not installed,
except :func:`render_property`, which returns a Rich object by contract.
"""

from scene_property.display.inspector import (
    describe_property,
    format_property,
    print_property,
    render_property,
)

__all__: list[str] = [
    "describe_property",
    "format_property",
    "print_property",
    "render_property",
]
