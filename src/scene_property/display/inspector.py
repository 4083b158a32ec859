"""Tabular inspection of a :class:`ConstantProperty`.

Rows are computed once by :func:`describe_property` and rendered either
as a Rich table or as aligned plain text.  Rich is imported only when a
table is actually built.
"""

from __future__ import annotations

import importlib
import sys
from types import ModuleType
from typing import Any

from scene_property.core.constant_property import ConstantProperty
from scene_property.exceptions import MissingDependencyError


def _require_rich(submodule: str) -> ModuleType:
    """Import ``rich.<submodule>`` or raise ``MissingDependencyError``."""
    try:
        return importlib.import_module(f"rich.{submodule}")
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(
            "rich is not installed.",
            hint="Install the UI extra: pip install 'scene-property[ui]'",
        ) from exc


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


def describe_property(prop: ConstantProperty) -> list[tuple[str, str]]:
    """Return ordered ``(field, value)`` rows describing *prop*.

    The stored value is read through :meth:`ConstantProperty.get_value`,
    so clone-capable values are shown from a copy.
    """
    value = prop.get_value()
    return [
        ("value", repr(value)),
        ("type", type(value).__name__),
        ("supports clone", _yes_no(prop.supports_clone)),
        ("supports equals", _yes_no(prop.supports_equals)),
        ("is constant", _yes_no(prop.is_constant)),
        ("require clone", _yes_no(prop.require_clone)),
        ("listeners", str(prop.definition_changed.number_of_listeners)),
    ]


def format_property(prop: ConstantProperty) -> str:
    """Render *prop* as aligned ``field: value`` lines."""
    rows = describe_property(prop)
    width = max(len(name) for name, _ in rows)
    return "\n".join(f"{name.ljust(width)} : {value}" for name, value in rows)


def render_property(prop: ConstantProperty, *, title: str | None = None) -> Any:
    """Build a ``rich.table.Table`` describing *prop*.

    Values are markup-escaped, so a repr such as ``'[bold]'`` is shown
    literally.

    Raises
    ------
    MissingDependencyError
        If Rich is not installed.
    """
    table_module = _require_rich("table")
    markup = _require_rich("markup")

    table = table_module.Table(title=title or type(prop).__name__, show_header=True)
    table.add_column("Field", style="bold cyan", no_wrap=True)
    table.add_column("Value")
    for name, value in describe_property(prop):
        table.add_row(name, markup.escape(value))
    return table


def print_property(prop: ConstantProperty, *, title: str | None = None) -> None:
    """Print *prop* to stderr, as a Rich table when Rich is available."""
    try:
        table = render_property(prop, title=title)
    except MissingDependencyError:
        print(format_property(prop), file=sys.stderr)
        return
    _require_rich("console").Console(stderr=True).print(table)
