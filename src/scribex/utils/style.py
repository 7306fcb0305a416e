#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/scribex/utils/style.py
"""Inline CSS ``style`` attribute helpers.

Setting a style on a selection replaces the entire style string, so these
helpers merge single properties without clobbering the others. Property
order is preserved; a merged property that already exists keeps its place.
"""

from __future__ import annotations


def parse_inline_style(style: str) -> dict[str, str]:
    """Parse an inline style string into an ordered property map.

    Declarations without a colon, or with an empty property or value, are
    skipped. Property names are kept as written.

    Parameters
    ----------
    style : str
        Inline style string such as ``"color: red; font-size: 12px"``

    Returns
    -------
    dict[str, str]
        Property to value mapping in declaration order

    Examples
    --------
        >>> parse_inline_style("color: red; font-size: 12px;")
        {'color': 'red', 'font-size': '12px'}

    """
    declarations: dict[str, str] = {}
    if not style or not style.strip():
        return declarations

    for declaration in style.split(";"):
        prop, colon, value = declaration.partition(":")
        if not colon:
            continue
        prop = prop.strip()
        value = value.strip()
        if prop and value:
            declarations[prop] = value
    return declarations


def serialize_inline_style(declarations: dict[str, str]) -> str:
    """Serialize a property map back to ``"prop: value; prop: value"``."""
    return "; ".join(f"{prop}: {value}" for prop, value in declarations.items())


def merge_inline_style(existing: str, prop: str, value: str | None) -> str:
    """Set or remove one property in an inline style string.

    Parameters
    ----------
    existing : str
        Current style string
    prop : str
        Property name
    value : str or None
        New value, or None to remove the property

    Returns
    -------
    str
        The new style string

    """
    declarations = parse_inline_style(existing)
    if value is None:
        declarations.pop(prop, None)
    else:
        declarations[prop] = value
    return serialize_inline_style(declarations)


def get_inline_style_property(style: str, prop: str) -> str | None:
    """Return the value of ``prop`` in ``style``, or None if it is not set."""
    return parse_inline_style(style).get(prop)


__all__ = [
    "parse_inline_style",
    "serialize_inline_style",
    "merge_inline_style",
    "get_inline_style_property",
]
