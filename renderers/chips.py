"""Markup for the category chip region."""

from __future__ import annotations

from typing import Iterable

from .utils import class_names, escape_html

REGION_ID = "categories"
CHIP_CLASS = "category-tag"
ACTIVE_CLASS = "active"


def render_chip(category: str, active: bool) -> str:
    label = escape_html(category)
    css = class_names(CHIP_CLASS, ACTIVE_CLASS if active else "")
    return f'<button class="{css}" data-category="{label}">{label}</button>'


def render_category_chips(categories: Iterable[str], active_category: str) -> str:
    """Return one chip per entry of *categories*.

    Only the chip equal to ``active_category`` carries the ``active`` class, so
    re-rendering after a selection is what moves the highlight.
    """

    return "".join(render_chip(category, category == active_category) for category in categories)
