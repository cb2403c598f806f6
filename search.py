"""Filtering entrypoint for the resource directory."""

from __future__ import annotations

from typing import Iterable, List

from catalog import ALL_CATEGORY, Resource

# Fields checked for a query match, in order. Any match includes the record.
SEARCH_FIELDS = ("title", "description", "category")


def _normalize_query(value: str) -> str:
    return value.lower().strip()


def _matches_category(item: Resource, active_category: str) -> bool:
    return active_category == ALL_CATEGORY or item.get("category") == active_category


def _matches_query(item: Resource, query: str) -> bool:
    if not query:
        return True

    for field in SEARCH_FIELDS:
        if query in str(item.get(field, "")).lower():
            return True
    return False


def filter_resources(
    resources: Iterable[Resource], active_category: str, search_query: str
) -> List[Resource]:
    """Return the records of *resources* visible for the given selection.

    A record is kept when it belongs to ``active_category`` (or the category is
    ``"All"``) and the trimmed, lower-cased ``search_query`` is a substring of
    its title, description or category. A blank query matches everything.
    Catalog order is preserved and the input records are not modified; an
    unknown category simply matches nothing.
    """

    query = _normalize_query(search_query)
    return [
        item
        for item in resources
        if _matches_category(item, active_category) and _matches_query(item, query)
    ]
