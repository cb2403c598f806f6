"""Static catalog of community resources shown in the directory."""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

Resource = Dict[str, object]

ALL_CATEGORY = "All"

# Order matters: chips are rendered in this order and "All" always comes first.
CATEGORIES: Tuple[str, ...] = (ALL_CATEGORY, "Health", "Education", "Legal", "Finance", "Community")

RESOURCES: Tuple[Resource, ...] = (
    {
        "id": 1,
        "title": "Community Health Centers",
        "description": (
            "Find free and low-cost health services near you, including primary care "
            "and mental health support."
        ),
        "category": "Health",
        "link": "#",
    },
    {
        "id": 2,
        "title": "Adult Education Programs",
        "description": (
            "Access ESL classes, GED preparation, and vocational training programs "
            "in your area."
        ),
        "category": "Education",
        "link": "#",
    },
    {
        "id": 3,
        "title": "Free Legal Aid",
        "description": (
            "Connect with nonprofit legal clinics offering advice on immigration, "
            "housing, and family law."
        ),
        "category": "Legal",
        "link": "#",
    },
    {
        "id": 4,
        "title": "Financial Literacy Resources",
        "description": (
            "Learn budgeting, saving, and how to access affordable banking and "
            "microloan programs."
        ),
        "category": "Finance",
        "link": "#",
    },
    {
        "id": 5,
        "title": "Food Assistance Programs",
        "description": (
            "Locate food banks, meal programs, and SNAP enrollment help in your community."
        ),
        "category": "Community",
        "link": "#",
    },
    {
        "id": 6,
        "title": "Mental Health Support",
        "description": (
            "Culturally sensitive counseling and peer support groups available in "
            "multiple languages."
        ),
        "category": "Health",
        "link": "#",
    },
)


def is_category(value: str) -> bool:
    return value in CATEGORIES


def validate_catalog(resources: Iterable[Resource], categories: Iterable[str] = CATEGORIES) -> None:
    """Raise ``ValueError`` if *resources* break the catalog invariants.

    Ids must be unique and every record must belong to one of *categories*
    other than the ``"All"`` sentinel.
    """

    allowed = set(categories) - {ALL_CATEGORY}
    seen_ids = set()

    for item in resources:
        resource_id = item.get("id")
        if resource_id in seen_ids:
            raise ValueError(f"Duplicate resource id {resource_id!r}")
        seen_ids.add(resource_id)

        if item.get("category") not in allowed:
            raise ValueError(
                f"Resource {resource_id!r} has unknown category {item.get('category')!r}"
            )


def get_resource(resource_id: int, resources: Iterable[Resource] = RESOURCES) -> Optional[Resource]:
    """Return a copy of the record with ``resource_id`` or ``None``."""

    for item in resources:
        if item["id"] == resource_id:
            return dict(item)
    return None


def all_resources() -> List[Resource]:
    return [dict(item) for item in RESOURCES]


validate_catalog(RESOURCES)
