"""Markup for the resource card region."""

from __future__ import annotations

from typing import Dict, Iterable

from .utils import escape_html

REGION_ID = "resources"
NO_RESULTS_MESSAGE = "No resources found. Try a different search or category."
NO_RESULTS_HTML = f'<p class="no-results">{escape_html(NO_RESULTS_MESSAGE)}</p>'
LINK_LABEL = "Learn more &rarr;"

CARD_TEMPLATE = """
    <div class="resource-card">
      <span class="tag">{category}</span>
      <h3>{title}</h3>
      <p>{description}</p>
      <a class="card-link" href="{link}">{link_label}</a>
    </div>
  """


def render_card(item: Dict[str, object]) -> str:
    return CARD_TEMPLATE.format(
        category=escape_html(item.get("category", "")),
        title=escape_html(item.get("title", "")),
        description=escape_html(item.get("description", "")),
        link=escape_html(item.get("link", "")),
        link_label=LINK_LABEL,
    )


def render_resource_cards(resources: Iterable[Dict[str, object]]) -> str:
    """Return card markup for *resources* in order.

    An empty sequence yields the no-results notice instead of an empty region.
    The link is escaped like every other field but its scheme is not checked.
    """

    cards = [render_card(item) for item in resources]
    if not cards:
        return NO_RESULTS_HTML
    return "".join(cards)
