from bs4 import BeautifulSoup

from catalog import RESOURCES
from renderers.cards import NO_RESULTS_HTML, render_resource_cards


def test_renders_one_card_per_resource_in_order():
    soup = BeautifulSoup(render_resource_cards(RESOURCES), "html.parser")
    cards = soup.select("div.resource-card")

    assert [card.h3.get_text() for card in cards] == [item["title"] for item in RESOURCES]
    first = cards[0]
    assert first.select_one("span.tag").get_text() == "Health"
    assert first.p.get_text() == RESOURCES[0]["description"]
    assert first.select_one("a.card-link")["href"] == "#"


def test_card_link_label():
    html = render_resource_cards(RESOURCES[:1])
    assert '<a class="card-link" href="#">Learn more &rarr;</a>' in html


def test_empty_sequence_renders_no_results_notice():
    html = render_resource_cards([])
    assert html == NO_RESULTS_HTML
    assert html == '<p class="no-results">No resources found. Try a different search or category.</p>'


def test_every_field_is_escaped():
    item = {
        "id": 99,
        "title": "<script>alert(1)</script>",
        "description": "Fish & 'Chips'",
        "category": "<b>Health</b>",
        "link": 'http://example.com/?a=1&b="2"',
    }
    html = render_resource_cards([item])

    assert "<script>" not in html
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html
    assert "Fish &amp; &#39;Chips&#39;" in html
    assert "&lt;b&gt;Health&lt;/b&gt;" in html
    assert 'href="http://example.com/?a=1&amp;b=&quot;2&quot;"' in html


def test_link_scheme_is_not_validated():
    item = dict(RESOURCES[0], link="javascript:void(0)")
    assert 'href="javascript:void(0)"' in render_resource_cards([item])


def test_rendering_is_idempotent():
    assert render_resource_cards(RESOURCES) == render_resource_cards(RESOURCES)
