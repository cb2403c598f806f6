from renderers.utils import class_names, escape_html


def test_escape_html_replaces_all_five_characters():
    assert escape_html("&<>\"'") == "&amp;&lt;&gt;&quot;&#39;"


def test_escape_html_does_not_double_escape_ampersand_entities():
    assert escape_html("<b>") == "&lt;b&gt;"
    assert escape_html("Tom & Jerry") == "Tom &amp; Jerry"


def test_escape_html_accepts_non_strings():
    assert escape_html(42) == "42"


def test_class_names_skips_empty_entries():
    assert class_names("category-tag", "") == "category-tag"
    assert class_names("category-tag", "active") == "category-tag active"
