# Characters that must never reach generated markup unescaped. ``&`` goes first
# so the entities produced by later replacements are left intact.
HTML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)


def escape_html(value):
    """Return *value* as text safe to interpolate into markup or attributes.

    Non-string values are converted with ``str`` first, so numeric ids can be
    passed straight through.
    """

    text = str(value)
    for char, entity in HTML_ESCAPES:
        text = text.replace(char, entity)
    return text


def class_names(*names):
    """Join the truthy entries of *names* into a ``class`` attribute value."""

    return " ".join(name for name in names if name)
