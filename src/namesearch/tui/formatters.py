"""Rich rendering helpers for search suggestions."""

from rich.style import Style
from rich.text import Text

from namesearch.core.highlight import match_spans
from namesearch.domain.types import NameMatch

HIGHLIGHT_STYLE = Style(bold=True, color="black", bgcolor="yellow")


def match_to_text(match: NameMatch, committed_query: str, style: Style | str = HIGHLIGHT_STYLE) -> Text:
    """
    Render a match as rich Text with the query occurrences styled.

    The name is used as plain text, never parsed as markup, so names
    containing ``[`` or ``<mark>`` render verbatim.
    """
    text = Text(match.original)
    for start, end in match_spans(match.original, committed_query):
        text.stylize(style, start, end)
    return text
