"""Text and tree helpers shared by the Wikipedia parsers."""

import datetime
import re
from typing import Callable

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from fightcard.errors import EventDateError

# "[12]" as rendered, or the entity-encoded form some dumps keep
footnote_ref_re = re.compile(r"^(?:\[|&#91;)\d*(?:\]|&#93;)")

DATE_FORMATS = ("%b %d, %Y", "%B %d, %Y", "%d %B %Y", "%d %b %Y", "%Y-%m-%d")

Query = Callable[[Tag, str], list[Tag]]
Parse = Callable[[str], Tag]


def css_query(node: Tag, selector: str) -> list[Tag]:
    """Default tree query: CSS selector evaluated below node."""
    return node.select(selector)


def parse_html(html_data: str) -> BeautifulSoup:
    return BeautifulSoup(html_data, "html.parser")


def normalize_text(text: str) -> str:
    return text.strip()


def inner_text(node: Tag, skip: Tag | None = None) -> str:
    """Concatenated text of node's direct children, trimmed.

    Comments and the child `skip` are ignored; a node without children gives "".
    """
    parts = []
    for child in node.children:
        if child is skip or isinstance(child, Comment):
            continue
        if isinstance(child, NavigableString):
            parts.append(str(child))
        else:
            parts.append(child.get_text())
    return normalize_text("".join(parts))


def is_footnote_ref(text: str) -> bool:
    """True if text is a bare reference marker such as "[3]"."""
    return bool(footnote_ref_re.match(text))


def trailing_sup(node: Tag) -> Tag | None:
    """The last <sup> directly under node (a footnote marker), if any."""
    sups = node.find_all("sup", recursive=False)
    if sups:
        return sups[-1]
    return None


def text_without_footnote(node: Tag) -> str:
    """inner_text of node minus its trailing footnote marker. node is not modified."""
    return inner_text(node, skip=trailing_sup(node))


def element_children(node: Tag) -> list[Tag]:
    return [child for child in node.children if isinstance(child, Tag)]


def sibling_at(node: Tag, offset: int):
    """Return the node `offset` siblings after node, text nodes included."""
    sibling = node
    for _ in range(offset):
        if sibling is None:
            return None
        sibling = sibling.next_sibling
    return sibling


def parse_event_date(date_str: str) -> datetime.date:
    """Parse a listing date such as "Nov 16, 2024" into a datetime.date."""
    for fmt in DATE_FORMATS:
        try:
            return datetime.datetime.strptime(date_str, fmt).date()
        except ValueError:
            continue
    raise EventDateError(f"Not a valid event date: {date_str!r}")
