"""Content normalization — the visible-character count of a raw field value.

The live counter and the authoritative validation both call
:func:`content_length`. There is exactly one implementation; the two
must always agree for the same raw value.

Order of operations matters:

1. strip markup tags (and HTML comments)
2. delete every carriage return and line feed
3. collapse runs of two or more whitespace characters into one space
4. decode HTML5 character entities
5. count Unicode code points
"""

from __future__ import annotations

import html
import io
import re
from html.parser import HTMLParser

# Leftover input that opens a tag, comment or declaration never closed.
_UNTERMINATED_RE = re.compile(r"<[A-Za-z/!?]")
_LINEBREAK_RE = re.compile(r"[\r\n]")
# ASCII-only whitespace so non-breaking spaces stay visible characters.
_WHITESPACE_RUN_RE = re.compile(r"\s{2,}", re.ASCII)


class _TextExtractor(HTMLParser):
    """Collect text content; tags, comments and declarations are dropped.

    Character references are written back undecoded. Decoding is a later
    step, after whitespace has been collapsed.
    """

    def __init__(self) -> None:
        super().__init__(convert_charrefs=False)
        self.text = io.StringIO()

    def handle_data(self, data: str) -> None:
        self.text.write(data)

    def handle_entityref(self, name: str) -> None:
        self.text.write(f"&{name};")

    def handle_charref(self, name: str) -> None:
        self.text.write(f"&#{name};")

    def get_data(self) -> str:
        # feed() keeps an incomplete construct buffered. An unclosed tag
        # runs to the end of the input; anything else is plain text.
        tail = self.rawdata
        if tail and not _UNTERMINATED_RE.match(tail):
            self.text.write(tail)
        return self.text.getvalue()


def strip_tags(content: str) -> str:
    """Remove markup tags and comments, keeping text content.

    Examples:
        >>> strip_tags("<p>Hello <b>world</b></p>")
        'Hello world'
        >>> strip_tags('<img alt="a > b">Hi')
        'Hi'
        >>> strip_tags("a < b")
        'a < b'
    """
    if not content:
        return ""
    parser = _TextExtractor()
    parser.feed(content)
    return parser.get_data()


def visible_text(raw: str | None) -> str:
    """Return the text a reader sees once markup and line breaks are gone."""
    if not raw:
        return ""
    content = strip_tags(raw)
    content = _LINEBREAK_RE.sub("", content)
    content = _WHITESPACE_RUN_RE.sub(" ", content)
    return html.unescape(content)


def content_length(raw: str | None) -> int:
    """Count visible characters in *raw*.

    Examples:
        >>> content_length("<p>Hello  world</p>\\n")
        11
        >>> content_length("&amp;")
        1
        >>> content_length(None)
        0
    """
    return len(visible_text(raw))
