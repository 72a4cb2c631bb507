"""Adapter over rich console markup for item display names."""

from __future__ import annotations

from dataclasses import dataclass

from rich.errors import MarkupError as RichMarkupError
from rich.errors import StyleSyntaxError
from rich.markup import Tag, _parse
from rich.style import Style
from rich.text import Text

from um_common.errors import MarkupError
from um_core.models import StyleSpan


@dataclass(frozen=True)
class ParsedMarkup:
    plain: str
    attributes: tuple[StyleSpan, ...]
    markup: str


def _invalid(markup: str, reason: str, cause: Exception | None = None) -> MarkupError:
    return MarkupError(
        f"item name {markup!r} contains invalid markup: {reason}",
        context={"item": markup},
        cause=cause,
    )


def _unclosed_tags(markup: str) -> list[Tag]:
    open_tags: list[Tag] = []
    for _, _, tag in _parse(markup):
        if tag is None:
            continue
        if not tag.name.startswith("/"):
            open_tags.append(tag)
            continue
        closing = Style.normalize(tag.name[1:].strip())
        if not closing:
            if open_tags:
                open_tags.pop()
            continue
        for index in range(len(open_tags) - 1, -1, -1):
            if Style.normalize(open_tags[index].name) == closing:
                del open_tags[index]
                break
    return open_tags


def parse_markup(markup: str) -> ParsedMarkup:
    """Split a display name into plain text and style spans.

    Rich itself only rejects a closing tag with nothing to close. Names are
    also rejected when a tag is left open or a tag is not a valid style, so
    bracketed text is never silently dropped from the label.
    """
    try:
        text = Text.from_markup(markup, emoji=False)
    except RichMarkupError as exc:
        raise _invalid(markup, str(exc), exc) from exc

    unclosed = _unclosed_tags(markup)
    if unclosed:
        raise _invalid(markup, f"unclosed tag {unclosed[0].markup!r}")

    spans: list[StyleSpan] = []
    for span in text.spans:
        if isinstance(span.style, str):
            try:
                Style.parse(span.style)
            except StyleSyntaxError as exc:
                raise _invalid(markup, f"unknown style {span.style!r}", exc) from exc
        if span.end > span.start:
            spans.append(StyleSpan(span.start, span.end, str(span.style)))
    return ParsedMarkup(plain=text.plain, attributes=tuple(spans), markup=markup)
