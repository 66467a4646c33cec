"""Markdown subset to IR (Intermediate Representation) parser.

Supports headers (levels 1-3), bullet lists, bold, italic and links. Text is
classified line by line, grouped into blocks, and each block's inline content
is scanned once into a flat sequence of typed spans. Anything outside that
subset degrades to plain text.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field
from typing import Union

from retrobot.config.schema import InvalidConfiguration


# ---------------------------------------------------------------------------
# Inline spans
# ---------------------------------------------------------------------------

@dataclass
class PlainText:
    text: str


@dataclass
class Bold:
    text: str


@dataclass
class Italic:
    text: str


@dataclass
class Link:
    url: str
    text: str


InlineSpan = Union[PlainText, Bold, Italic, Link]


# ---------------------------------------------------------------------------
# Blocks
# ---------------------------------------------------------------------------

@dataclass
class Header:
    level: int
    spans: list[InlineSpan] = field(default_factory=list)


@dataclass
class Paragraph:
    spans: list[InlineSpan] = field(default_factory=list)


@dataclass
class BulletList:
    items: list[list[InlineSpan]] = field(default_factory=list)


Block = Union[Header, Paragraph, BulletList]


# ---------------------------------------------------------------------------
# Inline parser
# ---------------------------------------------------------------------------

# Alternatives are tried left to right at each position, so the order here is
# the precedence: link, bold, star italic, underscore italic.
_INLINE_RE = re.compile(
    r"\[(?P<link_text>[^\]]+)\]\((?P<url>[^)]+)\)"
    r"|\*\*(?P<bold>.+?)\*\*"
    r"|\*(?P<star>.+?)\*"
    r"|_(?P<under>.+?)_",
    re.DOTALL,
)


def parse_inline(text: str) -> list[InlineSpan]:
    """Scan *text* into spans covering it with no gaps or overlaps.

    Markers are never nested: the inside of a bold span is kept verbatim.
    Unmatched markers stay in the surrounding plain text. Note that
    ``snake_case_word`` yields an italic ``case``, same as the legacy parser.
    """
    spans: list[InlineSpan] = []
    pos = 0
    for m in _INLINE_RE.finditer(text):
        if m.start() > pos:
            spans.append(PlainText(text[pos:m.start()]))
        if m.group("url") is not None:
            spans.append(Link(url=m.group("url"), text=m.group("link_text")))
        elif m.group("bold") is not None:
            spans.append(Bold(m.group("bold")))
        elif m.group("star") is not None:
            spans.append(Italic(m.group("star")))
        else:
            spans.append(Italic(m.group("under")))
        pos = m.end()

    if pos < len(text) or not spans:
        spans.append(PlainText(text[pos:]))
    return spans


def span_text(spans: list[InlineSpan]) -> str:
    """Visible text of a span sequence, markup removed."""
    return "".join(span.text for span in spans)


# ---------------------------------------------------------------------------
# Line classifier
# ---------------------------------------------------------------------------

class LineKind(enum.Enum):
    BLANK = "blank"
    HEADER = "header"
    LIST_ITEM = "list_item"
    PARAGRAPH = "paragraph"


@dataclass
class ClassifiedLine:
    kind: LineKind
    text: str = ""
    level: int = 0


_LIST_ITEM_RE = re.compile(r"^[-*•]\s+(.+)")
_HEADER_RES = {
    cap: re.compile(rf"^(#{{1,{cap}}})\s+(.+)") for cap in (1, 2, 3)
}


def classify_line(line: str, max_header_level: int = 3) -> ClassifiedLine:
    """Label a single physical line. Stateless; no lookahead."""
    header_re = _HEADER_RES.get(max_header_level)
    if header_re is None:
        raise InvalidConfiguration(f"max_header_level must be 1-3, got {max_header_level}")

    if not line.strip():
        return ClassifiedLine(LineKind.BLANK)

    m = header_re.match(line)
    if m:
        return ClassifiedLine(LineKind.HEADER, text=m.group(2), level=len(m.group(1)))

    m = _LIST_ITEM_RE.match(line)
    if m:
        return ClassifiedLine(LineKind.LIST_ITEM, text=m.group(1))

    return ClassifiedLine(LineKind.PARAGRAPH, text=line)


def classify_lines(text: str | None, max_header_level: int = 3) -> list[ClassifiedLine]:
    if not text:
        return []
    return [classify_line(line, max_header_level) for line in re.split(r"\r?\n", text)]


# ---------------------------------------------------------------------------
# Block assembler
# ---------------------------------------------------------------------------

class _Assembler:
    """Groups classified lines into blocks, one pending accumulation at a time."""

    def __init__(self) -> None:
        self.blocks: list[Block] = []
        self._paragraph: list[str] | None = None
        self._list: BulletList | None = None

    def flush(self) -> None:
        if self._paragraph is not None:
            # Parsed once over the joined text so spans may cross line breaks
            self.blocks.append(Paragraph(parse_inline("\n".join(self._paragraph))))
            self._paragraph = None
        if self._list is not None:
            self.blocks.append(self._list)
            self._list = None

    def feed(self, line: ClassifiedLine) -> None:
        if line.kind is LineKind.BLANK:
            self.flush()
        elif line.kind is LineKind.HEADER:
            self.flush()
            self.blocks.append(Header(level=line.level, spans=parse_inline(line.text)))
        elif line.kind is LineKind.LIST_ITEM:
            if self._list is None:
                self.flush()
                self._list = BulletList()
            self._list.items.append(parse_inline(line.text))
        else:
            if self._paragraph is None:
                self.flush()
                self._paragraph = []
            self._paragraph.append(line.text)


def assemble_blocks(lines: list[ClassifiedLine]) -> list[Block]:
    """Group classified lines into Header, Paragraph and BulletList blocks."""
    assembler = _Assembler()
    for line in lines:
        assembler.feed(line)
    assembler.flush()
    return assembler.blocks


def markdown_to_blocks(text: str | None, max_header_level: int = 3) -> list[Block]:
    """Parse markdown text into an ordered block sequence."""
    return assemble_blocks(classify_lines(text, max_header_level))
