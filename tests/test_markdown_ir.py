"""Tests for retrobot.markdown.ir — inline parser, line classifier, block assembler."""

from __future__ import annotations

import pytest

from retrobot.config.schema import InvalidConfiguration
from retrobot.markdown.ir import (
    Bold,
    BulletList,
    ClassifiedLine,
    Header,
    Italic,
    LineKind,
    Link,
    Paragraph,
    PlainText,
    assemble_blocks,
    classify_line,
    classify_lines,
    markdown_to_blocks,
    parse_inline,
    span_text,
)


# ---------------------------------------------------------------------------
# Inline span parser
# ---------------------------------------------------------------------------

class TestParseInline:
    def test_plain_line_is_single_span(self):
        assert parse_inline("just words") == [PlainText("just words")]

    def test_empty_line_is_single_empty_span(self):
        assert parse_inline("") == [PlainText("")]

    def test_precedence_mix(self):
        spans = parse_inline("**bold** and *italic* and [x](http://e)")
        assert spans == [
            Bold("bold"),
            PlainText(" and "),
            Italic("italic"),
            PlainText(" and "),
            Link(url="http://e", text="x"),
        ]

    def test_double_star_is_bold_not_two_italics(self):
        assert parse_inline("**x**") == [Bold("x")]

    def test_underscore_italic(self):
        assert parse_inline("a _b_ c") == [PlainText("a "), Italic("b"), PlainText(" c")]

    def test_link_wins_over_emphasis_inside_label(self):
        assert parse_inline("[**go**](https://x.io)") == [Link(url="https://x.io", text="**go**")]

    def test_bold_content_not_reparsed(self):
        assert parse_inline("**a _b_ c**") == [Bold("a _b_ c")]

    def test_unclosed_bold_stays_literal(self):
        assert parse_inline("**open and never closed") == [PlainText("**open and never closed")]

    def test_malformed_link_stays_literal(self):
        assert parse_inline("see [docs](missing") == [PlainText("see [docs](missing")]

    def test_snake_case_underscores_parse_as_italic(self):
        # Known limitation kept from the legacy parser
        assert parse_inline("snake_case_word") == [
            PlainText("snake"), Italic("case"), PlainText("word"),
        ]

    def test_trailing_text_after_match(self):
        assert parse_inline("*a* tail") == [Italic("a"), PlainText(" tail")]

    def test_span_text_drops_markup_only(self):
        line = "Read **this** and [that](http://t) _now_."
        assert span_text(parse_inline(line)) == "Read this and that now."

    def test_resolved_text_parses_back_to_plain(self):
        spans = parse_inline("**bold** and *italic* and [x](http://e)")
        for span in spans:
            assert parse_inline(span.text) == [PlainText(span.text)]


# ---------------------------------------------------------------------------
# Line classifier
# ---------------------------------------------------------------------------

class TestClassifyLine:
    @pytest.mark.parametrize("line", ["", "   ", "\t"])
    def test_blank(self, line):
        assert classify_line(line).kind is LineKind.BLANK

    @pytest.mark.parametrize("line,level", [("# A", 1), ("## A", 2), ("###   A", 3)])
    def test_header_levels(self, line, level):
        assert classify_line(line) == ClassifiedLine(LineKind.HEADER, text="A", level=level)

    def test_four_hashes_is_paragraph(self):
        assert classify_line("#### deep").kind is LineKind.PARAGRAPH

    def test_hash_without_space_is_paragraph(self):
        assert classify_line("#tag").kind is LineKind.PARAGRAPH

    def test_header_cap(self):
        assert classify_line("## A", max_header_level=1).kind is LineKind.PARAGRAPH
        assert classify_line("# A", max_header_level=1).kind is LineKind.HEADER

    def test_invalid_header_cap(self):
        with pytest.raises(InvalidConfiguration):
            classify_line("# A", max_header_level=4)

    @pytest.mark.parametrize("line", ["", "   ", "plain"])
    def test_invalid_header_cap_checked_for_every_line(self, line):
        with pytest.raises(InvalidConfiguration):
            classify_line(line, max_header_level=7)

    @pytest.mark.parametrize("line", ["- item", "* item", "• item"])
    def test_list_items(self, line):
        assert classify_line(line) == ClassifiedLine(LineKind.LIST_ITEM, text="item")

    def test_bold_start_is_not_list(self):
        assert classify_line("**Note** this").kind is LineKind.PARAGRAPH

    def test_paragraph_kept_verbatim(self):
        assert classify_line("  indented text ") == ClassifiedLine(
            LineKind.PARAGRAPH, text="  indented text ",
        )

    def test_classify_lines_none(self):
        assert classify_lines(None) == []

    def test_classify_lines_crlf(self):
        kinds = [c.kind for c in classify_lines("# A\r\n- b\r\n")]
        assert kinds == [LineKind.HEADER, LineKind.LIST_ITEM, LineKind.BLANK]


# ---------------------------------------------------------------------------
# Block assembler
# ---------------------------------------------------------------------------

class TestAssembleBlocks:
    def test_list_grouping(self):
        assert markdown_to_blocks("- a\n- b\n\nc") == [
            BulletList(items=[[PlainText("a")], [PlainText("b")]]),
            Paragraph(spans=[PlainText("c")]),
        ]

    def test_header_isolation(self):
        assert markdown_to_blocks("# Title\nBody text") == [
            Header(level=1, spans=[PlainText("Title")]),
            Paragraph(spans=[PlainText("Body text")]),
        ]

    def test_consecutive_headers_not_merged(self):
        blocks = markdown_to_blocks("# One\n## Two")
        assert blocks == [
            Header(level=1, spans=[PlainText("One")]),
            Header(level=2, spans=[PlainText("Two")]),
        ]

    def test_paragraph_lines_joined(self):
        assert markdown_to_blocks("line one\nline two") == [
            Paragraph(spans=[PlainText("line one\nline two")]),
        ]

    def test_inline_span_across_line_break(self):
        assert markdown_to_blocks("start **bold\nstill bold** end") == [
            Paragraph(spans=[PlainText("start "), Bold("bold\nstill bold"), PlainText(" end")]),
        ]

    def test_prose_terminates_list(self):
        assert markdown_to_blocks("- a\nafter") == [
            BulletList(items=[[PlainText("a")]]),
            Paragraph(spans=[PlainText("after")]),
        ]

    def test_list_after_prose_starts_new_block(self):
        assert markdown_to_blocks("intro\n- a") == [
            Paragraph(spans=[PlainText("intro")]),
            BulletList(items=[[PlainText("a")]]),
        ]

    def test_blank_line_splits_lists(self):
        blocks = markdown_to_blocks("- a\n\n- b")
        assert blocks == [
            BulletList(items=[[PlainText("a")]]),
            BulletList(items=[[PlainText("b")]]),
        ]

    def test_list_items_parsed_inline(self):
        assert markdown_to_blocks("- **Owner**: [wiki](http://w)") == [
            BulletList(items=[[Bold("Owner"), PlainText(": "), Link(url="http://w", text="wiki")]]),
        ]

    def test_only_blank_lines(self):
        assert markdown_to_blocks("\n  \n\n") == []

    def test_empty_and_none(self):
        assert markdown_to_blocks("") == []
        assert markdown_to_blocks(None) == []

    def test_assemble_from_classified_lines(self):
        lines = [
            ClassifiedLine(LineKind.PARAGRAPH, text="x"),
            ClassifiedLine(LineKind.BLANK),
            ClassifiedLine(LineKind.HEADER, text="H", level=3),
        ]
        assert assemble_blocks(lines) == [
            Paragraph(spans=[PlainText("x")]),
            Header(level=3, spans=[PlainText("H")]),
        ]

    def test_order_mirrors_source(self):
        text = "# Intro\nWelcome\n\n- one\n- two\n## Rules\nBe kind"
        kinds = [type(b) for b in markdown_to_blocks(text)]
        assert kinds == [Header, Paragraph, BulletList, Header, Paragraph]

    def test_deterministic(self):
        text = "# T\n- **a**\n- _b_\n\ntext [l](http://l)"
        assert markdown_to_blocks(text) == markdown_to_blocks(text)
