"""
Tests for the caret resolution functions that operate on the content tree.
"""

import pytest

from ghosttext.surface.exceptions import UnresolvableCaretException
from ghosttext.surface.tree import (
    CaretPosition,
    Node,
    Selection,
    extract_preceding_text,
    is_caret_at_line_end,
    resolve_caret,
)


def caret(path, offset):
    return Selection.at(CaretPosition(tuple(path), offset))


class TestResolveCaret:
    """Tests for resolve_caret()."""

    def test_collapsed_selection_resolves(self):
        root = Node.block(Node.block(Node.text_node("hello")))

        position = resolve_caret(root, caret((0, 0), 3))

        assert position == CaretPosition((0, 0), 3)

    def test_missing_selection_raises(self):
        root = Node.block(Node.block(Node.text_node("hello")))

        with pytest.raises(UnresolvableCaretException):
            resolve_caret(root, None)

    def test_range_selection_raises(self):
        root = Node.block(Node.block(Node.text_node("hello")))
        selection = Selection(CaretPosition((0, 0), 0), CaretPosition((0, 0), 5))

        with pytest.raises(UnresolvableCaretException):
            resolve_caret(root, selection)

    @pytest.mark.parametrize(
        "path,offset",
        [((3,), 0), ((0, 0), 6), ((0, 0), -1), ((0, 1), 0)],
    )
    def test_invalid_position_raises(self, path, offset):
        root = Node.block(Node.block(Node.text_node("hello"), Node.line_break()))

        with pytest.raises(UnresolvableCaretException):
            resolve_caret(root, caret(path, offset))


class TestExtractPrecedingText:
    """Tests for extract_preceding_text()."""

    def test_text_up_to_the_caret(self):
        root = Node.block(Node.block(Node.text_node("hello world")))

        assert extract_preceding_text(root, caret((0, 0), 5)) == "hello"

    def test_blocks_are_separated_by_newlines(self):
        root = Node.block(
            Node.block(Node.text_node("first")),
            Node.block(Node.text_node("second")),
            Node.block(Node.text_node("third")),
        )

        assert extract_preceding_text(root, caret((2, 0), 2)) == "first\nsecond\nth"

    def test_line_breaks_become_newlines(self):
        root = Node.block(
            Node.block(Node.text_node("one"), Node.line_break(), Node.text_node("two"))
        )

        assert extract_preceding_text(root, caret((0, 2), 3)) == "one\ntwo"

    def test_inline_formatting_is_flattened(self):
        root = Node.block(
            Node.block(
                Node.text_node("say "),
                Node.inline("b", Node.text_node("bold"), Node.inline("i", Node.text_node("er"))),
                Node.text_node(" things"),
            )
        )

        assert extract_preceding_text(root, caret((0, 2), 3)) == "say bolder th"

    def test_caret_inside_nested_inline(self):
        root = Node.block(
            Node.block(
                Node.text_node("a "),
                Node.inline("b", Node.text_node("bc")),
            )
        )

        assert extract_preceding_text(root, caret((0, 1, 0), 1)) == "a b"

    def test_markers_are_skipped(self):
        root = Node.block(
            Node.block(
                Node.text_node("ab"),
                Node.marker("ghost", "s-1"),
                Node.text_node("cd"),
            )
        )

        assert extract_preceding_text(root, caret((0, 2), 2)) == "abcd"

    def test_non_breaking_spaces_are_normalized(self):
        root = Node.block(Node.block(Node.text_node("a\xa0b\xa0")))

        assert extract_preceding_text(root, caret((0, 0), 4)) == "a b "

    def test_caret_between_nodes(self):
        root = Node.block(Node.block(Node.text_node("ab")), Node.block())

        assert extract_preceding_text(root, caret((1,), 0)) == "ab\n"

    def test_caret_after_line_break(self):
        root = Node.block(Node.block(Node.text_node("ab"), Node.line_break()))

        assert extract_preceding_text(root, caret((0,), 2)) == "ab\n"

    def test_unresolvable_caret_yields_none(self):
        root = Node.block(Node.block(Node.text_node("ab")))

        assert extract_preceding_text(root, None) is None
        assert extract_preceding_text(root, caret((4,), 0)) is None


class TestIsCaretAtLineEnd:
    """Tests for is_caret_at_line_end()."""

    def test_end_of_text(self):
        root = Node.block(Node.block(Node.text_node("hello")))

        assert is_caret_at_line_end(root, caret((0, 0), 5))

    def test_middle_of_text(self):
        root = Node.block(Node.block(Node.text_node("hello")))

        assert not is_caret_at_line_end(root, caret((0, 0), 2))

    def test_text_after_formatting_boundary(self):
        root = Node.block(
            Node.block(Node.inline("b", Node.text_node("bo")), Node.text_node("ld"))
        )

        assert not is_caret_at_line_end(root, caret((0, 0, 0), 2))

    def test_end_of_formatting_at_end_of_line(self):
        root = Node.block(
            Node.block(Node.text_node("plain "), Node.inline("b", Node.text_node("bold")))
        )

        assert is_caret_at_line_end(root, caret((0, 1, 0), 4))

    def test_line_break_follows(self):
        root = Node.block(
            Node.block(Node.text_node("one"), Node.line_break(), Node.text_node("two"))
        )

        assert is_caret_at_line_end(root, caret((0, 0), 3))

    def test_next_block_follows(self):
        root = Node.block(
            Node.block(Node.text_node("ab")), Node.block(Node.text_node("cd"))
        )

        assert is_caret_at_line_end(root, caret((0, 0), 2))

    def test_only_a_marker_follows(self):
        root = Node.block(
            Node.block(Node.text_node("ab"), Node.marker("ghost", "s-1"))
        )

        assert is_caret_at_line_end(root, caret((0, 0), 2))

    def test_caret_between_nodes_is_treated_as_line_end(self):
        root = Node.block(Node.block(Node.text_node("ab")), Node.block())

        assert is_caret_at_line_end(root, caret((1,), 0))

    def test_unresolvable_caret(self):
        root = Node.block(Node.block(Node.text_node("ab")))

        assert not is_caret_at_line_end(root, None)
        assert not is_caret_at_line_end(
            root, Selection(CaretPosition((0, 0), 0), CaretPosition((0, 0), 2))
        )
