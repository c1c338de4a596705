"""Tests for the PGN item classifier."""

from pgngame.notation.cursor import TextCursor
from pgngame.notation.models import PgnErrorKind, PgnItem, PgnItemKind
from pgngame.notation.tokenizer import scan_item


def _scan(text: str, **kwargs: bool) -> PgnItem:
    return scan_item(TextCursor(text), **kwargs)


def _scan_all(text: str) -> list[tuple[PgnItemKind, str]]:
    cursor = TextCursor(text)
    items: list[tuple[PgnItemKind, str]] = []
    while not cursor.at_end:
        item = scan_item(cursor)
        if item.is_error:
            break
        items.append((item.kind, item.text))
    return items


class TestTags:
    def test_tag(self) -> None:
        item = _scan('[White "Alice"]\n')
        assert item == PgnItem(PgnItemKind.TAG, 'White "Alice"')

    def test_garbage_before_first_tag_is_skipped(self) -> None:
        item = _scan('junk 1. e4 ;x\n[Event "Open"]', awaiting_tag=True)
        assert item == PgnItem(PgnItemKind.TAG, 'Event "Open"')

    def test_tag_ends_at_line_break(self) -> None:
        item = _scan('[White "A\nB"]')
        assert item.kind == PgnItemKind.TAG
        assert item.text == 'White "A'

    def test_tag_after_moves_rewinds_one_character(self) -> None:
        cursor = TextCursor('\n\n[Event "Next"]')
        item = scan_item(cursor, moves_started=True)
        assert item.kind == PgnItemKind.ERROR
        assert item.error == PgnErrorKind.UNEXPECTED_TAG
        assert cursor.position == 2
        assert cursor.peek() == "["


class TestMoves:
    def test_move_ends_at_whitespace(self) -> None:
        cursor = TextCursor("Nf3 e5")
        assert scan_item(cursor) == PgnItem(PgnItemKind.MOVE, "Nf3")
        assert cursor.peek() == "e"

    def test_move_ends_at_line_break(self) -> None:
        assert _scan("e4\ne5").text == "e4"

    def test_move_number_stops_at_period(self) -> None:
        assert _scan_all("12. e4") == [
            (PgnItemKind.MOVE_NUMBER, "12"),
            (PgnItemKind.MOVE, "e4"),
        ]

    def test_black_move_number_periods_are_skipped(self) -> None:
        assert _scan_all("1...e5") == [
            (PgnItemKind.MOVE_NUMBER, "1"),
            (PgnItemKind.MOVE, "e5"),
        ]

    def test_move_line(self) -> None:
        assert [text for _kind, text in _scan_all("1. e4 e5 2. Nf3 Nc6")] == [
            "1",
            "e4",
            "e5",
            "2",
            "Nf3",
            "Nc6",
        ]


class TestAnnotationsAndComments:
    def test_nag(self) -> None:
        assert _scan("$14 e4") == PgnItem(PgnItemKind.NAG, "14")

    def test_nag_is_not_range_checked_here(self) -> None:
        assert _scan("$300") == PgnItem(PgnItemKind.NAG, "300")

    def test_brace_comment(self) -> None:
        assert _scan("{central push} e5") == PgnItem(PgnItemKind.COMMENT, "central push")

    def test_nested_brace_comment(self) -> None:
        cursor = TextCursor("{a {b} c} e5")
        assert scan_item(cursor) == PgnItem(PgnItemKind.COMMENT, "a b c")
        assert scan_item(cursor) == PgnItem(PgnItemKind.MOVE, "e5")

    def test_comment_spans_lines(self) -> None:
        assert _scan("{line one\nline two}").text == "line one\nline two"

    def test_variation_is_a_comment(self) -> None:
        cursor = TextCursor("(1... c5 (1... e6) 2. Nf3) Nc6")
        assert scan_item(cursor) == PgnItem(
            PgnItemKind.COMMENT, "1... c5 1... e6 2. Nf3"
        )
        assert scan_item(cursor).text == "Nc6"

    def test_rest_of_line_comment(self) -> None:
        cursor = TextCursor("; developing move\nNc6")
        assert scan_item(cursor) == PgnItem(PgnItemKind.COMMENT, "developing move")
        assert cursor.peek() == "N"

    def test_escape_line_is_discarded(self) -> None:
        assert _scan("% engine output\ne4") == PgnItem(PgnItemKind.MOVE, "e4")


class TestResultsAndErrors:
    def test_result_tokens(self) -> None:
        for token in ("1-0", "0-1", "1/2-1/2", "*"):
            assert _scan(f"{token}\n") == PgnItem(PgnItemKind.RESULT, token)

    def test_empty_input_is_malformed(self) -> None:
        item = _scan("   ")
        assert item.kind == PgnItemKind.ERROR
        assert item.error == PgnErrorKind.MALFORMED_ITEM

    def test_empty_comment_is_malformed(self) -> None:
        assert _scan("{}").error == PgnErrorKind.MALFORMED_ITEM

    def test_no_tag_anywhere_is_malformed(self) -> None:
        item = _scan("1. e4 e5 *", awaiting_tag=True)
        assert item.error == PgnErrorKind.MALFORMED_ITEM
