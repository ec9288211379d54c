"""Tests for group/destination interpretation."""

from rtfplain.converter.interpreter import GroupState, interpret
from rtfplain.converter.tables import CONTROL_WORD_OUTPUT, SKIP_DESTINATIONS
from rtfplain.converter.tokenizer import tokenize
from rtfplain.converter.tokens import GROUP_END, GROUP_START, Control, Text


def run(rtf: str) -> str:
    return interpret(tokenize(rtf))


class TestOutput:
    """Text and mapped control words reach the output."""

    def test_paragraphs(self):
        assert run("{\\rtf1 Hello\\par World}") == "Hello\nWorld"

    def test_formatting_words_are_inert(self):
        assert run("{\\rtf1\\pard\\b\\fs24 Bold\\b0  text}") == "Bold text"

    def test_mapped_control_words(self):
        text = run("{\\rtf1 a\\emdash b\\tab c\\line d\\ldblquote e\\rdblquote}")

        assert text == "a—b\tc\nd“e”"

    def test_control_symbols(self):
        assert run("{\\rtf1 10\\~mg\\_a}") == "10 mg‑a"

    def test_hex_and_unicode(self):
        assert run("{\\rtf1 37\\'b0C \\u8364?5}") == "37°C €5"

    def test_table_row(self):
        assert run("{\\rtf1 a\\cell b\\cell\\row}") == "a\tb\t\n"

    def test_surrogate_pair_joined(self):
        text = run("{\\rtf1 \\u-10179?\\u-8704?}")

        assert text == "\U0001F600"

    def test_lone_low_surrogate_replaced(self):
        text = run("{\\rtf1 a\\u-8704?}")

        assert text == "a\ufffd"

    def test_lone_high_surrogate_replaced(self):
        text = run("{\\rtf1 Patient letter body \\u-10240? end}")

        assert text == "Patient letter body \ufffd end"
        text.encode("utf-8")

    def test_split_surrogate_pair_not_joined(self):
        assert run("{\\rtf1 \\u-10179?x\\u-8704?}") == "\ufffdx\ufffd"


class TestDestinations:
    """Non-content destinations are suppressed."""

    def test_font_table_skipped(self):
        text = run("{\\rtf1{\\fonttbl{\\f0 Arial;}{\\f1 Times New Roman;}}Body}")

        assert text == "Body"

    def test_nested_groups_inside_destination_skipped(self):
        text = run("{\\rtf1{\\header{\\b Practice{\\i Name}} Line}Letter}")

        assert text == "Letter"

    def test_starred_destination_skipped(self):
        text = run("{\\rtf1{\\*\\generator Riched20 10.0;}Text}")

        assert text == "Text"

    def test_unknown_starred_destination_skipped(self):
        text = run("{\\rtf1{\\*\\unknownthing secret}Shown}")

        assert text == "Shown"

    def test_star_flag_reset_by_group(self):
        """\\* only applies to the control word that follows it."""
        text = run("{\\rtf1\\*{\\b kept}}")

        assert text == "kept"

    def test_destination_ends_with_group(self):
        text = run("{\\rtf1 before{\\pict 89504e47}after}")

        assert text == "beforeafter"

    def test_field_instruction_skipped(self):
        text = run('{\\rtf1 See {\\field{\\*\\fldinst HYPERLINK "x"}} notes}')

        assert text == "See  notes"

    def test_destination_without_group_is_ignored(self):
        """With no open group there is nothing to suppress."""
        assert run("\\fonttbl abc") == "abc"


class TestMalformedInput:
    """Unbalanced groups are tolerated."""

    def test_extra_group_end(self):
        assert run("}}{\\rtf1 x}") == "x"

    def test_unterminated_destination(self):
        assert run("{\\rtf1{\\fonttbl{\\f0 Arial;}") == ""

    def test_unterminated_body(self):
        assert run("{\\rtf1{\\b open") == "open"

    def test_deep_nesting(self):
        rtf = "{\\rtf1" + "{" * 50_000 + "deep" + "}" * 10

        assert run(rtf) == "deep"

    def test_token_list_input(self):
        tokens = [GROUP_START, Control("par"), Text("x"), GROUP_END, GROUP_END]

        assert interpret(tokens) == "\nx"


class TestTables:
    """Static lookup tables."""

    def test_tables_disjoint(self):
        assert not (set(CONTROL_WORD_OUTPUT) & SKIP_DESTINATIONS)

    def test_group_state_defaults(self):
        state = GroupState()

        assert state.skip is False
        assert state.destination is None
