"""Tests for the RTF tokenizer."""

import pytest

from rtfplain.converter.tokenizer import tokenize
from rtfplain.converter.tokens import (
    GROUP_END,
    GROUP_START,
    Control,
    Hex,
    Text,
    TokenType,
    Unicode,
    describe,
)


class TestGroupsAndText:
    """Braces, text runs and line breaks."""

    def test_simple_document(self):
        tokens = tokenize("{\\rtf1 Hi}")

        assert tokens == [GROUP_START, Control("rtf", 1), Text("Hi"), GROUP_END]

    def test_text_run_is_maximal(self):
        tokens = tokenize("Dear Dr Smith,")

        assert tokens == [Text("Dear Dr Smith,")]

    def test_bare_line_breaks_skipped(self):
        """Source line breaks split text runs but produce no tokens."""
        tokens = tokenize("first\r\nsecond\nthird")

        assert tokens == [Text("first"), Text("second"), Text("third")]

    def test_empty_input(self):
        assert tokenize("") == []

    def test_token_types(self):
        tokens = tokenize("{\\b x}")

        assert [t.type for t in tokens] == [
            TokenType.GROUP_START,
            TokenType.CONTROL,
            TokenType.TEXT,
            TokenType.GROUP_END,
        ]


class TestControlWords:
    """Control words and control symbols."""

    def test_parameter_parsed(self):
        tokens = tokenize("\\fs24")

        assert tokens == [Control("fs", 24)]

    def test_negative_parameter(self):
        tokens = tokenize("\\fi-360x")

        assert tokens == [Control("fi", -360), Text("x")]

    def test_no_parameter(self):
        tokens = tokenize("\\pard")

        assert tokens == [Control("pard")]
        assert tokens[0].parameter is None

    def test_single_space_delimiter_consumed(self):
        """Only the first space after a control word is a delimiter."""
        tokens = tokenize("\\b  bold")

        assert tokens == [Control("b"), Text(" bold")]

    def test_control_ends_at_non_letter(self):
        tokens = tokenize("\\par\\par")

        assert tokens == [Control("par"), Control("par")]

    def test_u_followed_by_letter_is_control_word(self):
        """\\ul and \\uc are control words, not unicode escapes."""
        tokens = tokenize("\\ul0\\uc1")

        assert tokens == [Control("ul", 0), Control("uc", 1)]

    def test_control_symbols(self):
        tokens = tokenize("\\~\\-\\_\\*")

        assert tokens == [Control("~"), Control("-"), Control("_"), Control("*")]

    def test_backslash_newline_is_par(self):
        tokens = tokenize("a\\\r\nb")

        assert tokens == [Text("a"), Control("par"), Text("b")]

    def test_backslash_lf_is_par(self):
        tokens = tokenize("a\\\nb")

        assert tokens == [Text("a"), Control("par"), Text("b")]

    def test_overlong_parameter_ignored(self):
        tokens = tokenize("\\fs12345678901")

        assert tokens == [Control("fs", None)]


class TestEscapes:
    """Hex, unicode and literal escapes."""

    def test_escaped_braces_and_backslash(self):
        tokens = tokenize("\\{\\}\\\\")

        assert tokens == [Text("{"), Text("}"), Text("\\")]

    def test_hex_mapped_through_codepage(self):
        tokens = tokenize("\\'99")

        assert tokens == [Hex("™", 0x99)]

    def test_hex_unmapped_uses_raw_code(self):
        tokens = tokenize("\\'e9")

        assert tokens == [Hex("é", 0xE9)]

    def test_hex_uppercase_digits(self):
        tokens = tokenize("\\'B0")

        assert tokens == [Hex("°", 0xB0)]

    def test_malformed_hex_dropped(self):
        """Non-hex pair is dropped along with its two characters."""
        tokens = tokenize("\\'zzabc")

        assert tokens == [Text("abc")]

    def test_truncated_hex_dropped(self):
        assert tokenize("\\'4") == []

    def test_unicode_escape(self):
        tokens = tokenize("\\u8364?")

        assert tokens == [Unicode("€", 8364)]

    def test_unicode_negative_wraps(self):
        tokens = tokenize("\\u-1?")

        assert tokens == [Unicode("\uffff", 65535)]

    def test_unicode_placeholder_consumed_once(self):
        tokens = tokenize("\\u233??")

        assert tokens == [Unicode("é", 233), Text("?")]

    def test_unicode_without_placeholder(self):
        tokens = tokenize("\\u233 x")

        assert tokens == [Unicode("é", 233), Text(" x")]

    def test_unicode_sign_without_digits_dropped(self):
        tokens = tokenize("\\u-?x")

        assert tokens == [Text("x")]

    def test_unicode_out_of_range_dropped(self):
        tokens = tokenize("\\u99999999?ok")

        assert tokens == [Text("ok")]

    def test_trailing_backslash_dropped(self):
        tokens = tokenize("abc\\")

        assert tokens == [Text("abc")]


class TestTokens:
    """Token value objects."""

    def test_tokens_are_immutable(self):
        token = Control("par")

        with pytest.raises(AttributeError):
            token.name = "line"

    def test_describe(self):
        assert describe(Control("fs", 24)) == "\\fs24"
        assert describe(Control("par")) == "\\par"
        assert describe(Hex("™", 0x99)) == "'™' (0x99)"
        assert describe(Unicode("€", 8364)) == "'€' (U+20AC)"
        assert describe(Text("hi")) == "'hi'"
        assert describe(GROUP_START) == "{"
        assert describe(GROUP_END) == "}"
