"""Fixed lookup tables used by the RTF converter.

All tables are read-only. Adding a control word or destination is a data
change here, not a code change in the tokenizer or interpreter.
"""

import re
from types import MappingProxyType

# RTF signature a document must start with (after trimming)
RTF_SIGNATURE = "{\\rtf"

# Negative \uN parameters wrap into the unsigned 16-bit range
UNICODE_BIAS = 65536

# =============================================================================
# Codepage
# =============================================================================

# Windows-1252 punctuation plus symbols common in clinical letters.
# Bytes not listed here resolve to chr(byte).
WINDOWS_1252 = MappingProxyType(
    {
        0x80: "€",
        0x82: "‚",
        0x83: "ƒ",
        0x84: "„",
        0x85: "…",
        0x86: "†",
        0x87: "‡",
        0x88: "ˆ",
        0x89: "‰",
        0x8A: "Š",
        0x8B: "‹",
        0x8C: "Œ",
        0x8E: "Ž",
        0x91: "‘",
        0x92: "’",
        0x93: "“",
        0x94: "”",
        0x95: "•",
        0x96: "–",
        0x97: "—",
        0x98: "˜",
        0x99: "™",
        0x9A: "š",
        0x9B: "›",
        0x9C: "œ",
        0x9E: "ž",
        0x9F: "Ÿ",
        # Medical symbols
        0xB0: "°",
        0xB1: "±",
        0xB2: "²",
        0xB3: "³",
        0xB5: "µ",
        0xB7: "·",
        0xBC: "¼",
        0xBD: "½",
        0xBE: "¾",
        0xD7: "×",
        0xF7: "÷",
        # Extended
        0xA0: " ",  # no-break space, flattened
        0xA3: "£",
        0xA7: "§",
        0xA9: "©",
        0xAE: "®",
    }
)


def resolve_byte(byte_code: int) -> str:
    """Resolve a \\'XX byte through the codepage, falling back to chr()."""
    return WINDOWS_1252.get(byte_code, chr(byte_code))


# Substituted for \uN surrogates that have no partner
REPLACEMENT_CHARACTER = "\ufffd"

_SURROGATE_PAIR = re.compile("[\ud800-\udbff][\udc00-\udfff]")
_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def _join_pair(match: re.Match) -> str:
    high, low = match.group()
    return chr(0x10000 + ((ord(high) - 0xD800) << 10) + (ord(low) - 0xDC00))


def resolve_surrogates(text: str) -> str:
    """
    Join adjacent surrogate halves and replace unpaired ones.

    Word writes characters outside the BMP as two \\uN escapes. An
    unpaired half cannot be encoded as UTF-8, so it becomes U+FFFD.
    """
    text = _SURROGATE_PAIR.sub(_join_pair, text)
    return _LONE_SURROGATE.sub(REPLACEMENT_CHARACTER, text)


# =============================================================================
# Control words
# =============================================================================

# Control words that produce literal output
CONTROL_WORD_OUTPUT = MappingProxyType(
    {
        "par": "\n",
        "line": "\n",
        "tab": "\t",
        "cell": "\t",  # table cells become tabs
        "row": "\n",  # table rows become newlines
        "page": "\n\n---\n\n",
        "sect": "\n\n",
        "emdash": "—",
        "endash": "–",
        "emspace": " ",
        "enspace": " ",
        "qmspace": " ",
        "bullet": "•",
        "lquote": "‘",
        "rquote": "’",
        "ldblquote": "“",
        "rdblquote": "”",
        "~": " ",  # non-breaking space
        "-": "‑",  # non-breaking hyphen
        "_": "‑",
        "softline": "\n",
        "softcol": " ",
        "softpage": "\n",
    }
)

# Destinations whose content is metadata, never body text
SKIP_DESTINATIONS = frozenset(
    {
        # Tables
        "fonttbl",
        "colortbl",
        "stylesheet",
        "listtable",
        "listoverridetable",
        "revtbl",
        "rsidtbl",
        "xmlnstbl",
        "pgdsctbl",
        # Document info
        "info",
        "title",
        "author",
        "operator",
        "company",
        "category",
        "keywords",
        "comment",
        "doccomm",
        "hlinkbase",
        "generator",
        "creatim",
        "revtim",
        "printim",
        "buptim",
        "nofcharsws",
        # Headers and footers
        "header",
        "headerl",
        "headerr",
        "headerf",
        "footer",
        "footerl",
        "footerr",
        "footerf",
        # Pictures, objects and shapes
        "pict",
        "object",
        "objdata",
        "blipuid",
        "shp",
        "shpinst",
        "shppict",
        "shprslt",
        # Fields
        "field",
        "fldinst",
        "fldrslt",
        "formfield",
        "datafield",
        # Markers
        "xe",
        "tc",
        "bkmkstart",
        "bkmkend",
        # Office theme payloads
        "themedata",
        "colorschememapping",
        "latentstyles",
        "datastore",
        "mmathPr",
    }
)
