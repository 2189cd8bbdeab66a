"""
Unicode block membership tests for every supported script.

Each script is described by a tuple of inclusive code-point ranges. The ranges
are curated from the Unicode block assignments and must stay stable: changing
a boundary changes classification results for existing callers.
"""

from __future__ import annotations

from typing import Callable

from scriptdetect.core.scripts import Script

CodePointRange = tuple[int, int]
ScriptPredicate = Callable[[str], bool]

# https://en.wikipedia.org/wiki/Latin_script_in_Unicode
LATIN_RANGES: tuple[CodePointRange, ...] = (
    (0x0041, 0x005A),
    (0x0061, 0x007A),
    (0x0080, 0x00FF),
    (0x0100, 0x017F),
    (0x0180, 0x024F),
    (0x0250, 0x02AF),
    (0x1D00, 0x1D7F),
    (0x1D80, 0x1DBF),
    (0x1E00, 0x1EFF),
    (0x2100, 0x214F),
    (0x2C60, 0x2C7F),
    (0xA720, 0xA7FF),
    (0xAB30, 0xAB6F),
)

CYRILLIC_RANGES: tuple[CodePointRange, ...] = (
    (0x0400, 0x0484),
    (0x0487, 0x052F),
    (0x2DE0, 0x2DFF),
    (0xA640, 0xA69D),
    (0x1D2B, 0x1D2B),
    (0x1D78, 0x1D78),
    (0xA69F, 0xA69F),
)

# https://en.wikipedia.org/wiki/Arabic_script_in_Unicode
ARABIC_RANGES: tuple[CodePointRange, ...] = (
    (0x0600, 0x06FF),
    (0x0750, 0x07FF),
    (0x08A0, 0x08FF),
    (0xFB50, 0xFDFF),
    (0xFE70, 0xFEFF),
    (0x10E60, 0x10E7F),
    (0x1EE00, 0x1EEFF),
)

# CJK radicals, ideographic marks and the unified/compatibility ideograph blocks.
MANDARIN_RANGES: tuple[CodePointRange, ...] = (
    (0x2E80, 0x2E99),
    (0x2E9B, 0x2EF3),
    (0x2F00, 0x2FD5),
    (0x3005, 0x3005),
    (0x3007, 0x3007),
    (0x3021, 0x3029),
    (0x3038, 0x303B),
    (0x3400, 0x4DB5),
    (0x4E00, 0x9FCC),
    (0xF900, 0xFA6D),
    (0xFA70, 0xFAD9),
)

DEVANAGARI_RANGES: tuple[CodePointRange, ...] = (
    (0x0900, 0x097F),
    (0xA8E0, 0xA8FF),
    (0x1CD0, 0x1CFF),
)

HEBREW_RANGES: tuple[CodePointRange, ...] = ((0x0590, 0x05FF),)

ETHIOPIC_RANGES: tuple[CodePointRange, ...] = (
    (0x1200, 0x139F),
    (0x2D80, 0x2DDF),
    (0xAB00, 0xAB2F),
)

GEORGIAN_RANGES: tuple[CodePointRange, ...] = ((0x10A0, 0x10FF),)

BENGALI_RANGES: tuple[CodePointRange, ...] = ((0x0980, 0x09FF),)

# Syllables, Jamo (incl. extended blocks), compatibility Jamo, enclosed forms
# and the halfwidth/fullwidth forms block.
HANGUL_RANGES: tuple[CodePointRange, ...] = (
    (0xAC00, 0xD7AF),
    (0x1100, 0x11FF),
    (0x3130, 0x318F),
    (0x3200, 0x32FF),
    (0xA960, 0xA97F),
    (0xD7B0, 0xD7FF),
    (0xFF00, 0xFFEF),
)

HIRAGANA_RANGES: tuple[CodePointRange, ...] = ((0x3040, 0x309F),)

KATAKANA_RANGES: tuple[CodePointRange, ...] = ((0x30A0, 0x30FF),)

GREEK_RANGES: tuple[CodePointRange, ...] = ((0x0370, 0x03FF),)

KANNADA_RANGES: tuple[CodePointRange, ...] = ((0x0C80, 0x0CFF),)

TAMIL_RANGES: tuple[CodePointRange, ...] = ((0x0B80, 0x0BFF),)

THAI_RANGES: tuple[CodePointRange, ...] = ((0x0E00, 0x0E7F),)

GUJARATI_RANGES: tuple[CodePointRange, ...] = ((0x0A80, 0x0AFF),)

# Gurmukhi is the script of Punjabi.
GURMUKHI_RANGES: tuple[CodePointRange, ...] = ((0x0A00, 0x0A7F),)

TELUGU_RANGES: tuple[CodePointRange, ...] = ((0x0C00, 0x0C7F),)

MALAYALAM_RANGES: tuple[CodePointRange, ...] = ((0x0D00, 0x0D7F),)

ORIYA_RANGES: tuple[CodePointRange, ...] = ((0x0B00, 0x0B7F),)

MYANMAR_RANGES: tuple[CodePointRange, ...] = ((0x1000, 0x109F),)

SINHALA_RANGES: tuple[CodePointRange, ...] = ((0x0D80, 0x0DFF),)

KHMER_RANGES: tuple[CodePointRange, ...] = (
    (0x1780, 0x17FF),
    (0x19E0, 0x19FF),
)


def _in_ranges(char: str, ranges: tuple[CodePointRange, ...]) -> bool:
    code = ord(char)
    for start, end in ranges:
        if start <= code <= end:
            return True
    return False


def _range_predicate(ranges: tuple[CodePointRange, ...]) -> ScriptPredicate:
    def _predicate(char: str) -> bool:
        return _in_ranges(char, ranges)

    return _predicate


is_latin = _range_predicate(LATIN_RANGES)
is_cyrillic = _range_predicate(CYRILLIC_RANGES)
is_arabic = _range_predicate(ARABIC_RANGES)
is_mandarin = _range_predicate(MANDARIN_RANGES)
is_devanagari = _range_predicate(DEVANAGARI_RANGES)
is_hebrew = _range_predicate(HEBREW_RANGES)
is_ethiopic = _range_predicate(ETHIOPIC_RANGES)
is_georgian = _range_predicate(GEORGIAN_RANGES)
is_bengali = _range_predicate(BENGALI_RANGES)
is_hangul = _range_predicate(HANGUL_RANGES)
is_hiragana = _range_predicate(HIRAGANA_RANGES)
is_katakana = _range_predicate(KATAKANA_RANGES)
is_greek = _range_predicate(GREEK_RANGES)
is_kannada = _range_predicate(KANNADA_RANGES)
is_tamil = _range_predicate(TAMIL_RANGES)
is_thai = _range_predicate(THAI_RANGES)
is_gujarati = _range_predicate(GUJARATI_RANGES)
is_gurmukhi = _range_predicate(GURMUKHI_RANGES)
is_telugu = _range_predicate(TELUGU_RANGES)
is_malayalam = _range_predicate(MALAYALAM_RANGES)
is_oriya = _range_predicate(ORIYA_RANGES)
is_myanmar = _range_predicate(MYANMAR_RANGES)
is_sinhala = _range_predicate(SINHALA_RANGES)
is_khmer = _range_predicate(KHMER_RANGES)

# Order matters: the first matching entry classifies a character, and the
# last maximal entry wins a tie in the final count.
SCRIPT_PREDICATES: tuple[tuple[Script, ScriptPredicate], ...] = (
    (Script.LATIN, is_latin),
    (Script.CYRILLIC, is_cyrillic),
    (Script.ARABIC, is_arabic),
    (Script.MANDARIN, is_mandarin),
    (Script.DEVANAGARI, is_devanagari),
    (Script.HEBREW, is_hebrew),
    (Script.ETHIOPIC, is_ethiopic),
    (Script.GEORGIAN, is_georgian),
    (Script.BENGALI, is_bengali),
    (Script.HANGUL, is_hangul),
    (Script.HIRAGANA, is_hiragana),
    (Script.KATAKANA, is_katakana),
    (Script.GREEK, is_greek),
    (Script.KANNADA, is_kannada),
    (Script.TAMIL, is_tamil),
    (Script.THAI, is_thai),
    (Script.GUJARATI, is_gujarati),
    (Script.GURMUKHI, is_gurmukhi),
    (Script.TELUGU, is_telugu),
    (Script.MALAYALAM, is_malayalam),
    (Script.ORIYA, is_oriya),
    (Script.MYANMAR, is_myanmar),
    (Script.SINHALA, is_sinhala),
    (Script.KHMER, is_khmer),
)


def validate_predicate_table(table: tuple[tuple[Script, ScriptPredicate], ...]) -> None:
    seen = [script for script, _ in table]
    duplicates = sorted({script.display_name for script in seen if seen.count(script) > 1})
    if duplicates:
        raise ValueError(f"predicate table lists scripts more than once: {', '.join(duplicates)}")
    missing = [script.display_name for script in Script if script not in seen]
    if missing:
        raise ValueError(f"predicate table is missing scripts: {', '.join(missing)}")


validate_predicate_table(SCRIPT_PREDICATES)


def classify_index(char: str, table: tuple[tuple[Script, ScriptPredicate], ...] = SCRIPT_PREDICATES) -> int | None:
    """Return the position of the first table entry matching `char`, or None."""
    for idx, (_, predicate) in enumerate(table):
        if predicate(char):
            return idx
    return None


def script_of(char: str) -> Script | None:
    idx = classify_index(char)
    if idx is None:
        return None
    return SCRIPT_PREDICATES[idx][0]
