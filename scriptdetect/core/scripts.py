from __future__ import annotations

from enum import IntEnum


class Script(IntEnum):
    """Writing system recognized by the classifier.

    Ordinals follow alphabetical order and are stable; bindings exchange
    scripts as these small integers.
    """

    ARABIC = 0
    BENGALI = 1
    CYRILLIC = 2
    DEVANAGARI = 3
    ETHIOPIC = 4
    GEORGIAN = 5
    GREEK = 6
    GUJARATI = 7
    GURMUKHI = 8
    HANGUL = 9
    HEBREW = 10
    HIRAGANA = 11
    KANNADA = 12
    KATAKANA = 13
    KHMER = 14
    LATIN = 15
    MALAYALAM = 16
    MANDARIN = 17
    MYANMAR = 18
    ORIYA = 19
    SINHALA = 20
    TAMIL = 21
    TELUGU = 22
    THAI = 23

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def from_name(cls, name: str) -> Script:
        key = str(name).strip().lower()
        script = _BY_DISPLAY_NAME.get(key)
        if script is None:
            raise ValueError(f"unknown script: {name!r} (known: {sorted(_BY_DISPLAY_NAME)})")
        return script

    def __str__(self) -> str:
        return self.display_name

    def __format__(self, format_spec: str) -> str:
        return format(self.display_name, format_spec)

    def __repr__(self) -> str:
        return f"Script.{self.name}"


_DISPLAY_NAMES: dict[Script, str] = {
    Script.ARABIC: "Arabic",
    Script.BENGALI: "Bengali",
    Script.CYRILLIC: "Cyrillic",
    Script.DEVANAGARI: "Devanagari",
    Script.ETHIOPIC: "Ethiopic",
    Script.GEORGIAN: "Georgian",
    Script.GREEK: "Greek",
    Script.GUJARATI: "Gujarati",
    Script.GURMUKHI: "Gurmukhi",
    Script.HANGUL: "Hangul",
    Script.HEBREW: "Hebrew",
    Script.HIRAGANA: "Hiragana",
    Script.KANNADA: "Kannada",
    Script.KATAKANA: "Katakana",
    Script.KHMER: "Khmer",
    Script.LATIN: "Latin",
    Script.MALAYALAM: "Malayalam",
    Script.MANDARIN: "Mandarin",
    Script.MYANMAR: "Myanmar",
    Script.ORIYA: "Oriya",
    Script.SINHALA: "Sinhala",
    Script.TAMIL: "Tamil",
    Script.TELUGU: "Telugu",
    Script.THAI: "Thai",
}

_missing = [script.name for script in Script if script not in _DISPLAY_NAMES]
if _missing:
    raise RuntimeError(f"display names missing for scripts: {', '.join(_missing)}")
del _missing

_BY_DISPLAY_NAME: dict[str, Script] = {label.lower(): script for script, label in _DISPLAY_NAMES.items()}
