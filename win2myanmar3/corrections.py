"""
Correction Rules

Fix-ups applied once after clustering: duplicate marks, letter/vowel
combinations that collapse to a single letter, mark ordering, two
contracted words, digits that were really consonants and a last swap of
upper and lower marks.

Two more groups run around substitution: ``SPACING_CLEANUP`` removes
spaces typed inside a syllable before any token is read, and
``LITERAL_PUNCTUATION`` writes the bracket and comma glyphs out as ASCII
once nothing will read them as letters again.

The rules are plain records run in order by ``apply_corrections``, so
each one can be tested alone and the order is visible in one place.
"""

import re
from dataclasses import dataclass
from typing import Callable, Union

from .charsets import (
    CONSONANTS as C,
    DIGITS as D,
    INDEPENDENT_VOWELS as IV,
    MEDIALS as M,
    TONE_MARKS as T,
    VOWELS as V,
)


@dataclass(frozen=True)
class ReplaceRule:
    """Replace every occurrence of a literal sequence."""
    old: str
    new: str

    def apply(self, text: str) -> str:
        return text.replace(self.old, self.new)


@dataclass(frozen=True)
class PatternRule:
    """Substitute a compiled pattern with a template or a callable."""
    pattern: re.Pattern
    replacement: Union[str, Callable[[re.Match], str]]

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


@dataclass(frozen=True)
class RuleGroup:
    """A named, ordered run of rules.

    With ``repeat`` set the whole run is applied again until the text stops
    changing. Every swap in a repeating group moves a pair towards one fixed
    order, so the loop ends.
    """
    name: str
    rules: tuple
    repeat: bool = False

    def apply(self, text: str) -> str:
        while True:
            previous = text
            for rule in self.rules:
                text = rule.apply(text)
            if not self.repeat or text == previous:
                return text


def _swap(first: str, second: str) -> ReplaceRule:
    return ReplaceRule(first + second, second + first)


def _any_of(*sequences: str) -> re.Pattern:
    return re.compile("|".join(sequences))


def _digit_rules(context: str) -> tuple:
    """Read digits zero, seven and eight as wa, ra and ga when ``context`` follows."""
    return tuple(
        PatternRule(re.compile(digit + "(?=" + context + ")"), consonant)
        for digit, consonant in ((D[0], C[29]), (D[7], C[27]), (D[8], C[2]))
    )


DEDUPLICATE_MARKS = RuleGroup("deduplicate_marks", (
    PatternRule(re.compile("([\u102D\u102E\u103D\u103E\u1032\u1037\u1036\u103A])\\1+"), r"\1"),
))

LETTER_SUBSTITUTIONS = RuleGroup("letter_substitutions", (
    ReplaceRule(C[5] + M[0], C[8]),
    ReplaceRule(C[30] + M[1] + V[6] + V[1] + T[2], IV[6]),
    ReplaceRule(C[30] + M[1], IV[5]),
    ReplaceRule(IV[5] + V[6] + V[1] + T[2], IV[6]),
    ReplaceRule(IV[2] + V[3], IV[3]),
    ReplaceRule(IV[2] + T[3], C[9] + T[3]),
    ReplaceRule(IV[2] + T[2], C[9] + T[2]),
    ReplaceRule(IV[2] + V[1], C[9] + V[1]),
    ReplaceRule(D[4] + C[4] + T[2] + T[1], IV[7] + C[4] + T[2] + T[1]),
))

TONE_MARK_ORDER = RuleGroup("tone_mark_order", (
    _swap(T[0], T[2]),
    _swap(T[1], T[2]),
))

MEDIAL_VOWEL_ORDER = RuleGroup("medial_vowel_order", (
    _swap(M[3], M[0]),
    _swap(M[3], M[1]),
    _swap(M[3], M[2]),
    _swap(M[2], M[0]),
    _swap(M[2], M[1]),
    PatternRule(
        _any_of(
            M[3] + M[2] + M[1], M[3] + M[1] + M[2], M[2] + M[3] + M[1],
            M[2] + M[1] + M[3], M[1] + M[3] + M[2],
        ),
        M[1] + M[2] + M[3],
    ),
    PatternRule(
        _any_of(
            M[3] + M[2] + M[0], M[3] + M[0] + M[2], M[2] + M[3] + M[0],
            M[2] + M[0] + M[3], M[0] + M[3] + M[2],
        ),
        M[0] + M[2] + M[3],
    ),
    _swap(V[8], V[4]),
    _swap(V[4], V[2]),
    _swap(V[8], V[2]),
    _swap(T[0], V[4]),
    _swap(T[0], V[7]),
    _swap(T[0], V[8]),
), repeat=True)

CONTRACTED_WORDS = RuleGroup("contracted_words", (
    ReplaceRule(
        C[26] + V[6] + V[1] + C[0] + M[0] + T[2] + V[1],
        C[26] + V[6] + V[1] + C[0] + T[2] + M[0] + V[1],
    ),
    ReplaceRule(C[20] + V[4] + T[2], C[20] + T[2] + V[4]),
))

DOUBLE_ASAT = RuleGroup("double_asat", (
    ReplaceRule(T[2] + T[2], T[2]),
))

DIGIT_AS_CONSONANT = RuleGroup("digit_as_consonant", (
    *_digit_rules(T[2]),
    *_digit_rules(T[3]),
    *_digit_rules("[" + V[0] + "-" + V[8] + "]"),
    *_digit_rules("[" + M[0] + "-" + M[3] + "]"),
    *_digit_rules("[\u1000-\u1031][\u1039\u103A]"),
))

FINAL_SWAPS = RuleGroup("final_swaps", (
    PatternRule(
        re.compile("(?P<upper>[\u102D\u102E\u1036\u1032])(?P<medials>[\u103B-\u103E]+)"),
        r"\g<medials>\g<upper>",
    ),
    PatternRule(
        re.compile("(?P<marks>[\u1036\u1037\u1038]+)(?P<lower>[\u102F\u1030])"),
        r"\g<lower>\g<marks>",
    ),
))

CORRECTION_RULES = (
    DEDUPLICATE_MARKS,
    LETTER_SUBSTITUTIONS,
    TONE_MARK_ORDER,
    MEDIAL_VOWEL_ORDER,
    CONTRACTED_WORDS,
    DOUBLE_ASAT,
    DIGIT_AS_CONSONANT,
    FINAL_SWAPS,
)


def apply_corrections(text: str, rules: tuple = CORRECTION_RULES) -> str:
    """Run every correction group over ``text`` in order."""
    for group in rules:
        text = group.apply(text)
    return text


# ── Around substitution ──────────────────────────────────────────────────────

# Spaces typed between a letter and a mark that belongs to it
SPACING_CLEANUP = RuleGroup("spacing_cleanup", (
    ReplaceRule(" f", "f"),
    ReplaceRule(" m", "m"),
    ReplaceRule("  ;", ";"),
    ReplaceRule("a ", "a"),
    ReplaceRule(" D", "D"),
    ReplaceRule(" d", "d"),
    ReplaceRule(" F", "F"),
    ReplaceRule(" S", "S"),
))

# Glyphs for ASCII punctuation that is itself a legacy token
LITERAL_PUNCTUATION = RuleGroup("literal_punctuation", (
    ReplaceRule("«", "["),
    ReplaceRule("»", "]"),
    ReplaceRule("ç", ","),
))
