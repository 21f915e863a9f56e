"""
Storage-Order Reordering

Structural passes that turn substituted text, still in typed (visual)
order, into Unicode storage order:

    reorder_kinzi       kinzi typed after its base -> before it
    reorder_ra_medial   ra medial typed before its consonant -> after it
    disambiguate_digits digit zero/seven beside Myanmar text -> wa/ra
    cluster_syllables   each syllable re-emitted in canonical order

Every pass is a pure str -> str function. None of the patterns nests a
quantifier, so matching stays linear in the input length.
"""

import re

from .charsets import (
    E_VOWEL,
    KINZI,
    KINZI_BASES,
    UPPER_VOWELS,
    is_myanmar_context,
)

_CONSONANT = "[\u1000-\u1021]"
_STACKED = "\u1039" + _CONSONANT

# ── Kinzi ────────────────────────────────────────────────────────────────────

# The e-vowel and the ra medial are typed ahead of the base, so they sit
# between a preceding kinzi slot and the base. An anusvara here comes from
# the combined anusvara+kinzi glyph.
_KINZI_RE = re.compile(
    "(?P<e>\u1031)?(?P<ra>\u103C)?"
    "(?P<base>[" + "".join(sorted(KINZI_BASES)) + "])"
    "(?P<stacked>" + _STACKED + ")?"
    "(?P<anusvara>\u1036)?"
    + KINZI
)


def reorder_kinzi(text: str) -> str:
    """Move each kinzi in front of the base it was typed after."""
    return _KINZI_RE.sub(
        KINZI + r"\g<e>\g<ra>\g<base>\g<stacked>\g<anusvara>", text
    )


# ── Ra medial ────────────────────────────────────────────────────────────────

_RA_MEDIAL_RE = re.compile(
    "(?P<ra>\u103C)(?P<wa>\u103D)?(?P<ha>\u103E)?(?P<u>\u102F)?"
    "(?P<con>" + _CONSONANT + ")(?P<stacked>" + _STACKED + ")?"
)


def reorder_ra_medial(text: str) -> str:
    """Move a ra medial, with any wa/ha medial and u sign typed with it,
    behind its consonant (and stacked consonant)."""
    return _RA_MEDIAL_RE.sub(r"\g<con>\g<stacked>\g<ra>\g<wa>\g<ha>\g<u>", text)


# ── Digits that are really letters ───────────────────────────────────────────

DIGIT_LETTERS = {
    "\u1040": "\u101D",  # zero -> wa
    "\u1047": "\u101B",  # seven -> ra
}


def disambiguate_digits(text: str) -> str:
    """Read digit zero as wa and digit seven as ra beside Myanmar text.

    Each neighbour is judged on the input, so a digit turned into a
    letter never influences the digit next to it. A digit at either end
    of the string has only one neighbour to check.
    """
    if not any(digit in text for digit in DIGIT_LETTERS):
        return text

    last = len(text) - 1
    chars = []
    for i, ch in enumerate(text):
        letter = DIGIT_LETTERS.get(ch)
        if letter is not None and (
            (i > 0 and is_myanmar_context(text[i - 1]))
            or (i < last and is_myanmar_context(text[i + 1]))
        ):
            ch = letter
        chars.append(ch)
    return "".join(chars)


# ── Final clustering ─────────────────────────────────────────────────────────

_UPPER = "[" + "".join(UPPER_VOWELS) + "]"

_SYLLABLE_RE = re.compile(
    "(?P<e>" + E_VOWEL + ")?"
    "(?P<con>" + _CONSONANT + ")"
    "(?P<stacked>" + _STACKED + ")?"
    "(?P<upper>" + _UPPER + ")?"
    "(?P<tones>[\u1037\u1038]{0,2})"
    "(?P<medials>[\u103B-\u103E]*)"
    "(?P<lower>[\u102F\u1030])?"
    "(?P<stray>[\u102D\u102E\u1032])?"
)


def _emit_syllable(match: re.Match) -> str:
    parts = match.groupdict(default="")
    upper = parts["upper"]
    if not upper:
        # Typed after the medials or the lower vowel, but still the only
        # upper mark of the syllable.
        upper = parts["stray"]
    # A stray mark after an upper vowel is a second copy and is dropped.
    return (
        parts["con"] + parts["stacked"] + parts["medials"] + parts["e"]
        + upper + parts["lower"] + parts["tones"]
    )


def cluster_syllables(text: str) -> str:
    """Re-emit every syllable as consonant, stacked consonant, medials,
    e-vowel, upper vowel, lower vowel, tone marks."""
    return _SYLLABLE_RE.sub(_emit_syllable, text)
