"""
Win to Myanmar3 Conversion Engine

Pure text-to-text conversion from the Win Innwa legacy encoding to
Unicode in Myanmar3 storage order:

    spacing cleanup -> substitute -> reorder_kinzi -> reorder_ra_medial
        -> disambiguate_digits -> cluster_syllables -> apply_corrections
        -> literal punctuation

Every stage is a pure function over an immutable string, and every
table it reads is built once at import, so the engine is safe to call
from any number of threads at once.
"""

from .corrections import LITERAL_PUNCTUATION, SPACING_CLEANUP, apply_corrections
from .mapping import substitute
from .reorder import (
    cluster_syllables,
    disambiguate_digits,
    reorder_kinzi,
    reorder_ra_medial,
)

# Stages that restore storage order after substitution, in order
STAGES = (
    reorder_kinzi,
    reorder_ra_medial,
    disambiguate_digits,
    cluster_syllables,
    apply_corrections,
)

_PUNCTUATION_GLYPHS = tuple(rule.old for rule in LITERAL_PUNCTUATION.rules)


def convert_win_to_unicode(text: str) -> str:
    """
    Convert legacy Win-font text to Myanmar3 Unicode.

    Characters with no legacy meaning (spaces, most punctuation, anything
    outside Latin-1) pass through unchanged. Text without a single legacy
    token is already Unicode and is returned as is, which makes a second
    conversion of converted Myanmar text a no-op. The bracket and comma
    glyphs come out as plain ASCII brackets and commas.

    Args:
        text: A run of text typed in a Win font

    Returns:
        The same text in Unicode storage order
    """
    unistr = substitute(SPACING_CLEANUP.apply(text))
    if unistr == text and not any(glyph in text for glyph in _PUNCTUATION_GLYPHS):
        return text

    for stage in STAGES:
        unistr = stage(unistr)
    return LITERAL_PUNCTUATION.apply(unistr)
