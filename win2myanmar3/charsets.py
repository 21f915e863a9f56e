"""
Myanmar Character Classes

Fixed code point classes from the Unicode Myanmar block, shared by the
reordering passes and the correction rules. The tuples keep a stable
index, so a rule can say CONSONANTS[29] for wa exactly as the legacy
correction tables do.
"""

# Consonants U+1000 (ka) .. U+1021 (a)
CONSONANTS = tuple(chr(cp) for cp in range(0x1000, 0x1022))

# Medials in canonical storage order: ya, ra, wa, ha
MEDIALS = ("\u103B", "\u103C", "\u103D", "\u103E")
YA, RA, WA, HA = MEDIALS

# Dependent vowels: tall aa, aa, i, ii, u, uu, e, ai, anusvara
VOWELS = (
    "\u102B", "\u102C", "\u102D", "\u102E", "\u102F",
    "\u1030", "\u1031", "\u1032", "\u1036",
)

INDEPENDENT_VOWELS = (
    "\u1023", "\u1024", "\u1025", "\u1026",
    "\u1027", "\u1029", "\u102A", "\u104E",
)

# Dot below, visarga, asat, virama
TONE_MARKS = ("\u1037", "\u1038", "\u103A", "\u1039")
DOT_BELOW, VISARGA, ASAT, VIRAMA = TONE_MARKS

DIGITS = tuple(chr(cp) for cp in range(0x1040, 0x104A))

E_VOWEL = "\u1031"
KINZI = "\u1004\u103A\u1039"

UPPER_VOWELS = ("\u102D", "\u102E", "\u1032", "\u1036")
LOWER_VOWELS = ("\u102F", "\u1030")

CONSONANT_SET = frozenset(CONSONANTS)
MEDIAL_SET = frozenset(MEDIALS)
VOWEL_SET = frozenset(VOWELS)
INDEPENDENT_VOWEL_SET = frozenset(INDEPENDENT_VOWELS)
TONE_MARK_SET = frozenset(TONE_MARKS)
DIGIT_SET = frozenset(DIGITS)

# Bases a legacy kinzi can sit on: every consonant the mapping table emits
# (jha and wa have no single key), digit zero (read as wa later), the
# independent vowel u and the great sa.
KINZI_BASES = (CONSONANT_SET - {"\u1008", "\u101D"}) | {"\u1040", "\u1025", "\u103F"}


def is_myanmar_context(ch: str) -> bool:
    """Return True if ``ch`` makes a neighbouring digit zero/seven a letter.

    Myanmar letters and signs except wa (U+101D), tall aa (U+102B) and
    vowel sign i (U+102D), the extension block from U+104C, and the plain
    space. Digits and the section marks are not context.
    """
    cp = ord(ch)
    return (
        0x1000 <= cp <= 0x101C
        or 0x101E <= cp <= 0x102A
        or cp == 0x102C
        or 0x102E <= cp <= 0x103F
        or 0x104C <= cp <= 0x109F
        or cp == 0x0020
    )


def char_class(ch: str) -> str:
    """Name the class of a single character, or ``"other"``."""
    if ch in CONSONANT_SET:
        return "consonant"
    if ch in MEDIAL_SET:
        return "medial"
    if ch in VOWEL_SET:
        return "vowel"
    if ch in INDEPENDENT_VOWEL_SET:
        return "independent_vowel"
    if ch in TONE_MARK_SET:
        return "tone_mark"
    if ch in DIGIT_SET:
        return "digit"
    return "other"
