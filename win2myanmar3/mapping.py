"""
Win Font Mapping Table

Ordered legacy-token to Unicode rules for the Win Innwa family of
glyph-indexed Myanmar fonts, and the substitution pass that runs them.

Order matters. Each entry rewrites the whole buffer left behind by the
entries before it, so:
- a multi-character token must come before every entry whose token it
  contains, or it can never match;
- an entry whose output contains a later token deliberately hands its
  result on to that later entry (see ``chained_pairs``).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class MappingEntry:
    """A single legacy token and the Unicode sequence it stands for."""
    source: str
    target: str
    priority: int

    def __repr__(self) -> str:
        return f"MappingEntry({self.priority}: {self.source!r} -> {self.target!r})"


_RULES = [
    # Multi-letter words and ligatures (longest first)
    ("aBomf", "\u102A"),
    ("aMomf", "\u102A"),
    ("ps", "\u1008"),
    ("Bo", "\u1029"),
    ("Mo", "\u1029"),
    ("OD", "\u1026"),
    ("ÍD", "\u1026"),

    # Kinzi forms and composite glyphs
    ("F", "\u1004\u103A\u1039"),
    ("ø", "\u1036\u1004\u103A\u1039"),
    ("Ð", "\u1004\u103A\u1039\u102E"),
    ("Ø", "\u1004\u103A\u1039\u102D"),
    ("ð", "\u102D\u1036"),
    ("R", "\u103B\u103D"),
    ("Q", "\u103B\u103E"),
    ("W", "\u103B\u103D\u103E"),
    ("<", "\u103C\u103D"),
    (">", "\u103C\u103D"),
    ("ê", "\u103C\u102F"),
    ("û", "\u103C\u102F"),
    ("Bu", "\u103C\u1000"),
    ("T", "\u103D\u103D\u103E"),
    ("I", "\u103E\u102F"),
    ("ª", "\u103E\u1030"),
    (":", "\u102B\u103A"),

    # Independent vowels, great sa and stacked pairs
    ("þ", "\u1024"),
    ("£", "\u1023"),
    ("O", "\u1025"),
    ("Í", "\u1025"),
    ("Ó", "\u1009\u102C"),
    ("ó", "\u103F"),
    ("@", "\u100F\u1039\u100D"),
    ("|", "\u100B\u1039\u100C"),
    ("¥", "\u100B\u1039\u100B"),
    ("×", "\u100D\u1039\u100D"),
    ("¹", "\u100E\u1039\u100D"),

    # Punctuation glyphs; the ASCII they produce is mapped again further down.
    # The bracket and comma glyphs are not here: their ASCII would become
    # letters, so they are restored after conversion instead.
    ("¿", "?"),
    ("µ", "!"),
    ("μ", "!"),
    ("_", "*"),

    # Kyat sign
    ("$", "\u1000\u103B\u1015\u103A"),

    # Fractions
    ("ƒ", "\u1041\u2044\u1042"),
    ("„", "\u1041\u2044\u1043"),
    ("…", "\u1042\u2044\u1043"),
    ("†", "\u1041\u2044\u1044"),
    ("‡", "\u1043\u2044\u1044"),
    ("ˆ", "\u1041\u2044\u1045"),
    ("‰", "\u1042\u2044\u1045"),
    ("Š", "\u1043\u2044\u1045"),
    ("‹", "\u1044\u2044\u1045"),

    # Abbreviation symbols
    ("ü", "\u104C"),
    ("í", "\u104D"),
    ("¤", "\u104E"),
    ("\\", "\u104F"),

    # Stacked (subscript) consonants
    ("ú", "\u1039\u1000"),
    ("©", "\u1039\u1001"),
    ("¾", "\u1039\u1002"),
    ("¢", "\u1039\u1003"),
    ("ö", "\u1039\u1005"),
    ("ä", "\u1039\u1006"),
    ("Æ", "\u1039\u1007"),
    ("Ñ", "\u1039\u1008"),
    ("³", "\u1039\u100C"),
    ("²", "\u1039\u100D"),
    ("Ü", "\u1039\u1015"),
    ("Ö", "\u1039\u100F"),
    ("Å", "\u1039\u1010"),
    ("å", "\u1039\u1010"),
    ("¦", "\u1039\u1011"),
    ("¬", "\u1039\u1011"),
    ("´", "\u1039\u1012"),
    ("¨", "\u1039\u1013"),
    ("é", "\u1039\u1014"),
    ("æ", "\u1039\u1016"),
    ("Ç", "\u1039\u1018"),
    ("®", "\u1039\u1019"),

    # Consonants
    ("u", "\u1000"),
    ("c", "\u1001"),
    ("*", "\u1002"),
    ("C", "\u1003"),
    ("i", "\u1004"),
    ("p", "\u1005"),
    ("q", "\u1006"),
    ("Z", "\u1007"),
    ("Ú", "\u1009"),
    ("n", "\u100A"),
    ("ñ", "\u100A"),
    ("#", "\u100B"),
    ("X", "\u100C"),
    ("!", "\u100D"),
    ("¡", "\u100E"),
    ("P", "\u100F"),
    ("w", "\u1010"),
    ("x", "\u1011"),
    ("'", "\u1012"),
    ('"', "\u1013"),
    ("e", "\u1014"),
    ("E", "\u1014"),
    ("y", "\u1015"),
    ("z", "\u1016"),
    ("A", "\u1017"),
    ("b", "\u1018"),
    ("r", "\u1019"),
    (",", "\u101A"),
    ("&", "\u101B"),
    ("½", "\u101B"),
    ("v", "\u101C"),
    ("o", "\u101E"),
    ("[", "\u101F"),
    ("V", "\u1020"),
    ("t", "\u1021"),

    # Medials
    ("s", "\u103B"),
    ("ß", "\u103B"),
    ("`", "\u103C"),
    ("j", "\u103C"),
    ("~", "\u103C"),
    ("B", "\u103C"),
    ("M", "\u103C"),
    ("N", "\u103C"),
    ("G", "\u103D"),
    ("S", "\u103E"),
    ("§", "\u103E"),

    ("{", "\u1027"),

    # Dependent vowels
    ("g", "\u102B"),
    ("m", "\u102C"),
    ("d", "\u102D"),
    ("D", "\u102E"),
    ("k", "\u102F"),
    ("K", "\u102F"),
    ("l", "\u1030"),
    ("L", "\u1030"),
    ("a", "\u1031"),
    ("J", "\u1032"),
    ("H", "\u1036"),

    # Tone marks and signs
    ("f", "\u103A"),
    ("Y", "\u1037"),
    ("U", "\u1037"),
    ("h", "\u1037"),
    (";", "\u1038"),

    # Digits; zero and seven may still turn out to be wa and ra
    ("0", "\u1040"),
    ("1", "\u1041"),
    ("2", "\u1042"),
    ("3", "\u1043"),
    ("4", "\u1044"),
    ("5", "\u1045"),
    ("6", "\u1046"),
    ("7", "\u1047"),
    ("8", "\u1048"),
    ("9", "\u1049"),

    # Section marks and plain punctuation
    ("/", "\u104B"),
    ("?", "\u104A"),
    ("]", "'"),
    ("}", "'"),
    ("^", "/"),
]

MAPPING_TABLE = tuple(
    MappingEntry(source, target, priority)
    for priority, (source, target) in enumerate(_RULES)
)


def substitute(text: str, table: tuple = MAPPING_TABLE) -> str:
    """Rewrite every legacy token in ``text``, one table entry at a time.

    Characters that no entry mentions pass through unchanged.
    """
    for entry in table:
        if entry.source in text:
            text = text.replace(entry.source, entry.target)
    return text


def shadowed_entries(table: tuple = MAPPING_TABLE) -> list:
    """Return (earlier, later) pairs where ``later`` can never match.

    An earlier entry whose token occurs inside a later, longer token
    rewrites part of it first.
    """
    pairs = []
    for i, later in enumerate(table):
        for earlier in table[:i]:
            if earlier.source in later.source:
                pairs.append((earlier, later))
    return pairs


def chained_pairs(table: tuple = MAPPING_TABLE) -> list:
    """Return (earlier, later) pairs where ``later`` rewrites ``earlier``'s output."""
    pairs = []
    for i, earlier in enumerate(table):
        for later in table[i + 1:]:
            if later.source in earlier.target:
                pairs.append((earlier, later))
    return pairs
