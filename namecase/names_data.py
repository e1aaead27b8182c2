# ═════════════════════════════════════════════════════════════════════════════════
# NAME CASE RULE TABLES
# ═════════════════════════════════════════════════════════════════════════════════
#
# Static data for the capitalisation rules, following the HURIDOCS guidance on
# recording names of persons:
# 1. LOWER_CASE_PARTICLES: nobiliary/patronymic particles that stay lower-case
# 2. LOWER_CASE_PREFIXES: Arabic article prefixes joined with a hyphen
# 3. DETECTOR_PREFIXES: prefixes the detector accepts in lower case
# 4. CAPITALISE_AFTER_PREFIXES: Gaelic prefixes whose next letter is upper-cased
#
# Entries are regex fragments. Order matters in LOWER_CASE_PARTICLES: it is the
# alternation order of the compiled pattern, so "de la" must come before "de".
# ═════════════════════════════════════════════════════════════════════════════════

# Whole-word particles, matched case-insensitively between whitespace
LOWER_CASE_PARTICLES = (
    # Dutch / Flemish
    "van",
    "von",
    r"de\sla",
    "den",
    r"op\sde",
    "ter",
    "ten",
    "van't",
    # Romance
    "del",
    "der",
    "du",
    "de",
    "dit",
    # Malay / Indonesian
    "gelar",
    # Portuguese / Spanish conjunction
    "e",
    # German
    "am",
    "aus'm",
    "vom",
    "zum",
    "zur",
    "und zu",
    # Malay patronymics
    "bin",
    r"b\.",
    "anak",
    r"a\.",
    "ak",
    r"ak\.",
    "binte",
    r"bte\.",
    "binti",
    r"bt\.",
    "ibni",
)

# Lower-cased when preceded by whitespace and followed by "-" and a letter
LOWER_CASE_PREFIXES = ("al", "el")

# Counted as lower-case exceptions by the detector (case-sensitive)
DETECTOR_PREFIXES = ("al-", "el-", "d'")

# The letter after these is upper-cased ("MacBride", "McLeod")
CAPITALISE_AFTER_PREFIXES = ("Mac", "Mc")

# Combining diacritical mark blocks, treated as part of a word
COMBINING_MARK_RANGES = (
    ("\u0300", "\u036f"),  # Combining Diacritical Marks
    ("\u1ab0", "\u1aff"),  # Combining Diacritical Marks Extended
    ("\u1dc0", "\u1dff"),  # Combining Diacritical Marks Supplement
    ("\u20d0", "\u20ff"),  # Combining Diacritical Marks for Symbols
    ("\ufe20", "\ufe2f"),  # Combining Half Marks
)


def _assert_no_dupes(table_name, entries):
    seen = set()
    for entry in entries:
        key = entry.lower()
        if key in seen:
            raise ValueError(f"Duplicate entry in {table_name}: {entry}")
        seen.add(key)


def _assert_no_blanks(table_name, entries):
    blanks = [entry for entry in entries if not entry.strip()]
    if blanks:
        raise ValueError(f"Blank entries found in {table_name}: {blanks}")


for _name, _table in (
    ("LOWER_CASE_PARTICLES", LOWER_CASE_PARTICLES),
    ("LOWER_CASE_PREFIXES", LOWER_CASE_PREFIXES),
    ("DETECTOR_PREFIXES", DETECTOR_PREFIXES),
    ("CAPITALISE_AFTER_PREFIXES", CAPITALISE_AFTER_PREFIXES),
):
    _assert_no_blanks(_name, _table)
    _assert_no_dupes(_name, _table)
