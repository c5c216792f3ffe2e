"""Resolution of common character-set aliases to canonical encoding names."""

_CANONICAL_ALIASES: dict[str, tuple[str, ...]] = {
    "ISO-8859-2": (
        "ISO_8859-2:1987", "iso-ir-101", "latin2", "l2", "csISOLatin2",
    ),
    "ISO-8859-3": (
        "ISO_8859-3:1988", "iso-ir-109", "latin3", "l3", "csISOLatin3",
    ),
    "ISO-8859-4": (
        "ISO_8859-4:1988", "iso-ir-110", "latin4", "l4", "csISOLatin4",
    ),
    "ISO-8859-5": (
        "ISO_8859-5:1988", "iso-ir-144", "cyrillic", "csISOLatinCyrillic",
    ),
    "ISO-8859-6": (
        "ISO_8859-6:1987", "iso-ir-127", "ECMA-114", "ASMO-708", "arabic",
        "csISOLatinArabic",
    ),
    "ISO-8859-7": (
        "ISO_8859-7:2003", "iso-ir-126", "ELOT_928", "ECMA-118", "greek",
        "greek8", "csISOLatinGreek",
    ),
    "ISO-8859-8": (
        "ISO_8859-8:1999", "iso-ir-138", "hebrew", "csISOLatinHebrew",
    ),
    "ISO-8859-9": (
        "ISO_8859-9:1999", "iso-ir-148", "latin5", "l5", "csISOLatin5",
    ),
    "ISO-8859-10": (
        "iso_8859-10:1992", "l6", "iso-ir-157", "latin6", "csISOLatin6",
    ),
    "ISO-8859-11": ("iso_8859-11:2001", "Latin/Thai", "TIS-620"),
    "ISO-8859-13": ("latin7", "Baltic Rim"),
    "ISO-8859-14": (
        "iso-ir-199", "ISO_8859-14:1998", "latin8", "iso-celtic", "l8",
    ),
    "ISO-8859-15": ("Latin-9",),
    "ISO-8859-16": ("iso-ir-226", "ISO_8859-16:2001", "latin10", "l10"),
    "macos-0_2-10.2": (
        "macintosh", "mac", "csMacintosh", "windows-10000", "macroman",
    ),
    "macos-6_2-10.4": ("x-mac-greek", "windows-10006", "macgr"),
    "macos-7_3-10.2": (
        "x-mac-cyrillic", "windows-10007", "mac-cyrillic", "maccy",
    ),
    "macos-29-10.2": (
        "x-mac-centraleurroman", "windows-10029", "x-mac-ce", "macce",
        "maccentraleurope",
    ),
    "macos-35-10.2": ("x-mac-turkish", "windows-10081", "mactr"),
    "windows-1250": ("1250",),
    "windows-1251": ("1251",),
    "windows-1252": ("1252",),
    "windows-1253": ("1253",),
    "windows-1254": ("1254",),
    "windows-1255": ("1255",),
    "windows-1256": ("1256",),
    "windows-1257": ("1257",),
    "windows-1258": ("1258",),
    "windows-874": ("874",),
    "KOI8-R": ("csKOI8R",),
    "KOI8-U": (),
    "EUC-JP": (
        "extended_unix_code_packed_format_for_japanese",
        "cseucpkdfmtjapanese",
    ),
    "Big5": ("csBig5", "950"),
    "Shift_JIS": ("MS_Kanji", "csShiftJIS", "SJIS", "932"),
}

_LOOKUP: dict[str, str] = {
    alias: canonical
    for canonical, aliases in _CANONICAL_ALIASES.items()
    for alias in (canonical, *aliases)
}


def resolve_alias(name: str) -> str | None:
    """Return the canonical encoding name for ``name``, or None if unknown.

    Matching is exact and case-sensitive.
    """
    return _LOOKUP.get(name)