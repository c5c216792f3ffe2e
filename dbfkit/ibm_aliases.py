"""Resolution of IBM, EBCDIC and DOS code page aliases to canonical names."""

_CANONICAL_ALIASES: dict[str, tuple[str, ...]] = {
    "IBM037": (
        "cp037", "ebcdic-cp-us", "ebcdic-cp-ca", "ebcdic-cp-wt",
        "ebcdic-cp-nl", "csIBM037",
    ),
    "ibm-273_P100-1995": ("IBM273", "CP273", "csIBM273", "ebcdic-de", "273"),
    "ibm-277_P100-1995": (
        "IBM277", "cp277", "EBCDIC-CP-DK", "EBCDIC-CP-NO", "csIBM277",
        "ebcdic-dk", "277",
    ),
    "ibm-278_P100-1995": (
        "IBM278", "cp278", "ebcdic-cp-fi", "ebcdic-cp-se", "csIBM278",
        "ebcdic-sv", "278",
    ),
    "ibm-280_P100-1995": ("IBM280", "CP280", "ebcdic-cp-it", "csIBM280", "280"),
    "ibm-284_P100-1995": (
        "IBM284", "CP284", "ebcdic-cp-es", "csIBM284", "cpibm284", "284",
    ),
    "ibm-285_P100-1995": (
        "IBM285", "CP285", "ebcdic-cp-gb", "csIBM285", "cpibm285",
        "ebcdic-gb", "285",
    ),
    "ibm-290_P100-1995": ("IBM290", "cp290", "EBCDIC-JP-kana", "csIBM290"),
    "ibm-297_P100-1995": (
        "IBM297", "cp297", "ebcdic-cp-fr", "csIBM297", "cpibm297", "297",
    ),
    "ibm-420_X120-1999": (
        "IBM420", "cp420", "ebcdic-cp-ar1", "csIBM420", "420",
    ),
    "IBM424": ("cp424", "ebcdic-cp-he", "csIBM424"),
    "IBM437": ("cp437", "437", "csPC8CodePage437"),
    "IBM500": ("CP500", "ebcdic-cp-be", "ebcdic-cp-ch", "csIBM500"),
    "ibm-720_P100-1997": ("windows-720", "DOS-720"),
    "IBM737": ("cp737", "cp737_DOSGreek"),
    "IBM775": ("cp775", "csPC775Baltic"),
    "ibm-803_P100-1999": ("cp803",),
    "ibm-838_P100-1995": (
        "IBM838", "IBM-Thai", "csIBMThai", "cp838", "838", "ibm-9030",
    ),
    "IBM850": ("cp850", "850", "csPC850Multilingual"),
    "ibm-851_P100-1995": ("IBM851", "cp851", "851", "csPC851"),
    "IBM852": ("cp852", "852", "csPCp852"),
    "IBM855": ("cp855", "855", "csIBM855"),
    "IBM856": ("cp856", "cp856_Hebrew_PC"),
    "ibm-857_P100-1995": (
        "IBM857", "cp857", "857", "csIBM857", "windows-857",
    ),
    "ibm-858_P100-1997": (
        "IBM00858", "CCSID00858", "CP00858", "PC-Multilingual-850+euro",
        "cp858", "windows-858",
    ),
    "ibm-860_P100-1995": ("IBM860", "cp860", "860", "csIBM860"),
    "ibm-861_P100-1995": (
        "IBM861", "cp861", "861", "cp-is", "csIBM861", "windows-861",
    ),
    "ibm-862_P100-1995": (
        "IBM862", "cp862", "862", "csPC862LatinHebrew", "DOS-862",
        "windows-862",
    ),
    "ibm-863_P100-1995": ("IBM863", "cp863", "863", "csIBM863"),
    "ibm-864_X110-1999": ("IBM864", "cp864", "csIBM864"),
    "ibm-865_P100-1995": ("IBM865", "cp865", "865", "csIBM865"),
    "IBM866": ("cp866", "866", "csIBM866"),
    "ibm-867_P100-1998": (),
    "ibm-868_P100-1995": ("IBM868", "CP868", "868", "csIBM868", "cp-ar"),
    "ibm-869_P100-1995": (
        "IBM869", "cp869", "869", "cp-gr", "csIBM869", "windows-869",
    ),
    "ibm-870_P100-1995": (
        "IBM870", "CP870", "ebcdic-cp-roece", "ebcdic-cp-yu", "csIBM870",
    ),
    "ibm-871_P100-1995": (
        "IBM871", "ebcdic-cp-is", "csIBM871", "CP871", "ebcdic-is", "871",
    ),
    "ibm-874_P100-1995": ("ibm-9066", "cp874", "tis620.2533", "eucTH"),
    "ibm-875_P100-1995": ("IBM875", "cp875", "875"),
    "ibm-901_P100-1999": (),
    "ibm-902_P100-1999": (),
    "ibm-916_P100-1995": ("cp916", "916"),
    "ibm-918_P100-1995": ("IBM918", "CP918", "ebcdic-cp-ar2", "csIBM918"),
    "ibm-922_P100-1999": ("IBM922", "cp922", "922"),
    "ibm-1006_P100-1995": ("IBM1006", "cp1006", "1006"),
    "ibm-1025_P100-1995": ("cp1025", "1025"),
    "ibm-1026_P100-1995": ("IBM1026", "CP1026", "csIBM1026", "1026"),
    "ibm-1047_P100-1995": ("IBM1047", "cp1047", "1047"),
    "ibm-1097_P100-1995": ("cp1097", "1097"),
    "ibm-1098_P100-1995": ("IBM1098", "cp1098", "1098"),
    "ibm-1112_P100-1995": ("cp1112", "1112"),
    "ibm-1122_P100-1999": ("cp1122", "1122"),
    "ibm-1123_P100-1995": ("cp1123", "1123"),
    "ibm-1124_P100-1996": ("cp1124", "1124"),
    "ibm-1125_P100-1997": ("cp1125",),
    "ibm-1129_P100-1997": (),
    "ibm-1130_P100-1997": (),
    "ibm-1131_P100-1997": ("cp1131",),
    "ibm-1132_P100-1998": (),
    "ibm-1133_P100-1997": (),
    "ibm-1137_P100-1999": (),
    "ibm-1153_P100-1999": (),
    "ibm-1154_P100-1999": (),
    "ibm-1155_P100-1999": (),
    "ibm-1156_P100-1999": (),
    "ibm-1157_P100-1999": (),
    "ibm-1158_P100-1999": (),
    "ibm-1160_P100-1999": (),
    "ibm-1162_P100-1999": (),
    "ibm-1164_P100-1999": (),
    "ibm-4517_P100-2005": (),
    "ibm-4899_P100-1998": (),
    "ibm-4909_P100-1999": (),
    "ibm-4971_P100-1999": (),
    "ibm-5123_P100-1999": (),
    "ibm-8482_P100-1999": (),
    "ibm-9067_X100-2005": (),
    "ibm-12712_P100-1998": ("ebcdic-he",),
    "ibm-16804_X110-1999": ("ebcdic-ar",),
    "ibm-1051_P100-1995": ("hp-roman8", "roman8", "r8", "csHPRoman8"),
    "ibm-1276_P100-1995": (
        "Adobe-Standard-Encoding", "csAdobeStandardEncoding",
    ),
}

# EBCDIC code pages with the euro sign, each known under a descriptive alias.
_EURO_PAGES: dict[int, tuple[str, ...]] = {
    1140: ("ebcdic-us-37+euro",),
    1141: ("ebcdic-de-273+euro",),
    1142: ("ebcdic-dk-277+euro", "ebcdic-no-277+euro"),
    1143: ("ebcdic-fi-278+euro", "ebcdic-se-278+euro"),
    1144: ("ebcdic-it-280+euro",),
    1145: ("ebcdic-es-284+euro",),
    1146: ("ebcdic-gb-285+euro",),
    1147: ("ebcdic-fr-297+euro",),
    1148: ("ebcdic-international-500+euro",),
    1149: ("ebcdic-is-871+euro",),
}


def _euro_page_aliases() -> dict[str, tuple[str, ...]]:
    return {
        f"ibm-{page}_P100-1997": (
            f"IBM0{page}", f"CCSID0{page}", f"CP0{page}", f"cp{page}", *extra,
        )
        for page, extra in _EURO_PAGES.items()
    }


def _build_lookup() -> dict[str, str]:
    table = {**_CANONICAL_ALIASES, **_euro_page_aliases()}
    lookup: dict[str, str] = {}
    for canonical, aliases in table.items():
        names = [canonical, *aliases]
        if canonical.startswith("ibm-"):
            # Every "ibm-NNN_Pxxx-yyyy" name is also known by its short form.
            names.append(canonical.split("_", 1)[0])
        for name in names:
            lookup[name] = canonical
    return lookup


_LOOKUP: dict[str, str] = _build_lookup()


def resolve_ibm_alias(name: str) -> str | None:
    """Return the canonical IBM code page name for ``name``, or None if unknown.

    Matching is exact and case-sensitive.
    """
    return _LOOKUP.get(name)