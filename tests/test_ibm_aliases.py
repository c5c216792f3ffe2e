import pytest

from dbfkit.ibm_aliases import resolve_ibm_alias


@pytest.mark.parametrize(
    ("alias", "canonical"),
    [
        ("cp866", "IBM866"),
        ("866", "IBM866"),
        ("csIBM866", "IBM866"),
        ("cp437", "IBM437"),
        ("437", "IBM437"),
        ("cp850", "IBM850"),
        ("cp852", "IBM852"),
        ("ibm-865", "ibm-865_P100-1995"),
        ("IBM865", "ibm-865_P100-1995"),
        ("cp861", "ibm-861_P100-1995"),
        ("windows-857", "ibm-857_P100-1995"),
        ("ebcdic-cp-us", "IBM037"),
        ("ebcdic-de", "ibm-273_P100-1995"),
        ("IBM00858", "ibm-858_P100-1997"),
        ("ibm-9030", "ibm-838_P100-1995"),
        ("ebcdic-no-277+euro", "ibm-1142_P100-1997"),
        ("CCSID01140", "ibm-1140_P100-1997"),
        ("cp1149", "ibm-1149_P100-1997"),
        ("ibm-1164", "ibm-1164_P100-1999"),
        ("ibm-9067", "ibm-9067_X100-2005"),
        ("ebcdic-he", "ibm-12712_P100-1998"),
        ("hp-roman8", "ibm-1051_P100-1995"),
        ("csAdobeStandardEncoding", "ibm-1276_P100-1995"),
        ("tis620.2533", "ibm-874_P100-1995"),
    ],
)
def test_known_aliases_resolve(alias, canonical):
    assert resolve_ibm_alias(alias) == canonical


@pytest.mark.parametrize(
    "canonical",
    [
        "IBM037",
        "IBM424",
        "IBM437",
        "IBM500",
        "IBM866",
        "ibm-273_P100-1995",
        "ibm-867_P100-1998",
        "ibm-1140_P100-1997",
        "ibm-4517_P100-2005",
        "ibm-16804_X110-1999",
    ],
)
def test_canonical_names_resolve_to_themselves(canonical):
    assert resolve_ibm_alias(canonical) == canonical


@pytest.mark.parametrize(
    "alias", ["cp866", "ebcdic-gb", "ibm-1131", "CP01147", "r8", "eucTH"]
)
def test_resolution_is_idempotent(alias):
    canonical = resolve_ibm_alias(alias)
    assert canonical is not None
    assert resolve_ibm_alias(canonical) == canonical


def test_lookup_is_case_sensitive():
    assert resolve_ibm_alias("CP866") is None


@pytest.mark.parametrize("name", ["", "windows-1252", "UTF-8", "nonsense"])
def test_unknown_names_return_none(name):
    assert resolve_ibm_alias(name) is None