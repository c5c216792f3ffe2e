"""Character encodings: alias resolution, dBase language drivers and codecs."""

from __future__ import annotations

import codecs
from functools import lru_cache

from .aliases import resolve_alias
from .ibm_aliases import resolve_ibm_alias

# Language driver used in a new table's header when the encoding has no match.
DEFAULT_LANGUAGE_DRIVER = 0x57  # ANSI

# Canonical encoding name to the language driver byte stored at header offset 29.
_LANGUAGE_DRIVERS: dict[str, int] = {
    "IBM437": 0x1B,
    "IBM850": 0x37,
    "windows-1252": 0x59,
    "ibm-865_P100-1995": 0x66,
    "Shift_JIS": 0x7B,
    "ibm-863_P100-1995": 0x6C,
    "IBM852": 0x87,
    "ibm-860_P100-1995": 0x24,
    "IBM866": 0x65,
    "Big5": 0x78,
    "windows-874": 0x7C,
    "ibm-861_P100-1995": 0x67,
    "ibm-857_P100-1995": 0x88,
    "windows-1250": 0xC8,
    "windows-1251": 0xC9,
    "windows-1254": 0xCA,
    "windows-1253": 0xCB,
    "windows-1257": 0xCC,
}

# Canonical names whose Python codec cannot be derived from the name itself.
_PYTHON_CODECS: dict[str, str] = {
    "macos-0_2-10.2": "mac_roman",
    "macos-6_2-10.4": "mac_greek",
    "macos-7_3-10.2": "mac_cyrillic",
    "macos-29-10.2": "mac_latin2",
    "macos-35-10.2": "mac_turkish",
    "ISO-8859-11": "iso8859_11",
    "ibm-1051_P100-1995": "hp_roman8",
    "KOI8-R": "koi8_r",
    "KOI8-U": "koi8_u",
    "EUC-JP": "euc_jp",
    "Big5": "big5",
    "Shift_JIS": "shift_jis",
}


def canonical_encoding(name: str) -> str | None:
    """Return the canonical name of a known encoding alias, or None."""
    return resolve_alias(name) or resolve_ibm_alias(name)


def language_driver_code(encoding: str) -> int:
    """Return the dBase language driver byte for ``encoding``.

    Encodings without a known driver fall back to ANSI (0x57).
    """
    canonical = canonical_encoding(encoding)
    if canonical is None:
        return DEFAULT_LANGUAGE_DRIVER
    return _LANGUAGE_DRIVERS.get(canonical, DEFAULT_LANGUAGE_DRIVER)


def _code_page_form(canonical: str) -> str | None:
    """Turn "IBM866" or "ibm-865_P100-1995" into "cp866" / "cp865"."""
    if canonical.startswith("ibm-"):
        number = canonical[4:].split("_", 1)[0]
    elif canonical.startswith("IBM"):
        number = canonical[3:]
    elif canonical.startswith("windows-"):
        number = canonical[8:]
    else:
        return None
    return f"cp{number.lstrip('0') or '0'}" if number.isdigit() else None


def _candidates(name: str) -> list[str]:
    canonical = canonical_encoding(name)
    found: list[str] = []
    if canonical is not None:
        explicit = _PYTHON_CODECS.get(canonical)
        if explicit:
            found.append(explicit)
        code_page = _code_page_form(canonical)
        if code_page:
            found.append(code_page)
        found.append(canonical)
    found.append(name)
    return found


@lru_cache(maxsize=None)
def python_codec(name: str) -> str:
    """Return the name of the Python codec that handles ``name``.

    Raises LookupError when no codec is available for it.
    """
    for candidate in _candidates(name):
        try:
            return codecs.lookup(candidate).name
        except LookupError:
            continue
    raise LookupError(f"unknown encoding: {name}")


def encode_text(text: str, encoding: str) -> bytes:
    """Encode ``text``; characters the encoding lacks become '?'."""
    return text.encode(python_codec(encoding), errors="replace")


def decode_text(data: bytes, encoding: str) -> str:
    """Decode ``data``; undecodable bytes become U+FFFD."""
    return bytes(data).decode(python_codec(encoding), errors="replace")