"""Script-aware text cleanup used before TF-IDF scoring.

The target script is Arabic: diacritics are the harakat and Quranic
annotation marks, and only Arabic letters plus whitespace survive
`restrict_to_script`.
"""

from __future__ import annotations

import re
from typing import List, Optional


_re_diacritics = re.compile(
    "["
    "\u0610-\u061A"  # honorific and Quranic signs
    "\u064B-\u065F"  # fathatan .. wavy hamza below
    "\u0670"         # superscript alef
    "\u06D6-\u06DC"  # small high ligatures
    "\u06DF-\u06E4"
    "\u06E7\u06E8"
    "\u06EA-\u06ED"
    "]"
)

_re_outside_script = re.compile(
    "[^"
    "\u0621-\u063F"
    "\u0641-\u064A"
    "\u066E\u066F"
    "\u0671-\u06D3"
    "\u06D5"
    "\u06EE\u06EF"
    "\u06FA-\u06FC"
    "\u06FF"
    "\uFB50-\uFDFB"  # presentation forms A
    "\uFE70-\uFEFC"  # presentation forms B
    r"\s"
    "]"
)


def remove_diacritics(text: Optional[str]) -> str:
    """Strip combining diacritical marks, leaving every other character untouched."""
    if not text:
        return ""
    return _re_diacritics.sub("", text)


def restrict_to_script(text: Optional[str]) -> str:
    """Delete every character that is neither a target-script letter nor whitespace.

    Deleted characters are not replaced, so "Hello مرحبا" becomes " مرحبا"
    and separating whitespace is kept even when it doubles up.
    """
    if not text:
        return ""
    return _re_outside_script.sub("", text)


def preprocess(text: Optional[str]) -> str:
    """Lower-case, strip diacritics, then drop everything outside the script."""
    if not text:
        return ""
    # Diacritics go first so marked letters are still recognised as in-script
    return restrict_to_script(remove_diacritics(text.lower()))


def tokenize(text: Optional[str]) -> List[str]:
    """Split preprocessed text into whitespace-delimited terms."""
    return preprocess(text).split()
