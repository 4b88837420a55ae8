from __future__ import annotations
import hashlib
from typing import Optional


def fingerprint(content: Optional[str]) -> str:
    """
    Compute the MD5 fingerprint of text content as 32 upper-case hex characters.
    Used to detect whether a document's content has changed; None hashes like "".
    """
    md5 = hashlib.md5()
    md5.update((content or "").encode("utf-8"))
    return md5.hexdigest().upper()


def content_changed(stored_hash: Optional[str], content: Optional[str]) -> bool:
    """True when `content` no longer matches the fingerprint recorded earlier."""
    if not stored_hash:
        return True
    return fingerprint(content) != stored_hash.upper()
