"""Market name extraction from report titles."""

from __future__ import annotations

import re


GLOBAL_MARKET_RE = re.compile(r"\bGlobal\s+(.+?)\s+Market\b", re.IGNORECASE)
MARKET_RE = re.compile(r"^(.+?)\s+Market\b", re.IGNORECASE)


def extract_market_name(document_title: str) -> str:
    """Return the subject of a report title.

    "Global Drone Market Report" -> "Drone",
    "3D Printing in Healthcare Market" -> "3D Printing in Healthcare",
    "Wearables" -> "Wearables".
    """
    trimmed = (document_title or "").strip()
    if not trimmed:
        return ""

    match = GLOBAL_MARKET_RE.search(trimmed) or MARKET_RE.match(trimmed)
    if match is not None:
        return match.group(1).strip()

    return trimmed
