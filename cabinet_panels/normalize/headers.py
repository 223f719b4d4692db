from __future__ import annotations

import re
from typing import Dict, List, Optional

from rapidfuzz import fuzz, process


# Canonical CabinetSpec field -> accepted header spellings (already normalised)
FIELD_ALIASES: Dict[str, List[str]] = {
    "label": ["label", "name", "cabinet", "cabinetlabel", "cabinetname", "style"],
    "cabinet_height": ["cabinetheight", "cabh", "cabheight", "cabinetheightin"],
    "kick_height": ["kickheight", "kickh", "kick", "toekick", "toekickheight"],
    "box_height": ["boxheight", "boxh"],
    "box_width": ["boxwidth", "boxw", "width"],
    "box_depth": ["boxdepth", "depth", "boxd"],
    "brace_height": ["braceheight", "braceh"],
    "quantity": ["quantity", "qty", "q", "count"],
}

# Spelled-out form of each field, for fuzzy fallback
FIELD_PHRASES: Dict[str, str] = {
    "label": "cabinet label",
    "cabinet_height": "cabinet height",
    "kick_height": "kick height",
    "box_height": "box height",
    "box_width": "box width",
    "box_depth": "box depth",
    "brace_height": "brace height",
    "quantity": "quantity",
}

FUZZY_CUTOFF = 90


def normalize(s: str) -> str:
    return "".join(ch for ch in (s or "").lower() if ch.isalnum())


def tokens(s: str) -> str:
    s = (s or "").lower().replace("-", " ").replace("_", " ")
    # drop unit suffixes like "(in)" or "inches"
    s = re.sub(r"\((?:in|inch|inches|\")\)|\binch(?:es)?\b", " ", s)
    return " ".join(t for t in re.split(r"[^a-z0-9]+", s) if t)


def match_field(header: str) -> Optional[str]:
    """Map one spreadsheet header onto a CabinetSpec field name.

    Exact alias match first, then RapidFuzz token_set_ratio against the
    spelled-out field names. A fuzzy tie between two fields is no match.
    """
    key = normalize(header)
    if not key:
        return None
    for field, aliases in FIELD_ALIASES.items():
        if key in aliases:
            return field
    query = tokens(header)
    if not query:
        return None
    results = process.extract(query, FIELD_PHRASES, scorer=fuzz.token_set_ratio, limit=2, score_cutoff=FUZZY_CUTOFF)
    if not results:
        return None
    if len(results) > 1 and results[0][1] == results[1][1]:
        return None
    _, _, field = results[0]
    return field


def map_headers(headers: List[str]) -> Dict[str, str]:
    """Return {original header: field}; the first header wins for a field."""
    out: Dict[str, str] = {}
    taken = set()
    for h in headers:
        field = match_field(str(h))
        if field and field not in taken:
            out[h] = field
            taken.add(field)
    return out
