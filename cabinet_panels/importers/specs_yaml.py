from __future__ import annotations

import logging
from pathlib import Path
from typing import List

import yaml

from ..models import CabinetSpec


logger = logging.getLogger(__name__)


def parse(path: Path) -> List[CabinetSpec]:
    """Accepts a list of cabinets, or a mapping with a ``cabinets`` list."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or []
    if isinstance(data, dict):
        data = data.get("cabinets", []) or []
    specs: List[CabinetSpec] = []
    for entry in data:
        entry = dict(entry or {})
        if entry.get("label") is not None:
            entry["label"] = str(entry["label"])
        specs.append(CabinetSpec(**entry))
    logger.debug("Read %d cabinets from %s", len(specs), path)
    return specs
