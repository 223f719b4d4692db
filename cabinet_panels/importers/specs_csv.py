from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Dict, List

from ..models import CabinetSpec
from ..normalize.headers import map_headers


logger = logging.getLogger(__name__)


def rows_to_specs(rows: List[Dict[str, object]], headers: List[str]) -> List[CabinetSpec]:
    colmap = map_headers(headers)
    unmapped = [h for h in headers if h not in colmap and str(h).strip()]
    if unmapped:
        logger.debug("Ignoring columns: %s", ", ".join(map(str, unmapped)))

    specs: List[CabinetSpec] = []
    for row in rows:
        values = {field: row.get(h) for h, field in colmap.items()}
        if all(v is None or not str(v).strip() for v in values.values()):
            continue
        label = values.pop("label", None)
        specs.append(CabinetSpec(label="" if label is None else str(label), **values))
    return specs


def parse(path: Path) -> List[CabinetSpec]:
    with open(path, newline="", encoding="utf-8-sig") as f:
        reader = csv.DictReader(f)
        headers = list(reader.fieldnames or [])
        rows = list(reader)
    specs = rows_to_specs(rows, headers)
    logger.debug("Read %d cabinet rows from %s", len(specs), path)
    return specs
