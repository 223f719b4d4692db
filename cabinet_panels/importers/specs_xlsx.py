from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd

from ..models import CabinetSpec
from .specs_csv import rows_to_specs


logger = logging.getLogger(__name__)


def _detect_header(df) -> int:
    # choose row with most non-null in first 30 rows
    head = df.iloc[:30].notna().sum(axis=1)
    return int(head.idxmax())


def _cell(x) -> Any:
    if x is None or (isinstance(x, float) and pd.isna(x)):
        return None
    return x


def parse(path: Path) -> List[CabinetSpec]:
    xls = pd.read_excel(path, sheet_name=0, header=None, engine="openpyxl")
    if xls.empty:
        return []
    header_row = _detect_header(xls)
    cols = [str(c).strip() if pd.notna(c) else "" for c in xls.iloc[header_row].tolist()]
    data = xls.iloc[header_row + 1 :]

    rows: List[Dict[str, Any]] = []
    for values in data.itertuples(index=False):
        rows.append({col: _cell(v) for col, v in zip(cols, values) if col})
    specs = rows_to_specs(rows, [c for c in cols if c])
    logger.debug("Read %d cabinet rows from %s", len(specs), path)
    return specs
