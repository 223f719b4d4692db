from __future__ import annotations

from pathlib import Path
from typing import List

from ..models import CabinetSpec
from . import specs_csv, specs_xlsx, specs_yaml


class UnsupportedSpecFile(ValueError):
    pass


PARSERS = {
    ".csv": specs_csv.parse,
    ".xlsx": specs_xlsx.parse,
    ".xlsm": specs_xlsx.parse,
    ".yaml": specs_yaml.parse,
    ".yml": specs_yaml.parse,
}


def load_specs(path: Path) -> List[CabinetSpec]:
    parser = PARSERS.get(path.suffix.lower())
    if parser is None:
        raise UnsupportedSpecFile(
            f"Unsupported cabinet file '{path.name}' (expected one of: {', '.join(sorted(PARSERS))})"
        )
    if not path.exists():
        raise FileNotFoundError(f"Cabinet file not found: {path}")
    return parser(path)
