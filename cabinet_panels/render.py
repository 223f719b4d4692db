from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import yaml

from .calculators.aggregate import aggregate, total_panel_count
from .importers.loader import load_specs
from .models import AggregatedPanelGroup, PanelPolicy
from .output.exporters.csv_file import export_csv
from .output.exporters.html import export_html


logger = logging.getLogger(__name__)


def _load_yaml(path: Path) -> dict:
    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_policy(configs_dir: Path | None = None) -> PanelPolicy:
    configs_dir = configs_dir or Path("configs")
    path = configs_dir / "policy.yaml"
    if not path.exists():
        logger.debug("No %s, using default policy", path)
        return PanelPolicy()
    return PanelPolicy(**_load_yaml(path))


@dataclass
class PanelReport:
    groups: List[AggregatedPanelGroup]
    total_panels: int
    written: List[Path] = field(default_factory=list)


def render_panel_files(
    specs_path: Path,
    out_dir: Path | None = None,
    configs_dir: Path | None = None,
    html: bool = False,
    policy: Optional[PanelPolicy] = None,
) -> PanelReport:
    """Load cabinets from a file, total their panels and write the exports.

    Files land in ``out_dir`` (default: an ``out`` folder next to the input).
    Nothing is written when no cabinet yields a panel.
    """
    policy = policy or load_policy(configs_dir)
    specs = load_specs(specs_path)
    groups = aggregate(specs)
    report = PanelReport(groups=groups, total_panels=total_panel_count(groups))
    logger.info("%d cabinets -> %d panel groups, %d pieces", len(specs), len(groups), report.total_panels)

    out_dir = out_dir or (specs_path.parent / "out")
    csv_file = export_csv(groups, out_dir, policy)
    if csv_file:
        report.written.append(csv_file)
    if html:
        html_file = export_html(groups, out_dir, policy)
        if html_file:
            report.written.append(html_file)
    return report
