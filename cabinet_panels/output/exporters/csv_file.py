from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from ...calculators.aggregate import to_delimited_text
from ...models import AggregatedPanelGroup, PanelPolicy


logger = logging.getLogger(__name__)


def export_csv(
    groups: List[AggregatedPanelGroup],
    out_dir: Path,
    policy: PanelPolicy | None = None,
) -> Optional[Path]:
    """Write the panel totals as CSV. Nothing is written for an empty list."""
    policy = policy or PanelPolicy()
    if not groups:
        logger.info("No panel groups, skipping CSV export")
        return None
    out_dir.mkdir(parents=True, exist_ok=True)
    out_file = out_dir / policy.export.filename
    out_file.write_text(to_delimited_text(groups, policy.export.quoting), encoding="utf-8")
    logger.info("Exported %d panel groups to %s", len(groups), out_file)
    return out_file
