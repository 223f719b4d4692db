from __future__ import annotations

import csv
import io
from decimal import Decimal
from typing import Dict, Iterable, List, Set, Tuple

from ..models import AggregatedPanelGroup, CabinetSpec, Quoting
from ..utils import plain_number
from .panels import expand_panels


CSV_HEADER = ["PanelType", "Width", "Height", "Count", "Cabinets"]

GroupKey = Tuple[str, Decimal, Decimal]


def aggregate(specs: Iterable[CabinetSpec]) -> List[AggregatedPanelGroup]:
    """Merge panels of every cabinet by (type, width, height) and sort them.

    Always a full recompute; the input specs are only read.
    """
    totals: Dict[GroupKey, int] = {}
    labels: Dict[GroupKey, Set[str]] = {}
    for spec in specs:
        for panel in expand_panels(spec):
            key = (panel.panel_type, panel.width, panel.height)
            if key not in totals:
                totals[key] = 0
                labels[key] = set()
            totals[key] += panel.count
            labels[key].add(panel.origin_label)

    groups = [
        AggregatedPanelGroup(
            panel_type=kind,
            width=width,
            height=height,
            total_count=totals[(kind, width, height)],
            labels=sorted(labels[(kind, width, height)]),
        )
        for kind, width, height in totals
    ]
    groups.sort(key=lambda g: (g.panel_type, g.width, g.height))
    return groups


def total_panel_count(groups: Iterable[AggregatedPanelGroup]) -> int:
    return sum(g.total_count for g in groups)


def _row(group: AggregatedPanelGroup) -> List[str]:
    return [
        group.panel_type,
        plain_number(group.width),
        plain_number(group.height),
        str(group.total_count),
        group.cabinets,
    ]


def to_delimited_text(groups: Iterable[AggregatedPanelGroup], quoting: Quoting = "none") -> str:
    """Header line plus one comma-separated line per group.

    quoting="none" joins fields as-is, so a label containing a comma shifts
    the columns. quoting="minimal" quotes such fields the way the csv module does.
    """
    rows = [CSV_HEADER] + [_row(g) for g in groups]
    if quoting == "none":
        return "\n".join(",".join(r) for r in rows)

    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerows(rows)
    return buf.getvalue().rstrip("\n")
