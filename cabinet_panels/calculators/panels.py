from __future__ import annotations

from decimal import Decimal
from typing import List

from ..models import CabinetSpec, Panel
from ..utils import exact_context, parse_number, parse_quantity
from .box_height import resolve_box_height


UNLABELED = "Unlabeled"

# Inches. Floor and back sit between the walls, braces inside the face frame.
FLOOR_WIDTH_ALLOWANCE = Decimal("0.75")
BACK_WIDTH_ALLOWANCE = Decimal("0.75")
BACK_HEIGHT_ALLOWANCE = Decimal("1.5")
BRACE_WIDTH_ALLOWANCE = Decimal("1.5")

# Pieces per cabinet
WALLS_PER_CABINET = 2
FLOORS_PER_CABINET = 1
BACKS_PER_CABINET = 1
BRACES_PER_CABINET = 3


def origin_label(spec: CabinetSpec) -> str:
    return (spec.label or "").strip() or UNLABELED


def expand_panels(spec: CabinetSpec) -> List[Panel]:
    """Flat panels needed to build ``spec.quantity`` cabinets of one style.

    Per cabinet:
      - Wall (left & right): 2 pcs, W = BoxDepth, H = BoxHeight
      - Floor: 1 pc, W = BoxWidth - 0.75, H = BoxDepth
      - Back: 1 pc, W = BoxWidth - 0.75, H = BoxHeight - 1.5
      - Brace: 3 pcs, W = BoxWidth - 1.5, H = BraceHeight

    Returns an empty list when any input is missing or the quantity is not a
    positive whole number. Panels with a non-positive side are left out.
    """
    box_height = resolve_box_height(spec)
    box_width = parse_number(spec.box_width)
    box_depth = parse_number(spec.box_depth)
    brace_height = parse_number(spec.brace_height)
    quantity = parse_quantity(spec.quantity)

    if None in (box_height, box_width, box_depth, brace_height, quantity):
        return []

    label = origin_label(spec)
    with exact_context():
        candidates = [
            ("Wall", box_depth, box_height, WALLS_PER_CABINET * quantity),
            ("Floor", box_width - FLOOR_WIDTH_ALLOWANCE, box_depth, FLOORS_PER_CABINET * quantity),
            ("Back", box_width - BACK_WIDTH_ALLOWANCE, box_height - BACK_HEIGHT_ALLOWANCE, BACKS_PER_CABINET * quantity),
            ("Brace", box_width - BRACE_WIDTH_ALLOWANCE, brace_height, BRACES_PER_CABINET * quantity),
        ]
    return [
        Panel(panel_type=kind, width=width, height=height, count=count, origin_label=label)
        for kind, width, height, count in candidates
        if width > 0 and height > 0 and count > 0
    ]
