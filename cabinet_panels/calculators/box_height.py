from __future__ import annotations

from decimal import Decimal
from typing import Optional

from ..models import CabinetSpec
from ..utils import exact_context, parse_number


def resolve_box_height(spec: CabinetSpec) -> Optional[Decimal]:
    """Effective box height for one cabinet.

    BoxHeight = CabinetHeight - KickHeight when both are given, otherwise the
    entered box height override. The result may be zero or negative; panels
    built from it are filtered downstream.
    """
    cabinet_height = parse_number(spec.cabinet_height)
    kick_height = parse_number(spec.kick_height)
    if cabinet_height is not None and kick_height is not None:
        with exact_context():
            return cabinet_height - kick_height
    return parse_number(spec.box_height)
