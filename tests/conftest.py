"""Shared fixtures for cabinet panel tests."""

from __future__ import annotations

import pytest

from cabinet_panels.models import CabinetSpec


@pytest.fixture
def base_spec() -> CabinetSpec:
    """34.5in base cabinet on a 4.5in kick, 30 wide, 24 deep, four of them."""
    return CabinetSpec(
        label="Base",
        cabinet_height="34.5",
        kick_height="4.5",
        box_width="30",
        box_depth="24",
        brace_height="3",
        quantity="4",
    )


@pytest.fixture
def upper_spec() -> CabinetSpec:
    """30in upper with no kick, 12 deep, six of them."""
    return CabinetSpec(
        label="Upper",
        cabinet_height="30",
        kick_height="0",
        box_width="30",
        box_depth="12",
        brace_height="3",
        quantity="6",
    )


@pytest.fixture
def kitchen(base_spec: CabinetSpec, upper_spec: CabinetSpec) -> list[CabinetSpec]:
    return [base_spec, upper_spec]


@pytest.fixture
def kitchen_yaml(tmp_path):
    path = tmp_path / "kitchen.yaml"
    path.write_text(
        """
cabinets:
  - label: Base
    cabinet_height: 34.5
    kick_height: 4.5
    box_width: 30
    box_depth: 24
    brace_height: 3
    quantity: 4
  - label: Upper
    cabinet_height: 30
    kick_height: 0
    box_width: 30
    box_depth: 12
    brace_height: 3
    quantity: 6
""",
        encoding="utf-8",
    )
    return path
