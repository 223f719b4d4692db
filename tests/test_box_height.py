"""Tests for the effective box height rule."""

from __future__ import annotations

from decimal import Decimal

from cabinet_panels.calculators.box_height import resolve_box_height
from cabinet_panels.models import CabinetSpec


class TestResolveBoxHeight:
    def test_derived_from_cabinet_and_kick(self) -> None:
        spec = CabinetSpec(cabinet_height="34.5", kick_height="4.5")
        assert resolve_box_height(spec) == Decimal("30")

    def test_derived_value_wins_over_override(self) -> None:
        """The override only applies when the height can't be derived."""
        spec = CabinetSpec(cabinet_height="34.5", kick_height="4.5", box_height="20")
        assert resolve_box_height(spec) == Decimal("30")

    def test_falls_back_to_override_without_kick(self) -> None:
        spec = CabinetSpec(cabinet_height="34.5", box_height="29")
        assert resolve_box_height(spec) == Decimal("29")

    def test_falls_back_to_override_with_blank_cabinet_height(self) -> None:
        spec = CabinetSpec(cabinet_height="  ", kick_height="4", box_height="31.5")
        assert resolve_box_height(spec) == Decimal("31.5")

    def test_absent_when_nothing_usable(self) -> None:
        spec = CabinetSpec(cabinet_height="abc", kick_height="4", box_height="")
        assert resolve_box_height(spec) is None

    def test_non_positive_result_is_returned_as_is(self) -> None:
        spec = CabinetSpec(cabinet_height="4", kick_height="4.5")
        assert resolve_box_height(spec) == Decimal("-0.5")

    def test_numeric_inputs(self) -> None:
        spec = CabinetSpec(cabinet_height=30, kick_height=0)
        assert resolve_box_height(spec) == Decimal("30")
