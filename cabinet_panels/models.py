from __future__ import annotations

from decimal import Decimal
from typing import List, Literal, Optional, Union
from pydantic import BaseModel, Field


PanelType = Literal["Wall", "Floor", "Back", "Brace"]
Quoting = Literal["none", "minimal"]

# Form values arrive as text, spreadsheet cells as numbers; both stay raw here.
RawNumber = Optional[Union[Decimal, int, float, str]]


class CabinetSpec(BaseModel):
    label: Optional[str] = None
    cabinet_height: RawNumber = None
    kick_height: RawNumber = None
    box_height: RawNumber = None  # override, used when cabinet/kick can't derive it
    box_width: RawNumber = None
    box_depth: RawNumber = None
    brace_height: RawNumber = None
    quantity: RawNumber = None


class Panel(BaseModel):
    panel_type: PanelType
    width: Decimal
    height: Decimal
    count: int
    origin_label: str


class AggregatedPanelGroup(BaseModel):
    panel_type: PanelType
    width: Decimal
    height: Decimal
    total_count: int = 0
    labels: List[str] = Field(default_factory=list)  # sorted, distinct

    @property
    def cabinets(self) -> str:
        return ", ".join(self.labels)


class ExportPolicy(BaseModel):
    filename: str = "cabinet-panels.csv"
    quoting: Quoting = "none"


class ReportStyle(BaseModel):
    title: str = "Cabinet Panel Totals"
    accent: str = "#3498db"
    header: str = "#2c3e50"


class PanelPolicy(BaseModel):
    export: ExportPolicy = Field(default_factory=ExportPolicy)
    report: ReportStyle = Field(default_factory=ReportStyle)
