from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

from fastapi import FastAPI
from fastapi.responses import HTMLResponse, Response
from pydantic import BaseModel, Field

from ..calculators.aggregate import aggregate, to_delimited_text, total_panel_count
from ..models import AggregatedPanelGroup, CabinetSpec, PanelPolicy
from ..output.exporters.html import render_panel_report
from ..render import load_policy
from ..utils import plain_number


logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parents[2]
CONFIGS_DIR = BASE_DIR / "configs"

app = FastAPI(title="Cabinet Panel Calculator")


class PanelRequest(BaseModel):
    cabinets: List[CabinetSpec] = Field(default_factory=list)


def _policy() -> PanelPolicy:
    return load_policy(CONFIGS_DIR)


def _group_json(g: AggregatedPanelGroup) -> Dict[str, Any]:
    return {
        "panel_type": g.panel_type,
        "width": plain_number(g.width),
        "height": plain_number(g.height),
        "total_count": g.total_count,
        "cabinets": g.cabinets,
    }


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "healthy"}


@app.post("/api/panels")
def panel_summary(req: PanelRequest) -> Dict[str, Any]:
    groups = aggregate(req.cabinets)
    logger.debug("%d cabinets -> %d panel groups", len(req.cabinets), len(groups))
    return {"groups": [_group_json(g) for g in groups], "total_panels": total_panel_count(groups)}


@app.post("/api/panels/csv")
def panel_csv(req: PanelRequest) -> Response:
    groups = aggregate(req.cabinets)
    if not groups:
        return Response(status_code=204)
    policy = _policy()
    return Response(
        content=to_delimited_text(groups, policy.export.quoting),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{policy.export.filename}"'},
    )


@app.post("/api/panels/report", response_class=HTMLResponse)
def panel_report(req: PanelRequest) -> HTMLResponse:
    return HTMLResponse(render_panel_report(aggregate(req.cabinets), _policy()))
