from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ...calculators.aggregate import total_panel_count
from ...models import AggregatedPanelGroup, PanelPolicy
from ...utils import plain_number


logger = logging.getLogger(__name__)

REPORT_FILENAME = "panel-report.html"


def _environment() -> Environment:
    tmpl_dir = Path(__file__).resolve().parent.parent / "templates"
    env = Environment(
        loader=FileSystemLoader(str(tmpl_dir)),
        autoescape=select_autoescape(["html", "html.j2"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["plain"] = plain_number
    return env


def render_panel_report(groups: List[AggregatedPanelGroup], policy: PanelPolicy | None = None) -> str:
    policy = policy or PanelPolicy()
    template = _environment().get_template("panel_report.html.j2")
    return template.render(
        style=policy.report,
        groups=groups,
        total_panels=total_panel_count(groups),
    )


def export_html(
    groups: List[AggregatedPanelGroup],
    out_dir: Path,
    policy: PanelPolicy | None = None,
) -> Optional[Path]:
    if not groups:
        logger.info("No panel groups, skipping HTML report")
        return None
    out_dir.mkdir(parents=True, exist_ok=True)
    out_file = out_dir / REPORT_FILENAME
    out_file.write_text(render_panel_report(groups, policy), encoding="utf-8")
    logger.info("Rendered panel report to %s", out_file)
    return out_file
