"""planview.api

Stable *library* entrypoint for planview.

Policy:
  - Only names listed in __all__ are considered public API.
  - Everything else is internal and may change without notice.
"""

from __future__ import annotations

import datetime as dt
import json
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

from planview.frames import FrameScheduler
from planview.geometry import scroll_fraction_for_task, scroll_target_px, task_bar_geometry
from planview.model import PlanTask, TaskBarGeometry, TaskStatus, TimelineView, TimeUnit, Window
from planview.normalize import normalize_projects
from planview.plan import PlanLayout, build_plan_layout, layout_to_payload
from planview.render.inline import build_html
from planview.resize import PanelResizer, ResizeState, clamp_panel_width
from planview.scroll_sync import ScrollSynchronizer, SyncState
from planview.status import classify_status
from planview.units import generate_time_units
from planview.validate import PlanInputError, assert_valid_projects
from planview.views import min_width_percent
from planview.window import infer_window

JsonPath = Union[str, Path]


def load_projects_from_json(path: JsonPath, *, validate: bool = True) -> Any:
    """Load a projects document (list of projects, or {"projects": [...]}) from disk."""
    p = Path(path)
    doc = json.loads(p.read_text(encoding="utf-8"))
    if validate:
        assert_valid_projects(doc)
    return doc


def load_tasks_from_json(path: JsonPath, *, validate: bool = True) -> List[PlanTask]:
    return normalize_projects(load_projects_from_json(path, validate=validate))


def render_plan_html(
    source: Any,
    *,
    views: Optional[Iterable["TimelineView | str"]] = None,
    today: Optional[dt.date] = None,
    tz: Optional[str] = None,
    project_id: Optional[str] = None,
    personnel: Any = None,
    inline: bool = False,
) -> str:
    """One standalone HTML page with a section per view; the first view is shown initially."""
    order = [TimelineView.parse(v) for v in views] if views is not None else list(TimelineView)
    if not order:
        raise ValueError("render_plan_html requires at least one view")
    layouts = [
        build_plan_layout(source, view=v, today=today, tz=tz, project_id=project_id, personnel=personnel)
        for v in order
    ]
    return build_html(layouts, inline=inline)


# --- Public API exports ---------------------------------------------------
_PUBLIC_EXPORTS = (
    "FrameScheduler",
    "PanelResizer",
    "PlanInputError",
    "PlanLayout",
    "PlanTask",
    "ResizeState",
    "ScrollSynchronizer",
    "SyncState",
    "TaskBarGeometry",
    "TaskStatus",
    "TimeUnit",
    "TimelineView",
    "Window",
    "build_plan_layout",
    "clamp_panel_width",
    "classify_status",
    "generate_time_units",
    "infer_window",
    "layout_to_payload",
    "load_projects_from_json",
    "load_tasks_from_json",
    "min_width_percent",
    "render_plan_html",
    "scroll_fraction_for_task",
    "scroll_target_px",
    "task_bar_geometry",
)

__all__ = [n for n in _PUBLIC_EXPORTS if n in globals()]
# --- /Public API exports --------------------------------------------------
