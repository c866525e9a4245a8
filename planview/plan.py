# planview/plan.py
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from .geometry import axis_bounds, content_width_px, geometry_on_axis
from .model import PlanTask, TaskBarGeometry, TaskStatus, TimelineView, TimeUnit, Window
from .normalize import iter_project_choices, normalize_projects
from .resize import DEFAULT_PANEL_WIDTH, clamp_panel_width, responsible_column_width, task_column_width
from .status import classify_status, priority_color, status_color
from .units import generate_time_units
from .util.tz import as_tzinfo, default_tz_name, normalize_tz_name, today_date
from .views import strategy_for
from .window import infer_window

NO_RESPONSIBLE_TEXT = "None assigned"

NameLookup = Callable[[str], str]


def make_name_lookup(personnel: Any = None) -> NameLookup:
    """
    Build an id -> display name lookup.

    `personnel` may be a mapping, a callable returning a name (or None), or a
    list of records with `id` and `fullName`/`full_name`/`name`. Unknown ids
    fall back to the id itself.
    """
    if personnel is None:
        return lambda pid: pid

    if callable(personnel) and not isinstance(personnel, Mapping):
        fn = personnel

        def _call(pid: str) -> str:
            name = fn(pid)
            return str(name) if name else pid

        return _call

    names: Dict[str, str] = {}
    if isinstance(personnel, Mapping):
        names = {str(k): str(v) for k, v in personnel.items() if v}
    else:
        for rec in personnel:
            if not isinstance(rec, Mapping):
                continue
            pid = str(rec.get("id") or "")
            name = rec.get("fullName") or rec.get("full_name") or rec.get("name")
            if pid and name:
                names[pid] = str(name)
    return lambda pid: names.get(pid, pid)


def responsible_text(task: PlanTask, lookup: NameLookup) -> str:
    if not task.responsible_ids:
        return NO_RESPONSIBLE_TEXT
    return ", ".join(lookup(pid) for pid in task.responsible_ids)


def group_tasks(tasks: Sequence[PlanTask]) -> List[Tuple[Tuple[str, str], List[PlanTask]]]:
    """Group by (project id, axe id), keeping first-seen group order and task order."""
    groups: Dict[Tuple[str, str], List[PlanTask]] = {}
    for t in tasks:
        groups.setdefault((t.project_id, t.axe_id), []).append(t)
    return list(groups.items())


@dataclass(frozen=True)
class TaskRow:
    task: PlanTask
    geometry: Optional[TaskBarGeometry]
    status: TaskStatus
    responsible_text: str


@dataclass(frozen=True)
class TaskGroup:
    project_id: str
    project_name: str
    axe_id: str
    axe_name: str
    rows: Tuple[TaskRow, ...]

    @property
    def title(self) -> str:
        return f"{self.project_name} - {self.axe_name}"


@dataclass(frozen=True)
class PlanLayout:
    view: TimelineView
    today: dt.date
    tz: str
    window: Window
    units: Tuple[TimeUnit, ...]
    groups: Tuple[TaskGroup, ...]
    unit_px: int
    content_width_px: int
    panel_width: float
    task_column_px: float
    responsible_column_px: float
    project_id: Optional[str] = None
    projects: Tuple[Tuple[str, str], ...] = ()
    total_tasks: int = 0

    @property
    def is_empty(self) -> bool:
        return self.total_tasks == 0

    def shows_group(self, group: TaskGroup) -> bool:
        """Whether `group` is visible under the initial project selection."""
        return not self.project_id or group.project_id == self.project_id

    @property
    def visible_groups(self) -> Tuple[TaskGroup, ...]:
        return tuple(g for g in self.groups if self.shows_group(g))


def _coerce_tasks(source: Any) -> Tuple[List[PlanTask], Tuple[Tuple[str, str], ...]]:
    if isinstance(source, (list, tuple)) and source and all(isinstance(t, PlanTask) for t in source):
        seen: Dict[str, str] = {}
        for t in source:
            if t.project_id and t.project_id not in seen:
                seen[t.project_id] = t.project_name or t.project_id
        return list(source), tuple(seen.items())
    if isinstance(source, (list, tuple)) and not source:
        return [], ()
    return normalize_projects(source), tuple(iter_project_choices(source))


def build_plan_layout(
    source: Any,
    *,
    view: "TimelineView | str | None" = None,
    today: Optional[dt.date] = None,
    tz: Optional[str] = None,
    project_id: Optional[str] = None,
    personnel: Any = None,
    panel_width: float = DEFAULT_PANEL_WIDTH,
) -> PlanLayout:
    """
    Assemble everything the plan view renders.

    `source` is either the projects document (list of projects with axes and
    tasks, or {"projects": [...]}) or an already-normalized list of PlanTask.
    Every group is laid out. `project_id` is only the initial selection of the
    page's project filter, so the window and the rows stay available when the
    selection changes.
    """
    tv = TimelineView.parse(view)
    tz_name = default_tz_name() if tz is None else normalize_tz_name(tz)
    tzinfo = as_tzinfo(tz_name)
    if today is None:
        today = today_date(tzinfo)

    all_tasks, projects = _coerce_tasks(source)
    lookup = make_name_lookup(personnel)

    window = infer_window(all_tasks, tv, today)
    units = generate_time_units(window, tv)
    bounds = axis_bounds(units, tv, tzinfo)

    groups: List[TaskGroup] = []
    for (pid, aid), tasks in group_tasks(all_tasks):
        rows = tuple(
            TaskRow(
                task=t,
                geometry=geometry_on_axis(t, bounds, tv, tzinfo),
                status=classify_status(t, today),
                responsible_text=responsible_text(t, lookup),
            )
            for t in tasks
        )
        groups.append(
            TaskGroup(
                project_id=pid,
                project_name=tasks[0].project_name,
                axe_id=aid,
                axe_name=tasks[0].axe_name,
                rows=rows,
            )
        )

    width = clamp_panel_width(panel_width)
    return PlanLayout(
        view=tv,
        today=today,
        tz=tz_name,
        window=window,
        units=tuple(units),
        groups=tuple(groups),
        unit_px=strategy_for(tv).unit_px,
        content_width_px=content_width_px(units, tv),
        panel_width=width,
        task_column_px=task_column_width(width),
        responsible_column_px=responsible_column_width(width),
        project_id=project_id or None,
        projects=projects,
        total_tasks=len(all_tasks),
    )


def _iso(d: Optional[dt.date]) -> Optional[str]:
    return d.isoformat() if d is not None else None


def layout_to_payload(layout: PlanLayout) -> Dict[str, Any]:
    """JSON-safe dict of a layout (embedded in the HTML and written by --json-out)."""
    groups_out: List[Dict[str, Any]] = []
    for g in layout.groups:
        rows_out: List[Dict[str, Any]] = []
        for r in g.rows:
            t = r.task
            rows_out.append(
                {
                    "id": t.id,
                    "description": t.description,
                    "responsible_ids": list(t.responsible_ids),
                    "responsible_text": r.responsible_text,
                    "priority": t.priority,
                    "priority_color": priority_color(t.priority),
                    "start_date": _iso(t.start_date),
                    "end_date": _iso(t.end_date),
                    "comment": t.comment,
                    "status": r.status.value,
                    "status_color": status_color(r.status),
                    "bar": (
                        None
                        if r.geometry is None
                        else {"left": r.geometry.left_percent, "width": r.geometry.width_percent}
                    ),
                }
            )
        groups_out.append(
            {
                "project_id": g.project_id,
                "project_name": g.project_name,
                "axe_id": g.axe_id,
                "axe_name": g.axe_name,
                "title": g.title,
                "visible": layout.shows_group(g),
                "rows": rows_out,
            }
        )

    return {
        "cfg": {
            "view": layout.view.value,
            "tz": layout.tz,
            "today": layout.today.isoformat(),
            "project_id": layout.project_id,
            "panel_width": layout.panel_width,
            "task_column_px": layout.task_column_px,
            "responsible_column_px": layout.responsible_column_px,
            "unit_px": layout.unit_px,
            "content_width_px": layout.content_width_px,
        },
        "window": {"start": layout.window.start.isoformat(), "end": layout.window.end.isoformat()},
        "units": [
            {"date": u.date.isoformat(), "end": u.end.isoformat(), "label": u.label, "title": u.title}
            for u in layout.units
        ],
        "groups": groups_out,
        "projects": [{"id": pid, "name": name} for pid, name in layout.projects],
        "total_tasks": layout.total_tasks,
    }
