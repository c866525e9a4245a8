# planview/normalize.py
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from .model import PRIORITIES, PlanTask
from .util.console import eprint, obs_enabled
from .util.dates import coerce_date
from .validate import projects_list


def _first(raw: Dict[str, Any], *keys: str) -> Any:
    for k in keys:
        if k in raw and raw[k] is not None:
            return raw[k]
    return None


def _str_tuple(v: Any) -> tuple:
    if not isinstance(v, (list, tuple)):
        return ()
    return tuple(str(x).strip() for x in v if isinstance(x, (str, int)) and str(x).strip())


def _date_or_warn(raw: Dict[str, Any], task_id: str, *keys: str):
    value = _first(raw, *keys)
    d = coerce_date(value)
    if d is None and value not in (None, "") and obs_enabled():
        eprint(f"[planview.normalize] WARN: invalid {keys[0]} task={task_id!r} value={value!r}")
    return d


def normalize_task(
    raw: Dict[str, Any],
    *,
    project: Optional[Dict[str, Any]] = None,
    axe: Optional[Dict[str, Any]] = None,
) -> Optional[PlanTask]:
    """One raw task dict -> PlanTask, or None when it has no id.

    Accepts the app's camelCase keys (startDate, endDate, responsables) and
    snake_case equivalents. Unparsable dates become None.
    """
    task_id = str(raw.get("id") or "").strip()
    if not task_id:
        if obs_enabled():
            eprint(f"[planview.normalize] WARN: task without id skipped description={raw.get('description')!r}")
        return None

    project = project or {}
    axe = axe or {}

    priority = str(raw.get("priority") or "medium").strip().lower()
    if priority not in PRIORITIES and obs_enabled():
        eprint(f"[planview.normalize] WARN: unknown priority task={task_id!r} value={priority!r}")

    return PlanTask(
        id=task_id,
        description=str(raw.get("description") or ""),
        responsible_ids=_str_tuple(_first(raw, "responsables", "responsibleIds", "responsible_ids")),
        priority=priority,
        start_date=_date_or_warn(raw, task_id, "startDate", "start_date"),
        end_date=_date_or_warn(raw, task_id, "endDate", "end_date"),
        comment=str(raw.get("comment") or ""),
        project_id=str(project.get("id") or ""),
        project_name=str(project.get("name") or ""),
        axe_id=str(axe.get("id") or ""),
        axe_name=str(axe.get("name") or ""),
    )


def normalize_projects(doc: Any) -> List[PlanTask]:
    """Flatten projects -> axes -> tasks into PlanTasks, in document order."""
    out: List[PlanTask] = []
    for project in projects_list(doc):
        if not isinstance(project, dict):
            continue
        axes = project.get("axes") or []
        if not isinstance(axes, list):
            continue
        for axe in axes:
            if not isinstance(axe, dict):
                continue
            tasks = axe.get("tasks") or []
            if not isinstance(tasks, list):
                continue
            for raw in tasks:
                if not isinstance(raw, dict):
                    continue
                t = normalize_task(raw, project=project, axe=axe)
                if t is not None:
                    out.append(t)
    return out


def iter_project_choices(doc: Any) -> Iterable[tuple]:
    """(id, name) pairs for a project selector."""
    for project in projects_list(doc):
        if isinstance(project, dict) and project.get("id"):
            yield str(project["id"]), str(project.get("name") or project["id"])
