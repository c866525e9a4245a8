"""Structural checks for the projects document (library-facing)."""

from __future__ import annotations

from typing import Any, List


class PlanInputError(ValueError):
    """Raised when the projects document cannot be read as projects/axes/tasks."""


def _require(cond: bool, msg: str, errs: List[str]) -> None:
    if not cond:
        errs.append(msg)


def projects_list(doc: Any) -> List[Any]:
    """Accept either a bare list of projects or {"projects": [...]}."""
    if isinstance(doc, dict) and isinstance(doc.get("projects"), list):
        return doc["projects"]
    if isinstance(doc, list):
        return doc
    raise PlanInputError(f"projects document must be a list or {{'projects': [...]}}, got {type(doc).__name__}")


def validate_projects(doc: Any) -> List[str]:
    """Return a list of problems; empty means the document is usable as-is.

    Only structure is checked. Bad dates are not errors here: the normalizer
    drops them and the task renders without a bar.
    """
    errs: List[str] = []
    try:
        projects = projects_list(doc)
    except PlanInputError as e:
        return [str(e)]

    for i, p in enumerate(projects):
        if not isinstance(p, dict):
            errs.append(f"projects[{i}] must be dict")
            continue
        _require(bool(str(p.get("id") or "").strip()), f"projects[{i}].id must be non-empty", errs)
        axes = p.get("axes")
        if axes is None:
            continue
        if not isinstance(axes, list):
            errs.append(f"projects[{i}].axes must be list")
            continue
        for j, a in enumerate(axes):
            if not isinstance(a, dict):
                errs.append(f"projects[{i}].axes[{j}] must be dict")
                continue
            tasks = a.get("tasks")
            if tasks is not None and not isinstance(tasks, list):
                errs.append(f"projects[{i}].axes[{j}].tasks must be list")
                continue
            for k, t in enumerate(tasks or []):
                if not isinstance(t, dict):
                    errs.append(f"projects[{i}].axes[{j}].tasks[{k}] must be dict")
                    continue
                _require(
                    bool(str(t.get("id") or "").strip()),
                    f"projects[{i}].axes[{j}].tasks[{k}].id must be non-empty",
                    errs,
                )
    return errs


def assert_valid_projects(doc: Any) -> None:
    errs = validate_projects(doc)
    if errs:
        raise PlanInputError("; ".join(errs))
