# planview/render/markup.py
from __future__ import annotations

from html import escape
from typing import List, Sequence

from ..geometry import scroll_fraction_for_task
from ..model import TaskStatus, TimelineView
from ..plan import PlanLayout
from ..status import STATUS_COLORS, STATUS_LABELS, priority_color, status_color

VIEW_BUTTONS = (
    (TimelineView.DAILY, "Daily"),
    (TimelineView.WEEKLY, "Weekly"),
    (TimelineView.MONTHLY, "Monthly"),
)

LEGEND = (TaskStatus.FUTURE, TaskStatus.IN_PROGRESS, TaskStatus.OVERDUE)


def _px(v: float) -> str:
    return f"{float(v):g}px"


def _pct(v: float) -> str:
    return f"{float(v):.6f}%"


def _attr(v: object) -> str:
    return escape(str(v), quote=True)


def _group_open(layout: PlanLayout, group) -> str:
    hidden = "" if layout.shows_group(group) else ' style="display:none"'
    return f'<div class="pv-group" data-project="{_attr(group.project_id)}"{hidden}>'


def _view_button(view: TimelineView, label: str, *, active: bool, enabled: bool) -> str:
    cls = ' class="active"' if active else ""
    dis = "" if enabled else " disabled"
    return f'<button type="button" data-view="{view.value}"{cls}{dis}>{label}</button>'


def _header(layouts: Sequence[PlanLayout], *, inline: bool) -> str:
    active = layouts[0].view
    available = {lay.view for lay in layouts}
    buttons = "".join(
        _view_button(v, label, active=v is active, enabled=v in available) for v, label in VIEW_BUTTONS
    )

    parts = [
        '<div class="pv-header">',
        "<h2>Project Plan View</h2>",
        '<div class="pv-controls">',
        f'<div class="pv-views">{buttons}</div>',
    ]
    projects = layouts[0].projects
    if len(projects) > 1:
        current = layouts[0].project_id or ""
        opts = ['<option value="">All Projects</option>']
        opts.extend(
            f'<option value="{_attr(pid)}"{" selected" if pid == current else ""}>{escape(name)}</option>'
            for pid, name in projects
        )
        parts.append(f'<select id="pv-project">{"".join(opts)}</select>')
    if not inline:
        parts.append('<button type="button" class="pv-close" data-close title="Close">&times;</button>')
    parts.append("</div></div>")
    return "".join(parts)


def _empty() -> str:
    return (
        '<div class="pv-empty">'
        '<p class="pv-empty-title">No tasks found</p>'
        "<p>Add tasks with date ranges to see them in the timeline</p>"
        "</div>"
    )


def _panel(layout: PlanLayout) -> str:
    task_w = _px(layout.task_column_px)
    resp_w = _px(layout.responsible_column_px)
    out: List[str] = [
        f'<div class="pv-panel" style="width:{_px(layout.panel_width)}">',
        '<div class="pv-resize" title="Drag to resize"><div class="pv-resize-line"></div></div>',
        '<div class="pv-panel-head"><div class="pv-cols">',
        f'<div class="pv-cell pv-task" style="width:{task_w}">Task</div>',
        f'<div class="pv-cell pv-resp" style="width:{resp_w}">Responsible</div>',
        '</div><div class="pv-spacer"></div></div>',
        '<div class="pv-panel-body">',
    ]
    for g in layout.groups:
        out.append(_group_open(layout, g))
        out.append(f'<div class="pv-group-title">{escape(g.title)}</div>')
        for r in g.rows:
            desc = escape(r.task.description)
            resp = escape(r.responsible_text)
            out.append(
                f'<div class="pv-row" data-task="{_attr(r.task.id)}">'
                f'<div class="pv-cell pv-task" style="width:{task_w}" title="{desc}">{desc}</div>'
                f'<div class="pv-cell pv-resp" style="width:{resp_w}" title="{resp}">{resp}</div>'
                "</div>"
            )
        out.append("</div>")
    out.append("</div></div>")
    return "".join(out)


def _timeline(layout: PlanLayout) -> str:
    width = _px(layout.content_width_px)
    cells = "".join(
        f'<div class="pv-unit" title="{_attr(u.title)}">{escape(u.label)}</div>' for u in layout.units
    )
    out: List[str] = [
        '<div class="pv-timeline">',
        '<div class="pv-axis">',
        f'<div class="pv-axis-grid" style="grid-template-columns:repeat({len(layout.units)}, {_px(layout.unit_px)});'
        f'width:{width};min-width:{width}">{cells}</div>',
        "</div>",
        f'<div class="pv-scrollbar"><div style="width:{width};height:1px"></div></div>',
        '<div class="pv-content">',
        f'<div style="width:{width};min-width:{width}">',
    ]
    for g in layout.groups:
        out.append(_group_open(layout, g))
        out.append('<div class="pv-bar-group" aria-hidden="true"></div>')
        for r in g.rows:
            t = r.task
            out.append(f'<div class="pv-bar-row" data-task="{_attr(t.id)}">')
            if r.geometry is None:
                out.append(f'<div class="pv-nodate">{STATUS_LABELS[TaskStatus.NO_DATE]}</div>')
            else:
                frac = scroll_fraction_for_task(t, layout.units, layout.view, layout.tz)
                scroll = "" if frac is None else f' data-scroll="{frac:.6f}"'
                tip = f"{t.start_date.isoformat()} - {t.end_date.isoformat()} | Priority: {t.priority}"
                out.append(
                    f'<div class="pv-bar" data-status="{r.status.value}"{scroll}'
                    f' title="{_attr(tip)}"'
                    f' style="left:{_pct(r.geometry.left_percent)};width:{_pct(r.geometry.width_percent)};'
                    f'background:{status_color(r.status)};border-left:3px solid {priority_color(t.priority)}"></div>'
                )
            out.append("</div>")
        out.append("</div>")
    out.append("</div></div></div>")
    return "".join(out)


def _legend(*, inline: bool) -> str:
    items = "".join(
        f'<span><span class="pv-swatch" style="background:{STATUS_COLORS[s]}"></span>{STATUS_LABELS[s]}</span>'
        for s in LEGEND
    )
    close = "" if inline else '<button type="button" class="pv-footer-close" data-close>Close</button>'
    return f'<div class="pv-legend">{items}{close}</div>'


def build_body_markup(layouts: Sequence[PlanLayout], *, inline: bool = False) -> str:
    """Static markup for one or more views of the same plan; the first layout is shown initially."""
    if not layouts:
        raise ValueError("build_body_markup requires at least one layout")

    root_cls = "pv-root pv-inline" if inline else "pv-root pv-modal"
    out: List[str] = [f'<div class="{root_cls}">', _header(layouts, inline=inline)]

    if layouts[0].is_empty:
        out.append(_empty())
    else:
        for i, lay in enumerate(layouts):
            active = " active" if i == 0 else ""
            out.append(f'<section class="pv-view{active}" data-view="{lay.view.value}">')
            out.append('<div class="pv-chart">')
            out.append(_panel(lay))
            out.append(_timeline(lay))
            out.append("</div></section>")

    out.append(_legend(inline=inline))
    out.append("</div>")
    return "".join(out)
