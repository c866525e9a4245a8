# planview/render/inline.py
from __future__ import annotations

import json
import re
from html import escape
from typing import Any, Dict, Sequence, Union

from ..plan import PlanLayout, layout_to_payload
from .markup import build_body_markup
from .template import HTML_TEMPLATE

try:
    import orjson  # type: ignore
except Exception:  # pragma: no cover
    orjson = None  # type: ignore

_DATA_MARKER = "__DATA_JSON__"
_BODY_MARKER = "__BODY_MARKUP__"
_TITLE_MARKER = "__TITLE__"
_MARKER_RE = re.compile(r"__(?:DATA_JSON|BODY_MARKUP|TITLE)__")

DEFAULT_TITLE = "Project Plan View"

Layouts = Union[PlanLayout, Sequence[PlanLayout]]


def dumps_payload(payload: Dict[str, Any]) -> str:
    if orjson is not None:
        return orjson.dumps(payload).decode("utf-8")
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))


def build_document_payload(layouts: Sequence[PlanLayout], *, inline: bool = False) -> Dict[str, Any]:
    """Shared cfg plus one layout payload per view, keyed by view name."""
    first = layouts[0]
    return {
        "cfg": {
            "active_view": first.view.value,
            "project_id": first.project_id,
            "panel_width": first.panel_width,
            "today": first.today.isoformat(),
            "tz": first.tz,
            "inline": bool(inline),
        },
        "views": {lay.view.value: layout_to_payload(lay) for lay in layouts},
    }


def build_html(layouts: Layouts, *, inline: bool = False, title: str = DEFAULT_TITLE) -> str:
    # Each marker must appear exactly once in the template. Injection is a single
    # pass over the template, so marker-like text inside task data is left alone.
    if isinstance(layouts, PlanLayout):
        layouts = [layouts]
    layouts = list(layouts)
    if not layouts:
        raise ValueError("build_html requires at least one layout")
    for lay in layouts:
        if not isinstance(lay, PlanLayout):
            raise TypeError(f"layouts must be PlanLayout, got {type(lay).__name__}")

    for marker in (_DATA_MARKER, _BODY_MARKER, _TITLE_MARKER):
        n = HTML_TEMPLATE.count(marker)
        if n != 1:
            raise RuntimeError(f"HTML_TEMPLATE must contain {marker} exactly once (found {n})")

    data_json = dumps_payload(build_document_payload(layouts, inline=inline))
    data_json = data_json.replace("</", r"<\/")  # script-safe injection

    values = {
        _TITLE_MARKER: escape(title),
        _BODY_MARKER: build_body_markup(layouts, inline=inline),
        _DATA_MARKER: data_json,
    }
    return _MARKER_RE.sub(lambda m: values[m.group(0)], HTML_TEMPLATE)
