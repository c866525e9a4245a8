from __future__ import annotations

import argparse
import json
import os
import sys
import webbrowser
from pathlib import Path

from .model import TimelineView
from .plan import build_plan_layout
from .render.inline import build_document_payload, build_html
from .resize import DEFAULT_PANEL_WIDTH
from .util.console import eprint, obs_enabled
from .util.dates import parse_date_yyyy_mm_dd
from .util.tz import normalize_tz_name, resolve_tz, today_date
from .validate import PlanInputError, validate_projects


def _load_json(path: str, what: str):
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        raise SystemExit(f"Failed to load {what}: {e}")


def _view_order(first: TimelineView) -> list[TimelineView]:
    return [first] + [v for v in TimelineView if v is not first]


def main(argv: list[str] | None = None) -> None:
    default_out = os.path.join("build", "planview.html")
    ap = argparse.ArgumentParser(
        description="Render a project plan (Gantt-style timeline) as a standalone HTML page."
    )
    ap.add_argument("--in", dest="input", required=True, help="Projects JSON (list of projects with axes and tasks)")
    ap.add_argument(
        "--view",
        default=os.getenv("PLANVIEW_VIEW", "monthly"),
        help="Initial timeline view: daily, weekly or monthly (default: env PLANVIEW_VIEW or 'monthly')",
    )
    ap.add_argument("--only-view", action="store_true", help="Render only --view instead of all three views")
    ap.add_argument("--today", default=None, help="Reference date YYYY-MM-DD for task status (default: today in --tz)")
    ap.add_argument(
        "--tz",
        default=os.getenv("PLANVIEW_TZ", "local"),
        help="Timezone for day boundaries (default: env PLANVIEW_TZ or 'local')",
    )
    ap.add_argument("--project", default=None, help="Project id selected in the project filter when the page opens")
    ap.add_argument("--personnel", default=None, help="Personnel JSON: list of {id, fullName} or {id: name}")
    ap.add_argument(
        "--panel-width",
        type=float,
        default=DEFAULT_PANEL_WIDTH,
        help=f"Initial label panel width in px, clamped to 250..800 (default: {DEFAULT_PANEL_WIDTH})",
    )
    ap.add_argument("--inline", action="store_true", help="Render the inline preview variant (no close button)")
    ap.add_argument("--strict", action="store_true", help="Fail on structural problems in the projects document")
    ap.add_argument("--out", default=default_out, help="Output HTML path (default: ./build/planview.html)")
    ap.add_argument("--json-out", default=None, help="Also write the computed layout JSON here")
    ap.add_argument("--no-open", action="store_true", help="Do not open the generated HTML in a browser")

    args = ap.parse_args(argv)

    tz_name = normalize_tz_name(args.tz)
    try:
        tzinfo = resolve_tz(tz_name)
    except ValueError as e:
        raise SystemExit(f"Invalid --tz value: {e}")

    try:
        first_view = TimelineView.parse(args.view)
    except ValueError as e:
        raise SystemExit(f"Invalid --view value: {e}")

    if args.today:
        try:
            today = parse_date_yyyy_mm_dd(args.today)
        except ValueError as e:
            raise SystemExit(f"Invalid --today value: {e}")
    else:
        today = today_date(tzinfo)

    doc = _load_json(args.input, "projects")
    personnel = _load_json(args.personnel, "personnel") if args.personnel else None

    problems = validate_projects(doc)
    if problems:
        if args.strict:
            raise SystemExit("Invalid projects document:\n  " + "\n  ".join(problems))
        if obs_enabled():
            for p in problems:
                eprint(f"[planview.cli] WARN: {p}")

    views = [first_view] if args.only_view else _view_order(first_view)
    try:
        layouts = [
            build_plan_layout(
                doc,
                view=v,
                today=today,
                tz=tz_name,
                project_id=args.project,
                personnel=personnel,
                panel_width=args.panel_width,
            )
            for v in views
        ]
    except PlanInputError as e:
        raise SystemExit(f"Invalid projects document: {e}")

    html = build_html(layouts, inline=bool(args.inline))

    out_path = os.path.abspath(args.out)
    try:
        Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        # Default relative path from an unwritable CWD: fall back to a user-writable location.
        if args.out == default_out:
            fallback = Path.home() / ".planview" / "build" / "planview.html"
            fallback.parent.mkdir(parents=True, exist_ok=True)
            out_path = str(fallback)
            print(f"[planview] WARN: default output directory is not writable; using {out_path}", file=sys.stderr)
        else:
            raise SystemExit(f"Cannot create output directory '{Path(out_path).parent}': {e}")
    with open(out_path, "w", encoding="utf-8") as f:
        f.write(html)

    if args.json_out:
        json_path = Path(args.json_out)
        json_path.parent.mkdir(parents=True, exist_ok=True)
        payload = build_document_payload(layouts, inline=bool(args.inline))
        json_path.write_text(json.dumps(payload, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")

    if obs_enabled():
        n = layouts[0].total_tasks
        eprint(f"[planview.cli] render.ok views={','.join(v.value for v in views)} tasks={n} out={out_path}")

    print(out_path)

    if not args.no_open:
        try:
            webbrowser.open("file://" + out_path)
        except webbrowser.Error:
            pass


if __name__ == "__main__":
    main()
