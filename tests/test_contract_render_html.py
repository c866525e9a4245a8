from __future__ import annotations

import datetime as dt
import json
import re
import unittest

from planview.plan import build_plan_layout
from planview.render.inline import build_document_payload, build_html
from planview.render.html_shell import HTML_SHELL, SHELL_MARKERS
from planview.render.template import HTML_TEMPLATE

TODAY = dt.date(2024, 6, 15)

DOC = [
    {
        "id": "p1",
        "name": "Alpha",
        "axes": [
            {
                "id": "a1",
                "name": "Build",
                "tasks": [
                    {"id": "t1", "description": "Design", "startDate": "2024-06-03", "endDate": "2024-06-05"},
                    {"id": "t2", "description": "No dates yet"},
                    {
                        "id": "t3",
                        "description": "</script><b>__TITLE__ & __DATA_JSON__</b>",
                        "startDate": "2024-06-10",
                        "endDate": "2024-06-12",
                    },
                ],
            }
        ],
    },
    {"id": "p2", "name": "Beta", "axes": []},
]

TWO_PROJECTS = [
    {
        "id": "p1",
        "name": "Alpha",
        "axes": [{"id": "a1", "name": "Build", "tasks": [{"id": "t1", "description": "Design", "startDate": "2024-06-03", "endDate": "2024-06-05"}]}],
    },
    {
        "id": "p2",
        "name": "Beta",
        "axes": [{"id": "a2", "name": "Ship", "tasks": [{"id": "t9", "description": "beta row", "startDate": "2024-06-06", "endDate": "2024-06-07"}]}],
    },
]

_DATA_RE = re.compile(r'<script id="pv-data" type="application/json">\n(.*?)\n</script>', re.S)


def _layouts(**kw):
    return [build_plan_layout(DOC, view=v, today=TODAY, tz="UTC", **kw) for v in ("weekly", "daily", "monthly")]


class TestRenderHtmlContract(unittest.TestCase):
    def test_template_markers_present_once(self) -> None:
        for marker in ("__TITLE__", "__BODY_MARKUP__", "__DATA_JSON__"):
            self.assertEqual(HTML_TEMPLATE.count(marker), 1, marker)
        self.assertNotIn("__CSS_BLOCK__", HTML_TEMPLATE)
        self.assertNotIn("__JS_BLOCK__", HTML_TEMPLATE)

    def test_shell_carries_each_marker_once(self) -> None:
        for marker in SHELL_MARKERS:
            self.assertEqual(HTML_SHELL.count(marker), 1, marker)
        self.assertLess(HTML_SHELL.index("__DATA_JSON__"), HTML_SHELL.index("__BODY_MARKUP__"))
        self.assertLess(HTML_SHELL.index("__BODY_MARKUP__"), HTML_SHELL.index("__JS_BLOCK__"))

    def test_document_structure(self) -> None:
        html = build_html(_layouts())
        self.assertTrue(html.startswith("<!doctype html>"))
        self.assertIn("<title>Project Plan View</title>", html)
        self.assertEqual(html.count('<section class="pv-view'), 3)
        self.assertIn('<section class="pv-view active" data-view="weekly">', html)
        self.assertIn('<button type="button" data-view="weekly" class="active">Weekly</button>', html)
        self.assertIn("Jun 3 – 9", html)
        self.assertIn("No date range", html)
        self.assertIn('id="pv-project"', html)
        self.assertIn('class="pv-close" data-close', html)
        self.assertIn("makeScrollSync", html)
        self.assertIn("bindResize", html)

    def test_embedded_data_parses_and_is_script_safe(self) -> None:
        html = build_html(_layouts())
        m = _DATA_RE.search(html)
        self.assertIsNotNone(m)
        raw = m.group(1)
        self.assertNotIn("</script>", raw)
        data = json.loads(raw)
        self.assertEqual(data["cfg"]["active_view"], "weekly")
        self.assertEqual(sorted(data["views"]), ["daily", "monthly", "weekly"])
        rows = data["views"]["weekly"]["groups"][0]["rows"]
        self.assertEqual(rows[2]["description"], "</script><b>__TITLE__ & __DATA_JSON__</b>")

    def test_task_text_is_escaped_and_markers_not_reinjected(self) -> None:
        html = build_html(_layouts())
        self.assertIn("&lt;/script&gt;&lt;b&gt;__TITLE__ &amp; __DATA_JSON__&lt;/b&gt;", html)
        self.assertEqual(html.count("<title>"), 1)

    def test_inline_variant_has_no_close_controls(self) -> None:
        html = build_html(_layouts(), inline=True)
        self.assertIn("pv-root pv-inline", html)
        self.assertNotIn('class="pv-close"', html)
        self.assertNotIn('class="pv-footer-close"', html)

    def test_empty_plan_shows_placeholder(self) -> None:
        layout = build_plan_layout([], today=TODAY, tz="UTC")
        html = build_html(layout)
        self.assertIn("No tasks found", html)
        self.assertNotIn('<section class="pv-view', html)

    def test_single_view_disables_other_buttons(self) -> None:
        layout = build_plan_layout(DOC, view="monthly", today=TODAY, tz="UTC")
        html = build_html(layout)
        self.assertIn('data-view="daily" disabled', html)
        self.assertIn('data-view="monthly" class="active">', html)

    def test_every_project_option_has_rows_when_one_is_selected(self) -> None:
        layout = build_plan_layout(TWO_PROJECTS, view="weekly", today=TODAY, tz="UTC", project_id="p1")
        html = build_html(layout)
        options = re.findall(r'<option value="([^"]+)"', html)
        self.assertEqual(options, ["p1", "p2"])
        self.assertIn('<option value="p1" selected>Alpha</option>', html)
        for pid in options:
            group = re.search(r'<div class="pv-group" data-project="' + pid + r'"[^>]*>.*?<div class="pv-row"', html, re.S)
            self.assertIsNotNone(group, pid)
        self.assertIn("beta row", html)
        self.assertEqual(html.count('<div class="pv-group" data-project="p2" style="display:none">'), 2)
        self.assertEqual(html.count('<div class="pv-group" data-project="p1">'), 2)

        payload = json.loads(_DATA_RE.search(html).group(1))
        self.assertEqual(payload["cfg"]["project_id"], "p1")

    def test_bad_arguments(self) -> None:
        with self.assertRaises(ValueError):
            build_html([])
        with self.assertRaises(TypeError):
            build_html([{"cfg": {}}])  # type: ignore[list-item]

    def test_document_payload_cfg(self) -> None:
        payload = build_document_payload(_layouts(panel_width=100), inline=True)
        self.assertEqual(payload["cfg"]["panel_width"], 250.0)
        self.assertTrue(payload["cfg"]["inline"])
        self.assertEqual(payload["cfg"]["today"], "2024-06-15")


if __name__ == "__main__":
    unittest.main(verbosity=2)
