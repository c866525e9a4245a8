from __future__ import annotations

import datetime as dt
import json
import unittest

from planview.model import PlanTask, TaskStatus, TimelineView
from planview.normalize import normalize_projects
from planview.plan import NO_RESPONSIBLE_TEXT, build_plan_layout, layout_to_payload, make_name_lookup
from planview.validate import PlanInputError, assert_valid_projects, validate_projects

TODAY = dt.date(2024, 6, 15)

DOC = {
    "projects": [
        {
            "id": "p1",
            "name": "Alpha",
            "axes": [
                {
                    "id": "a1",
                    "name": "Build",
                    "tasks": [
                        {
                            "id": "t1",
                            "description": "Design",
                            "responsables": ["u1", "u2"],
                            "priority": "High",
                            "startDate": "2024-06-03",
                            "endDate": "2024-06-05",
                        },
                        {"id": "t2", "description": "Review", "responsables": [], "startDate": "2024-06-10"},
                        {"description": "no id"},
                        {"id": "t3", "description": "Bad date", "startDate": "2024-13-01", "endDate": "2024-06-20"},
                    ],
                }
            ],
        },
        {
            "id": "p2",
            "name": "Beta",
            "axes": [
                {
                    "id": "a2",
                    "name": "Ship",
                    "tasks": [
                        {
                            "id": "t4",
                            "description": "Launch",
                            "responsables": ["u9"],
                            "start_date": "2024-07-01T00:00:00Z",
                            "end_date": "2024-07-02",
                        }
                    ],
                }
            ],
        },
    ]
}

PERSONNEL = [{"id": "u1", "fullName": "Alice Martin"}, {"id": "u2", "fullName": "Bob Stone"}]


def _rows(layout):
    return {r.task.id: r for g in layout.groups for r in g.rows}


class TestNormalizeContract(unittest.TestCase):
    def test_flattens_projects_axes_tasks(self) -> None:
        tasks = normalize_projects(DOC)
        self.assertEqual([t.id for t in tasks], ["t1", "t2", "t3", "t4"])
        t1, t2, t3, t4 = tasks
        self.assertEqual(t1.priority, "high")
        self.assertEqual(t1.responsible_ids, ("u1", "u2"))
        self.assertEqual((t1.project_name, t1.axe_name), ("Alpha", "Build"))
        self.assertFalse(t2.has_range)
        self.assertIsNone(t3.start_date)
        self.assertEqual(t3.end_date, dt.date(2024, 6, 20))
        self.assertEqual(t4.start_date, dt.date(2024, 7, 1))

    def test_bare_list_is_accepted(self) -> None:
        self.assertEqual(len(normalize_projects(DOC["projects"])), 4)

    def test_validation(self) -> None:
        self.assertEqual(validate_projects(DOC), ["projects[0].axes[0].tasks[2].id must be non-empty"])
        errs = validate_projects([{"axes": "x"}])
        self.assertIn("projects[0].id must be non-empty", errs)
        self.assertIn("projects[0].axes must be list", errs)
        with self.assertRaises(PlanInputError):
            assert_valid_projects("nope")
        with self.assertRaises(PlanInputError):
            normalize_projects(42)


class TestPlanLayoutContract(unittest.TestCase):
    def test_weekly_layout(self) -> None:
        layout = build_plan_layout(DOC, view="weekly", today=TODAY, tz="UTC", personnel=PERSONNEL)
        self.assertIs(layout.view, TimelineView.WEEKLY)
        self.assertEqual([g.title for g in layout.groups], ["Alpha - Build", "Beta - Ship"])
        self.assertEqual(layout.window.start, dt.date(2024, 5, 20))
        self.assertEqual(layout.window.end, dt.date(2024, 7, 16))
        self.assertEqual(len(layout.units), 9)
        self.assertEqual(layout.content_width_px, 900)
        self.assertEqual(layout.total_tasks, 4)
        self.assertEqual(layout.projects, (("p1", "Alpha"), ("p2", "Beta")))

        rows = _rows(layout)
        self.assertEqual(rows["t1"].responsible_text, "Alice Martin, Bob Stone")
        self.assertEqual(rows["t2"].responsible_text, NO_RESPONSIBLE_TEXT)
        self.assertEqual(rows["t4"].responsible_text, "u9")

        self.assertIs(rows["t1"].status, TaskStatus.OVERDUE)
        self.assertIs(rows["t2"].status, TaskStatus.NO_DATE)
        self.assertIs(rows["t3"].status, TaskStatus.FUTURE)
        self.assertIs(rows["t4"].status, TaskStatus.FUTURE)

        self.assertIsNotNone(rows["t1"].geometry)
        self.assertIsNone(rows["t2"].geometry)
        self.assertIsNone(rows["t3"].geometry)

    def test_project_selection_keeps_every_group_and_window(self) -> None:
        full = build_plan_layout(DOC, view="daily", today=TODAY, tz="UTC")
        only = build_plan_layout(DOC, view="daily", today=TODAY, tz="UTC", project_id="p2")
        self.assertEqual([g.project_id for g in only.groups], [g.project_id for g in full.groups])
        self.assertEqual([g.project_id for g in only.visible_groups], ["p2"])
        self.assertEqual(len(full.visible_groups), len(full.groups))
        self.assertEqual(only.window, full.window)
        self.assertEqual(only.project_id, "p2")

    def test_panel_width_is_clamped(self) -> None:
        layout = build_plan_layout(DOC, today=TODAY, tz="UTC", panel_width=5000)
        self.assertEqual(layout.panel_width, 800.0)
        self.assertAlmostEqual(layout.task_column_px, 480.0, places=6)
        self.assertAlmostEqual(layout.responsible_column_px, 280.0, places=6)

    def test_empty_input_still_has_axis(self) -> None:
        layout = build_plan_layout([], view="monthly", today=TODAY, tz="UTC")
        self.assertTrue(layout.is_empty)
        self.assertEqual(layout.groups, ())
        self.assertEqual(len(layout.units), 6)
        self.assertEqual(layout.units[0].label, "Jun 2024")

    def test_accepts_normalized_tasks(self) -> None:
        tasks = [
            PlanTask(id="x", description="X", start_date=dt.date(2024, 6, 1), end_date=dt.date(2024, 6, 2), project_id="p", project_name="P"),
        ]
        layout = build_plan_layout(tasks, view="daily", today=TODAY, tz="UTC")
        self.assertEqual(layout.projects, (("p", "P"),))
        self.assertEqual(len(layout.groups), 1)

    def test_payload_is_json_safe(self) -> None:
        layout = build_plan_layout(DOC, view="monthly", today=TODAY, tz="UTC", personnel=PERSONNEL)
        payload = json.loads(json.dumps(layout_to_payload(layout)))
        self.assertEqual(payload["cfg"]["view"], "monthly")
        self.assertEqual(payload["window"], {"start": "2024-05-01", "end": "2024-08-31"})
        rows = {r["id"]: r for g in payload["groups"] for r in g["rows"]}
        self.assertIsNone(rows["t2"]["bar"])
        self.assertEqual(rows["t1"]["status"], "overdue")
        self.assertEqual(set(rows["t1"]["bar"]), {"left", "width"})

    def test_name_lookup_variants(self) -> None:
        self.assertEqual(make_name_lookup(None)("u1"), "u1")
        self.assertEqual(make_name_lookup({"u1": "Alice"})("u1"), "Alice")
        self.assertEqual(make_name_lookup({"u1": "Alice"})("u2"), "u2")
        self.assertEqual(make_name_lookup(lambda pid: None)("u3"), "u3")
        self.assertEqual(make_name_lookup(lambda pid: pid.upper())("u3"), "U3")
        self.assertEqual(make_name_lookup(PERSONNEL)("u2"), "Bob Stone")


if __name__ == "__main__":
    unittest.main(verbosity=2)
