"""Tests for CSV import/export and JSON document storage."""

import json

import pytest

from gantt_mcp.models.document import ProjectDocument
from gantt_mcp.models.reference import Holiday, User
from gantt_mcp.utils.csv_codec import (
    BOM,
    TASK_COLUMNS,
    csv_to_holidays,
    csv_to_tasks,
    csv_to_users,
    holidays_to_csv,
    tasks_to_csv,
    users_to_csv,
)
from gantt_mcp.utils.storage import load_document, save_document


class TestTaskCsv:
    """Tests for the task CSV format."""

    def test_export_layout(self, tree_store):
        lines = tasks_to_csv(tree_store.tasks).split("\n")
        assert lines[0] == ",".join(TASK_COLUMNS)
        assert lines[2] == '"B","Task B","","New","","u1","","A","2025-02-01","2025-02-05","0","3"'
        assert len(lines) == 4

    def test_export_bom(self, tree_store):
        assert tasks_to_csv(tree_store.tasks, bom=True).startswith(BOM)
        assert not tasks_to_csv(tree_store.tasks).startswith(BOM)

    def test_round_trip(self, tree_store):
        text = tasks_to_csv(tree_store.tasks, bom=True)
        assert csv_to_tasks(text) == tree_store.tasks

    def test_quotes_commas_and_newlines(self, task_factory):
        task = task_factory("1", "2025-02-03", "2025-02-03", subject='Say "hi", then', description="a\nb")
        assert csv_to_tasks(tasks_to_csv([task])) == [task]

    def test_rows_without_id_or_subject_skipped(self):
        text = (
            "id,subject,startDate,dueDate\n"
            '"1","Plan","2025-02-03","2025-02-04"\n'
            '"","Orphan row","2025-02-03","2025-02-04"\n'
            '"3","","2025-02-03","2025-02-04"\n'
            "\n"
        )
        tasks = csv_to_tasks(text)
        assert [t.id for t in tasks] == ["1"]

    def test_numeric_fallbacks(self):
        text = (
            "id,subject,startDate,dueDate,progress,estimatedHours,parentId\n"
            '"1","Plan","2025-02-03","2025-02-04","abc","2.5",""\n'
        )
        task = csv_to_tasks(text)[0]
        assert task.progress == 0
        assert task.estimated_hours == 3
        assert task.parent_id is None

    def test_zero_or_blank_duration_is_one_day(self):
        text = (
            "id,subject,startDate,dueDate,estimatedHours\n"
            '"1","Plan","2025-02-03","2025-02-03","0"\n'
            '"2","Ship","2025-02-03","2025-02-03",""\n'
            '"3","Party","2025-02-03","2025-02-03","inf"\n'
        )
        assert [t.estimated_hours for t in csv_to_tasks(text)] == [1, 1, 1]

    def test_invalid_row_names_line(self):
        text = (
            "id,subject,startDate,dueDate\n"
            '"1","Plan","2025-02-03","2025-02-04"\n'
            '"2","Broken","2025-02-05","2025-02-01"\n'
        )
        with pytest.raises(ValueError, match="Line 3"):
            csv_to_tasks(text)

    def test_empty_text(self):
        assert csv_to_tasks("") == []


class TestReferenceCsv:
    """Tests for the holiday and user CSV formats."""

    def test_holidays_export(self, holidays):
        assert holidays_to_csv(holidays) == 'date,name\n"2025-01-01","New Year"'

    def test_holidays_import(self):
        text = 'Date,Name\n"2025-01-01","New Year"\n"2025-12-25",""\n"2025/12/26","Boxing Day"\n'
        parsed = csv_to_holidays(text)
        assert [(str(h.date), h.name) for h in parsed] == [("2025-01-01", "New Year"), ("2025-12-26", "Boxing Day")]
        assert all(h.id for h in parsed)

    def test_holidays_bad_date(self):
        with pytest.raises(ValueError, match="Line 2"):
            csv_to_holidays('date,name\n"someday","Party"\n')

    def test_users_round_trip(self):
        users = [User(id="u1", name="Alice", avatar="a.png")]
        assert csv_to_users(users_to_csv(users)) == users

    def test_users_generated_fields(self):
        parsed = csv_to_users('name\n"Carol"\n')
        assert parsed[0].name == "Carol"
        assert parsed[0].id.startswith("u")
        assert parsed[0].id in parsed[0].avatar


class TestStorage:
    """Tests for JSON project documents."""

    def test_missing_file_is_empty_project(self, tmp_path):
        doc = load_document(tmp_path / "nope.json")
        assert doc.tasks == []
        assert [s.id for s in doc.statuses] == ["New", "In Progress", "Resolved", "Closed"]

    def test_save_and_load(self, tree_store, tmp_path, holidays):
        tree_store.set_holidays(holidays)
        path = tmp_path / "nested" / "project.json"
        save_document(tree_store.to_document(), path)

        doc = load_document(path)
        assert doc == tree_store.to_document()
        assert list(tmp_path.joinpath("nested").iterdir()) == [path]

    def test_camel_case_on_disk(self, tree_store, tmp_path):
        path = tmp_path / "project.json"
        save_document(tree_store.to_document(), path)
        data = json.loads(path.read_text())
        assert data["tasks"][1]["startDate"] == "2025-02-01"
        assert data["tasks"][1]["parentId"] == "A"
        assert data["versions"][0]["isDefault"] is True

    def test_bom_tolerated(self, tmp_path):
        path = tmp_path / "project.json"
        path.write_text(BOM + ProjectDocument().model_dump_json(by_alias=True), encoding="utf-8")
        assert load_document(path).tasks == []

    def test_holiday_dates_parse(self, tmp_path):
        path = tmp_path / "project.json"
        path.write_text(json.dumps({"holidays": [{"date": "2025-01-01", "name": "New Year"}]}))
        assert load_document(path).holidays == [Holiday(date="2025-01-01", name="New Year")]
