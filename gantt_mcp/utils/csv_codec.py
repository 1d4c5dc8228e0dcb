"""CSV import/export for tasks, holidays and users.

The column layout matches the spreadsheet export of the web version of the
tool, so files move between the two unchanged.
"""

import csv
import io
import math
import time
from collections.abc import Iterable
from typing import Any

from pydantic import ValidationError

from gantt_mcp.models.reference import Holiday, User
from gantt_mcp.models.task import Task

TASK_COLUMNS = [
    "id",
    "subject",
    "description",
    "status",
    "priorityId",
    "assigneeId",
    "versionId",
    "parentId",
    "startDate",
    "dueDate",
    "progress",
    "estimatedHours",
]
NUMERIC_COLUMNS = {"progress", "estimatedHours"}
REFERENCE_COLUMNS = {"parentId", "assigneeId", "versionId"}

HOLIDAY_COLUMNS = ["date", "name"]
USER_COLUMNS = ["id", "name", "avatar"]

BOM = "\ufeff"


def _write(header: list[str], rows: Iterable[list[Any]], bom: bool) -> str:
    buf = io.StringIO()
    buf.write(",".join(header) + "\n")
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for row in rows:
        writer.writerow(["" if v is None else str(v) for v in row])
    text = buf.getvalue().rstrip("\n")
    return BOM + text if bom else text


def _read(text: str, lower_headers: bool = False) -> list[tuple[int, dict[str, str]]]:
    """Parse CSV text into (line number, row) pairs, skipping blank lines."""
    text = text.removeprefix(BOM)
    reader = csv.reader(io.StringIO(text))
    try:
        header = next(reader)
    except StopIteration:
        return []
    header = [h.strip().lower() if lower_headers else h.strip() for h in header]

    rows: list[tuple[int, dict[str, str]]] = []
    for values in reader:
        if not any(v.strip() for v in values):
            continue
        row = {h: (values[i] if i < len(values) else "") for i, h in enumerate(header)}
        rows.append((reader.line_num, row))
    return rows


def _number(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        return 0
    return number if math.isfinite(number) else 0


def tasks_to_csv(tasks: Iterable[Task], bom: bool = False) -> str:
    """
    Export tasks with every value quoted.

    Args:
        tasks: Tasks to export, in the order given
        bom: Prefix a UTF-8 byte order mark (spreadsheet apps want one)
    """
    records = (t.to_record() for t in tasks)
    return _write(TASK_COLUMNS, ([r[c] for c in TASK_COLUMNS] for r in records), bom)


def csv_to_tasks(text: str) -> list[Task]:
    """
    Parse exported tasks.

    Rows without an id or subject are skipped. Numeric columns fall back to
    0, a duration below one working day loads as one, and empty references
    load as no reference.

    Raises:
        ValueError: if a row has invalid dates or values (message names the line)
    """
    tasks: list[Task] = []
    for line, row in _read(text):
        if not row.get("id") or not row.get("subject"):
            continue
        record: dict[str, Any] = {}
        for column in TASK_COLUMNS:
            if column not in row:
                continue
            value: Any = row[column]
            if column in NUMERIC_COLUMNS:
                value = _number(value)
                if column == "progress":
                    value = int(value)
            elif column in REFERENCE_COLUMNS and value == "":
                value = None
            record[column] = value
        try:
            tasks.append(Task.model_validate(record))
        except ValidationError as e:
            raise ValueError(f"Line {line}: invalid task '{row['id']}': {e}") from e
    return tasks


def holidays_to_csv(holidays: Iterable[Holiday], bom: bool = False) -> str:
    return _write(HOLIDAY_COLUMNS, ([h.date.isoformat(), h.name] for h in holidays), bom)


def csv_to_holidays(text: str) -> list[Holiday]:
    """Parse holidays; rows need both a date and a name. Ids are generated."""
    stamp = int(time.time() * 1000)
    holidays: list[Holiday] = []
    for line, row in _read(text, lower_headers=True):
        if not row.get("date") or not row.get("name"):
            continue
        try:
            holidays.append(Holiday(id=f"h{stamp}-{line}", date=row["date"], name=row["name"]))
        except ValidationError as e:
            raise ValueError(f"Line {line}: invalid holiday: {e}") from e
    return holidays


def users_to_csv(users: Iterable[User], bom: bool = False) -> str:
    return _write(USER_COLUMNS, ([u.id, u.name, u.avatar] for u in users), bom)


def csv_to_users(text: str) -> list[User]:
    """Parse users; rows need a name. Missing ids and avatars are generated."""
    stamp = int(time.time() * 1000)
    users: list[User] = []
    for line, row in _read(text, lower_headers=True):
        if not row.get("name"):
            continue
        user_id = row.get("id") or f"u{stamp}-{line}"
        avatar = row.get("avatar") or f"https://picsum.photos/seed/{user_id}/40/40"
        users.append(User(id=user_id, name=row["name"], avatar=avatar))
    return users
