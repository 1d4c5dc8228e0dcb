"""CSV import/export MCP tools."""

from mcp.types import ToolAnnotations

from gantt_mcp.errors import GanttError
from gantt_mcp.models.inputs import ExportCsvInput, ImportCsvInput
from gantt_mcp.server import get_store, mcp, persist
from gantt_mcp.utils.csv_codec import (
    csv_to_holidays,
    csv_to_tasks,
    csv_to_users,
    holidays_to_csv,
    tasks_to_csv,
    users_to_csv,
)


@mcp.tool(
    name="gantt_export_csv",
    annotations=ToolAnnotations(
        title="Export CSV",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def gantt_export_csv(params: ExportCsvInput) -> str:
    """
    Export tasks, holidays or users as CSV (every value quoted).

    Args:
        params: ExportCsvInput with what to export and whether to add a BOM

    Returns:
        CSV text including the header row
    """
    store = get_store()
    if params.what == "holidays":
        return holidays_to_csv(store.holidays, bom=params.bom)
    if params.what == "users":
        return users_to_csv(store.reference.users, bom=params.bom)
    return tasks_to_csv(store.tasks, bom=params.bom)


@mcp.tool(
    name="gantt_import_csv",
    annotations=ToolAnnotations(
        title="Import CSV",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def gantt_import_csv(params: ImportCsvInput) -> str:
    """
    Replace tasks, holidays or users with the contents of a CSV export.

    WARNING: the current list of that kind is overwritten. Importing
    holidays reschedules every task under the new calendar.

    Args:
        params: ImportCsvInput with what to import and the CSV text

    Returns:
        How many rows were imported, or why nothing was
    """
    store = get_store()
    try:
        if params.what == "holidays":
            holidays = csv_to_holidays(params.csv_text)
            if not holidays:
                return "Error: No valid holiday rows found (need date and name columns)."
            moved = store.set_holidays(holidays)
            message = f"Imported {len(holidays)} holiday(s); {len(moved)} task(s) rescheduled."
        elif params.what == "users":
            users = csv_to_users(params.csv_text)
            if not users:
                return "Error: No valid user rows found (need a name column)."
            store.reference = store.reference.model_copy(update={"users": users})
            message = f"Imported {len(users)} user(s)."
        else:
            tasks = csv_to_tasks(params.csv_text)
            if not tasks:
                return "Error: No valid task rows found (need id and subject columns)."
            store.replace_all(tasks)
            message = f"Imported {len(tasks)} task(s)."
    except (GanttError, ValueError) as e:
        return f"Error: Import failed - {e}\nTip: Check the CSV format against gantt_export_csv output."

    persist()
    return message
