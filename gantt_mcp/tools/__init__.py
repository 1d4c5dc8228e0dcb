"""MCP tool definitions for Gantt MCP."""

# Import all tools to register them with the MCP server
from gantt_mcp.tools.core import (
    gantt_add,
    gantt_assign,
    gantt_delete,
    gantt_get,
    gantt_list,
    gantt_parent_candidates,
    gantt_reparent,
    gantt_update,
)
from gantt_mcp.tools.master import gantt_master_add, gantt_master_list, gantt_master_remove
from gantt_mcp.tools.scheduling import (
    gantt_add_holiday,
    gantt_drag,
    gantt_holidays,
    gantt_remove_holiday,
    gantt_set_duration,
    gantt_timeline,
    gantt_work_days,
)
from gantt_mcp.tools.transfer import gantt_export_csv, gantt_import_csv

__all__ = [
    # Core tools
    "gantt_list",
    "gantt_get",
    "gantt_add",
    "gantt_update",
    "gantt_delete",
    "gantt_reparent",
    "gantt_assign",
    "gantt_parent_candidates",
    # Scheduling tools
    "gantt_drag",
    "gantt_set_duration",
    "gantt_work_days",
    "gantt_timeline",
    "gantt_holidays",
    "gantt_add_holiday",
    "gantt_remove_holiday",
    # Reference list tools
    "gantt_master_list",
    "gantt_master_add",
    "gantt_master_remove",
    # Transfer tools
    "gantt_export_csv",
    "gantt_import_csv",
]
