"""MCP tool definitions for the user, version and priority lists."""

import json

from mcp.types import ToolAnnotations

from gantt_mcp.enums import MasterKind, ResponseFormat
from gantt_mcp.errors import InvalidOperation, NotFound
from gantt_mcp.models.inputs import MasterAddInput, MasterListInput, MasterRemoveInput
from gantt_mcp.server import get_store, mcp, persist
from gantt_mcp.utils.formatters import _format_reference_items

TITLES = {
    MasterKind.USER: "Users",
    MasterKind.VERSION: "Versions",
    MasterKind.PRIORITY: "Priorities",
}


@mcp.tool(
    name="gantt_master_list",
    annotations=ToolAnnotations(
        title="List Users, Versions or Priorities",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def gantt_master_list(params: MasterListInput) -> str:
    """
    List one of the project's reference lists.

    USE THIS WHEN:
    - Looking up the user id to assign a task to
    - Checking which version or priority is the default for new tasks

    Args:
        params: MasterListInput with kind and response_format

    Returns:
        Markdown bullets, or JSON with camelCase keys
    """
    items = get_store().reference_items(params.kind)
    if params.response_format == ResponseFormat.JSON:
        return json.dumps([i.model_dump(by_alias=True) for i in items], indent=2)
    return _format_reference_items(items, TITLES[params.kind])


@mcp.tool(
    name="gantt_master_add",
    annotations=ToolAnnotations(
        title="Add User, Version or Priority",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def gantt_master_add(params: MasterAddInput) -> str:
    """
    Add a user, version or priority. The id is generated (u3, v3, p5, ...).

    Examples:
        - Add an assignee: kind="user", name="Carol"
        - New default release: kind="version", name="v2.0.0", is_default=True

    Args:
        params: MasterAddInput with kind, name and optional color/is_default

    Returns:
        Confirmation with the new id
    """
    store = get_store()
    try:
        item = store.add_reference_item(params.kind, params.name, color=params.color, is_default=params.is_default)
    except InvalidOperation as e:
        return f"Error: {e}"

    persist()
    suffix = " and made it the default" if params.is_default else ""
    return f"Added {params.kind.value} {item.id}: {item.name}{suffix}."


@mcp.tool(
    name="gantt_master_remove",
    annotations=ToolAnnotations(
        title="Remove User, Version or Priority",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def gantt_master_remove(params: MasterRemoveInput) -> str:
    """
    Remove a user, version or priority from its list.

    Tasks that still reference it are left as they are; the response says
    how many there are so they can be reassigned.

    Args:
        params: MasterRemoveInput with kind and item_id

    Returns:
        Confirmation, with a warning when tasks still reference the entry
    """
    store = get_store()
    try:
        item, in_use = store.remove_reference_item(params.kind, params.item_id)
    except NotFound as e:
        return f"Error: {e}.\nTip: Use gantt_master_list with kind='{params.kind.value}' to see valid ids."

    persist()
    message = f"Removed {params.kind.value} {item.id}: {item.name}."
    if in_use:
        message += f"\nWarning: {in_use} task(s) still reference '{item.id}'."
    return message
