"""FastMCP server initialization for Gantt MCP."""

import logging

from mcp.server.fastmcp import FastMCP

from gantt_mcp import config
from gantt_mcp.core.store import TaskStore
from gantt_mcp.utils.storage import load_document, save_document

logger = logging.getLogger(__name__)

# Initialize the MCP server
mcp = FastMCP("gantt_mcp")

# The project this server session edits; opened on first use
_store: TaskStore | None = None


def get_store() -> TaskStore:
    """Return the session's task store, loading the data file on first use."""
    global _store
    if _store is None:
        if config.DATA_FILE:
            _store = TaskStore.from_document(load_document(config.DATA_FILE))
            logger.info("Opened %s (%d task(s))", config.DATA_FILE, len(_store))
        else:
            _store = TaskStore()
    return _store


def set_store(store: TaskStore | None) -> None:
    """Swap the session's store (None re-opens the data file on next use)."""
    global _store
    _store = store


def persist() -> None:
    """Save the session's project if a data file is configured."""
    if _store is not None and config.DATA_FILE:
        save_document(_store.to_document(), config.DATA_FILE)
        logger.debug("Saved %s", config.DATA_FILE)


def run() -> None:
    """Run the MCP server."""
    # stdout carries the MCP stdio transport
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    mcp.run()


if __name__ == "__main__":
    run()
