"""JSON persistence for project documents."""

import os
import tempfile
from pathlib import Path

from gantt_mcp.models.document import ProjectDocument


def _dump_document(doc: ProjectDocument) -> str:
    """Serialize a document with camelCase task keys and ISO dates."""
    return doc.model_dump_json(indent=2, by_alias=True)


def load_document(path: str | Path) -> ProjectDocument:
    """
    Read a project document.

    Args:
        path: JSON file written by save_document (or by the web app)

    Returns:
        The parsed document, or an empty default document if the file
        does not exist yet
    """
    path = Path(path)
    if not path.exists():
        return ProjectDocument()
    # Exports from spreadsheet tools often carry a BOM
    return ProjectDocument.model_validate_json(path.read_text(encoding="utf-8-sig"))


def save_document(doc: ProjectDocument, path: str | Path) -> None:
    """Write a project document atomically (temp file, then rename)."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(_dump_document(doc))
        os.replace(tmp, path)
    except BaseException:
        Path(tmp).unlink(missing_ok=True)
        raise
