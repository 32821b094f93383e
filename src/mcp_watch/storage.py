"""Status file updates."""

from pathlib import Path

STATUS_NOTE = "Custom (releases + security alerts)"


def format_status_entry(repo: str) -> str:
    """Format a checklist line for a watched repository."""
    return f"- [ ] `https://github.com/{repo}` - {STATUS_NOTE}"


def append_status_entry(repo: str, file_path: Path) -> bool:
    """Append a checklist line for ``repo`` to an existing status file.

    The file is never created; returns False (and writes nothing) if it doesn't exist.
    Existing content is left untouched, and no deduplication is done.
    """
    if not file_path.is_file():
        return False

    # Don't glue the entry onto an unterminated last line
    with file_path.open("rb") as f:
        f.seek(0, 2)
        needs_newline = False
        if f.tell():
            f.seek(-1, 2)
            needs_newline = f.read(1) != b"\n"

    with file_path.open("a") as f:
        if needs_newline:
            f.write("\n")
        f.write(format_status_entry(repo) + "\n")
    return True
