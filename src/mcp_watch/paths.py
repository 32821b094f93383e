"""Path management for mcp-watch."""

from os import getenv
from pathlib import Path

DEFAULT_STATUS_FILE = Path("mcp-servers", ".ai-docs", "context", "server-health-status.md")


class WatchPaths:
    """Encapsulates mcp-watch file locations."""

    @property
    def status_file(self) -> Path:
        """Markdown checklist that `add` appends newly-watched repos to."""
        path = getenv("MCP_WATCH_STATUS_FILE")
        if path:
            return Path(path).expanduser()
        return Path.home() / DEFAULT_STATUS_FILE


# Global instance for easy access
paths = WatchPaths()
