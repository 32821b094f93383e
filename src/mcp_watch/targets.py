"""Repositories watched by default."""

import re
from typing import NamedTuple

DEFAULT_DESCRIPTION = "MCP Server"

REPO_RE = re.compile(r"^[^/\s]+/[^/\s]+$")


class RepoTarget(NamedTuple):
    """A repository to watch, with a human-readable description."""
    repo: str
    description: str


# Ordered, so batch runs request and report in a stable order
TARGETS = (
    RepoTarget("modelcontextprotocol/servers", "Official MCP servers repository"),
    RepoTarget("modelcontextprotocol/servers-archived", "Archived servers"),
    RepoTarget("brave/brave-search-mcp-server", "Brave Search MCP"),
    RepoTarget("anaisbetts/mcp-installer", "MCP Installer"),
)


def parse_repo(repo: str) -> str:
    """Validate an 'owner/name' repository identifier.

    Raises:
        ValueError: if ``repo`` isn't of the form 'owner/name'
    """
    repo = repo.strip()
    if not REPO_RE.match(repo):
        raise ValueError(f"Expected 'owner/name', got {repo!r}")
    return repo
