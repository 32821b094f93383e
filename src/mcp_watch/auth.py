"""Authentication utilities for GitHub API."""

import os
from pathlib import Path
from subprocess import CalledProcessError
from typing import Optional

from utz import proc


def get_github_token() -> Optional[str]:
    """Get GitHub token from various sources in priority order.

    Priority order:
    1. GITHUB_TOKEN environment variable
    2. GH_TOKEN environment variable
    3. .token file in current directory
    4. gh CLI token (from gh auth token)

    Returns:
        GitHub token string or None if no token found
    """
    # 1./2. Environment variables
    for var in ("GITHUB_TOKEN", "GH_TOKEN"):
        token = os.getenv(var)
        if token:
            return token

    # 3. .token file
    token_file = Path(".token")
    if token_file.exists():
        token = token_file.read_text().strip()
        if token:
            return token

    # 4. gh CLI token
    try:
        lines = proc.lines("gh", "auth", "token")
    except (CalledProcessError, FileNotFoundError):
        return None  # gh CLI not available or not authenticated
    token = lines[0].strip() if lines else ""
    return token or None
