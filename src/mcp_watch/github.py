"""GitHub API client for setting repository subscriptions."""

from typing import Any, Dict, Optional

import requests

API_URL = "https://api.github.com"


class GitHubClient:
    """Client for interacting with GitHub API."""

    def __init__(self, token: Optional[str] = None):
        self.token = token
        self.session = requests.Session()
        if token:
            self.session.headers.update({"Authorization": f"token {token}"})
        self.session.headers.update({"Accept": "application/vnd.github.v3+json", "User-Agent": "mcp-watch/0.1.0"})

    def get_user(self) -> Dict[str, Any]:
        """Get the authenticated user."""
        response = self.session.get(f"{API_URL}/user")
        response.raise_for_status()
        return response.json()

    def is_authenticated(self) -> bool:
        """Whether the client holds a token GitHub accepts."""
        if not self.token:
            return False
        try:
            self.get_user()
        except requests.RequestException:
            return False
        return True

    def set_subscription(self, repo: str, subscribed: bool = True, ignored: bool = False) -> Dict[str, Any]:
        """Set the authenticated user's subscription to a repository ("owner/name").

        Raises ``requests.RequestException`` on network errors and non-2xx responses.
        """
        url = f"{API_URL}/repos/{repo}/subscription"
        response = self.session.put(url, json={"subscribed": subscribed, "ignored": ignored})
        response.raise_for_status()
        return response.json()
