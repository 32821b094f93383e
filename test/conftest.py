import pytest
import requests
from click.testing import CliRunner

import mcp_watch.cli as cli_module


class FakeClient:
    """Stands in for GitHubClient, recording auth checks and subscription requests."""

    def __init__(self, token="test-token", authenticated=True, failing=()):
        self.token = token
        self.authenticated = authenticated
        self.failing = set(failing)
        self.auth_checks = 0
        self.requests = []

    def is_authenticated(self):
        self.auth_checks += 1
        return self.authenticated

    def set_subscription(self, repo, subscribed=True, ignored=False):
        self.requests.append((repo, subscribed, ignored))
        if repo in self.failing:
            raise requests.HTTPError(f"404 Client Error: Not Found for url: https://api.github.com/repos/{repo}/subscription")
        return {"subscribed": subscribed, "ignored": ignored, "url": f"https://api.github.com/repos/{repo}/subscription"}


@pytest.fixture
def client():
    return FakeClient()


@pytest.fixture
def status_file(tmp_path, monkeypatch):
    """Point the default status file at a (not yet existing) temp path."""
    path = tmp_path / "server-health-status.md"
    monkeypatch.setenv("MCP_WATCH_STATUS_FILE", str(path))
    return path


@pytest.fixture
def run(client, status_file, monkeypatch):
    """Invoke the CLI against ``client``, returning the click Result."""
    tokens = []
    monkeypatch.setattr(cli_module, "get_github_token", lambda: "test-token")

    def make_client(token):
        tokens.append(token)
        return client

    monkeypatch.setattr(cli_module, "GitHubClient", make_client)

    def invoke(*args):
        return CliRunner().invoke(cli_module.main, list(args))

    invoke.tokens = tokens
    return invoke
