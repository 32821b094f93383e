"""Auth check, subscription, and notification guidance for a single repository."""

from sys import exit

import requests

from . import log
from .github import GitHubClient


def check_github_auth(client: GitHubClient):
    """Exit the process unless ``client`` has a valid GitHub session."""
    log.info("Checking GitHub authentication...")
    if not client.is_authenticated():
        log.error("GitHub authentication required. Run 'gh auth login' first.")
        exit(1)
    log.info("GitHub authentication OK")


def setup_watch(client: GitHubClient, repo: str, description: str) -> bool:
    """Subscribe to ``repo``; return whether it succeeded."""
    log.info(f"Configuring: {repo} ({description})")
    try:
        client.set_subscription(repo, subscribed=True, ignored=False)
    except requests.RequestException:
        log.warn(f"Failed to set watch: {repo}")
        return False
    log.info(f"✅ Watch set: {repo}")
    return True


def optimize_notifications(repo: str):
    """Point the user at the web UI; the API has no per-repo release/security-alert notification switches."""
    log.info(f"Optimizing notifications: {repo}")
    log.info(f"ℹ️  Fine-tune notifications manually at https://github.com/{repo}")
    log.info("   Recommended: Custom → ✅ Releases ✅ Security alerts")
