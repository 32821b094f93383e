"""Batch watch setup for the built-in repository list."""

from sys import exit
from typing import Iterable

from click import echo, option, pass_context

from . import main, github_client
from .. import log
from ..github import GitHubClient
from ..targets import TARGETS, RepoTarget
from ..watch import check_github_auth, optimize_notifications, setup_watch

RULE = "=" * 48


def watch_targets(client: GitHubClient, targets: Iterable[RepoTarget]) -> int:
    """Watch each target in order; return the number that succeeded."""
    success_count = 0
    for target in targets:
        if setup_watch(client, target.repo, target.description):
            optimize_notifications(target.repo)
            success_count += 1
        echo()
    return success_count


@main.command("main", context_settings={"allow_extra_args": True})
@pass_context
@option("--strict", is_flag=True, help="Exit 1 if any repository fails (default: always exit 0)")
def watch_all(ctx, strict: bool):
    """Watch every built-in MCP server repository.

    Per-repository failures are reported but don't change the exit status, unless --strict is passed.
    """
    echo("🔔 GitHub watch setup for MCP server monitoring")
    echo(RULE)

    client = github_client(ctx)
    check_github_auth(client)

    success_count = watch_targets(client, TARGETS)
    total_count = len(TARGETS)

    echo(RULE)
    log.info(f"Setup complete: {success_count}/{total_count} repositories")

    if success_count == total_count:
        log.info("🎉 All watch settings completed!")
        log.info()
        log.info("Next steps:")
        log.info("1. Fine-tune notification settings in each repository")
        log.info("2. Adjust email frequency in GitHub notification settings")
        log.info("3. Run `add` to watch new MCP servers as they come up")
    else:
        log.warn("Some repositories failed to configure. Please check them manually.")
        if strict:
            exit(1)
