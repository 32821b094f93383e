"""Add subcommand for mcp-watch CLI."""

from pathlib import Path
from sys import exit
from typing import Optional

from click import argument, option, pass_context

from . import main, github_client
from .. import log
from ..paths import paths
from ..storage import append_status_entry
from ..targets import DEFAULT_DESCRIPTION, parse_repo
from ..watch import check_github_auth, optimize_notifications, setup_watch


@main.command(context_settings={"allow_extra_args": True})
@pass_context
@option("-f", "--status-file", help="Markdown status file to record the repo in (default: $MCP_WATCH_STATUS_FILE or ~/mcp-servers/.ai-docs/context/server-health-status.md)")
@argument("repo", required=False)
@argument("description", required=False, default=DEFAULT_DESCRIPTION)
def add(ctx, repo: Optional[str], description: str, status_file: Optional[str]):
    """Watch one more repository, and record it in the status file.

    REPO is in 'owner/name' format. The status file is only appended to if it already exists.
    """
    usage = f"Usage: {ctx.parent.command_path} add <owner/repo> [description]"
    if not repo:
        log.error(usage)
        exit(1)
    try:
        repo = parse_repo(repo)
    except ValueError as e:
        log.error(str(e))
        log.error(usage)
        exit(1)

    log.info(f"🔔 Setting up watch for new repository: {repo}")
    client = github_client(ctx)
    check_github_auth(client)

    if not setup_watch(client, repo, description):
        log.error(f"❌ Failed to set watch for {repo}")
        exit(1)

    optimize_notifications(repo)
    log.info(f"✅ Watch setup complete for {repo}")

    status_path = Path(status_file).expanduser() if status_file else paths.status_file
    if append_status_entry(repo, status_path):
        log.info(f"📝 Added to {status_path.name}")
