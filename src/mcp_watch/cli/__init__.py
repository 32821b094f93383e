"""Command-line interface for mcp-watch."""

from sys import exit
from typing import Optional

from click import Group, UsageError, echo, group, option, pass_context

from .. import log
from ..auth import get_github_token
from ..github import GitHubClient


class WatchGroup(Group):
    """Group that turns usage errors (unknown commands or options) into exit status 1, before running anything.

    An empty command name runs `main`, like no command at all.
    """

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except UsageError as e:
            usage_error(ctx, e.format_message())

    def resolve_command(self, ctx, args):
        if args and args[0] == "":
            args = ["main", *args[1:]]
        try:
            return super().resolve_command(ctx, args)
        except UsageError:
            usage_error(ctx, f"Unknown command: {args[0]}")

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except UsageError as e:
            usage_error(ctx, e.format_message())


def usage_error(ctx, msg: str):
    log.error(msg)
    echo(f"See '{ctx.find_root().info_name} help' for usage.")
    exit(1)


@group(cls=WatchGroup, invoke_without_command=True, context_settings={"help_option_names": ["-h", "--help"]})
@option("-t", "--token", help="GitHub API token (overrides auto-detection)")
@pass_context
def main(ctx, token: Optional[str]):
    """mcp-watch - Watch MCP server repositories on GitHub.

    With no command, watches every built-in repository (same as `main`).
    """
    ctx.ensure_object(dict)
    ctx.obj["token"] = token

    if ctx.invoked_subcommand is None:
        ctx.invoke(batch.watch_all)


def github_client(ctx) -> GitHubClient:
    """Build a client from the --token option, or auto-detect a token."""
    token = ctx.obj.get("token")
    if token is None:
        token = get_github_token()
    return GitHubClient(token)


@main.command("help", context_settings={"allow_extra_args": True})
@pass_context
def usage(ctx):
    """Show this message and exit."""
    echo(ctx.parent.get_help())


# Import subcommands to register them with the main group
from . import add, batch  # noqa: E402


if __name__ == "__main__":
    main()
