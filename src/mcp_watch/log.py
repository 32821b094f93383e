"""Colored status output."""

from click import echo, style


def info(msg: str = ""):
    echo(f"{style('[INFO]', fg='green')} {msg}")


def warn(msg: str):
    echo(f"{style('[WARN]', fg='yellow', bold=True)} {msg}")


def error(msg: str):
    echo(f"{style('[ERROR]', fg='red')} {msg}")
