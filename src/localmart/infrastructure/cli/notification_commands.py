"""CLI command for reading the notifications sent to an account."""

from __future__ import annotations

import click

from localmart.infrastructure.bootstrap import notification_outbox
from localmart.infrastructure.cli.common import HANDLED_ERRORS, caller_option, current_caller


@click.command("notifications")
@caller_option
def notifications(email: str) -> None:
    """Show notifications sent to you, oldest first."""
    caller = current_caller(email)

    try:
        entries = notification_outbox().list_for(caller.user_id)
    except HANDLED_ERRORS as exc:
        raise click.ClickException(str(exc))

    if not entries:
        click.echo("No notifications.")
        return
    for entry in entries:
        details = ", ".join(f"{k}={v}" for k, v in entry.payload.items())
        click.echo(f"{entry.published_at}  {entry.event}  {details}")
