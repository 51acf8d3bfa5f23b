import logging

import click

from worker_tools.contract import SecretDeleteRequest
from worker_tools.metrics import send_metrics_event

from ..abstract_command import AbstractCommand
from ..context import CommandContext

logger = logging.getLogger(__name__)


class SecretDeleteCommand(AbstractCommand):
    def execute(self, request: SecretDeleteRequest, context: CommandContext) -> bool:
        """Delete the secret once confirmed. Returns False if the user declined."""
        ident = context.identity
        question = f"Are you sure you want to permanently delete the secret {request.key} on the Worker {ident.label}?"
        if not self._confirm(question, context):
            logger.debug(f"Deletion of {request.key} declined")
            return False

        click.echo(f"🌀 Deleting the secret {request.key} on the Worker {ident.label}")
        context.session.secret_delete(ident, request.key)
        send_metrics_event("delete encrypted variable", send_metrics=context.send_metrics)
        click.echo(f"✨ Success! Deleted secret {request.key}")
        return True

    @staticmethod
    def _confirm(question, context):
        if context.yes:
            return True
        if not context.interactive:
            click.echo(f"? {question}\n🤖 Using fallback value in non-interactive context: yes")
            return True
        return click.confirm(question, default=True)
