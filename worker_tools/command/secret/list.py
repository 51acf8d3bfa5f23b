from typing import Any

from worker_tools.metrics import send_metrics_event

from ..abstract_command import AbstractCommand
from ..context import CommandContext


class SecretListCommand(AbstractCommand):
    def execute(self, context: CommandContext) -> Any:
        secrets = context.session.secret_list(context.identity)
        send_metrics_event("list encrypted variables", send_metrics=context.send_metrics)
        return secrets
