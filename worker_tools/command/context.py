from typing import Any

from worker_tools.api import WorkersSession
from worker_tools.contract import BaseModel, WorkerIdentity


class CommandContext(BaseModel):
    """Everything a command needs from the invoking process."""

    session: WorkersSession
    identity: WorkerIdentity
    interactive: bool = False
    send_metrics: bool = False
    yes: bool = False
    stdin: Any = None
