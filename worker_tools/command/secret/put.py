import logging
from typing import Optional

import click
from pydantic import ValidationError

from worker_tools.contract import Deployment, SecretPutRequest, VersionDetails, VersionUploadResponse
from worker_tools.exceptions import UnexpectedResponseError, UserError
from worker_tools.metrics import get_metrics_usage_headers
from worker_tools.secret import read_secret_value
from worker_tools.versions.builder import build_worker, create_worker_upload_form
from worker_tools.versions.content import parse_modules

from ..abstract_command import AbstractCommand
from ..context import CommandContext

logger = logging.getLogger(__name__)


class SecretPutCommand(AbstractCommand):
    """Create or update a secret by uploading a copy of the latest version."""

    def execute(self, request: SecretPutRequest, context: CommandContext) -> VersionUploadResponse:
        if not request.key:
            raise UserError("Required secret key missing. Please pass it as an argument: `put <key>`")

        session, ident = context.session, context.identity

        # The API lists versions newest first.
        versions = session.version_list(ident)
        if not versions:
            raise UserError(
                "There are currently no uploaded versions of this Worker - "
                "please upload a version before uploading a secret."
            )
        latest = versions[0]

        value = read_secret_value(context.interactive, context.stdin)
        env = f" ({ident.environment})" if ident.environment else ""
        click.echo(f'🌀 Creating the secret for the Worker "{ident.script_name}"{env}')

        details = session.version_info(ident, latest.id)
        click.echo(branch_message(details, self._latest_deployment(context)))

        sources = parse_modules(session, ident, latest.id)
        settings = session.script_settings(ident)

        worker = build_worker(
            ident.script_name,
            details,
            settings,
            sources,
            key=request.key,
            value=value,
            message=request.message,
            tag=request.tag,
        )
        result = session.version_upload(
            ident,
            create_worker_upload_form(worker),
            headers=get_metrics_usage_headers(context.send_metrics),
        )
        click.echo(f"\nWorker Version ID: {result.id}")
        return result

    @staticmethod
    def _latest_deployment(context: CommandContext) -> Optional[Deployment]:
        try:
            deployments = context.session.deployment_list(context.identity)
        except (UnexpectedResponseError, ValidationError) as e:
            logger.warning(f"Could not fetch deployments: {e}")
            return None
        return deployments[0] if deployments else None


def branch_message(details: VersionDetails, deployment: Optional[Deployment]) -> str:
    tag = ""
    if details.annotations is not None and details.annotations.tag:
        tag = f" ({details.annotations.tag})"
    traffic = deployment.traffic_for(details.id) if deployment is not None else None
    if traffic is None:
        state = "not currently deployed"
    else:
        state = f"deployed to {traffic.percentage:g}%"
    return f"Branching off version {details.id}{tag} which is {state}"
