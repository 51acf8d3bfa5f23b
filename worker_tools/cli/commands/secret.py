import json

import click

from ...command.secret.delete import SecretDeleteCommand
from ...command.secret.list import SecretListCommand
from ...command.secret.put import SecretPutCommand
from ...contract import SecretDeleteRequest, SecretPutRequest
from ..login import workers_call
from ..utils import global_options, name_option, print_banner, yes_option


@click.group(short_help="put, delete, list",
             epilog='Type "workers versions secret <command> --help" for help on a specific command.')
@global_options
def secret():
    """Generate a secret that can be referenced in a Worker."""
    pass


@secret.command()
@click.argument("key", type=str)
@name_option
@click.option("--message", type=str, default=None, help="Description of this deployment (optional)")
@click.option("--tag", type=str, default=None, help="A tag for this version (optional)")
@global_options
def put(key, name, message, tag):
    """Create or update a secret variable for a Worker.

       KEY is the variable name to be accessible in the Worker. The value is
       prompted for, or read from standard input when it is not a terminal.
       A new version of the Worker is created; it is not deployed.
    """
    print_banner()
    workers_call(SecretPutCommand(), SecretPutRequest(key=key, message=message, tag=tag), name=name)


@secret.command()
@click.argument("key", type=str)
@name_option
@yes_option
@global_options
def delete(key, name):
    """Delete a secret variable from a Worker.
       The secret key must match exactly.
    """
    print_banner()
    workers_call(SecretDeleteCommand(), SecretDeleteRequest(key=key), name=name)


@secret.command(name="list")
@name_option
@global_options
def list_(name):
    """List all secrets for a Worker."""
    secrets = workers_call(SecretListCommand(), name=name)
    click.echo(json.dumps(secrets, indent=2))
