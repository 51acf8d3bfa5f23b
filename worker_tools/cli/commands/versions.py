import click

from ..utils import global_options
from .secret import secret


@click.group(short_help="secret",
             epilog='Type "workers versions <command> --help" for help on a specific command.')
@global_options
def versions():
    """Commands related to Worker versions."""
    pass


versions.add_command(secret)
