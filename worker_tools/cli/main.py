import logging
import sys

import click

from .._version import get_versions
from .commands.versions import versions
from .utils import global_options

version = get_versions().get('version', 'UNKNOWN')


@click.group(epilog='Type "workers <command> --help" for help on a specific command.')
@click.version_option(version=version, message="%(prog)s %(version)s")
@global_options
def cli():
    pass


cli.add_command(versions)


def main():
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)
    cli(obj={})


if __name__ == '__main__':
    sys.exit(main())
