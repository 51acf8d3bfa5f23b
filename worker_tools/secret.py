""" Reading secret values from the terminal or a pipe """

import sys
from typing import Optional, TextIO

import click


def trim_trailing_whitespace(value: str) -> str:
    return value.rstrip()


def read_from_stdin(stream: Optional[TextIO] = None) -> str:
    return (stream or sys.stdin).read()


def read_secret_value(interactive: bool, stream: Optional[TextIO] = None) -> str:
    """
    Obtain the plaintext value of a secret.

    Parameters
    ----------
    interactive: bool
        Prompt with masked input when True, otherwise consume the whole input stream.
    stream: TextIO | None
        The non-interactive source, standard input by default.

    Returns
    -------
        The value with trailing whitespace and newlines removed. Leading whitespace is kept.
    """

    if interactive:
        value = click.prompt("Enter a secret value", hide_input=True, err=True)
    else:
        value = read_from_stdin(stream)
    return trim_trailing_whitespace(value)
