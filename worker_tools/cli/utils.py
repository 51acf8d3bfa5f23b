import logging

import click
from click.core import ParameterSource

from .._version import get_versions

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def param_callback(ctx, param, value):
    if value in (None, ()):
        return
    name = param.name.lower().replace("-", "_")
    # values taken from environment variables yield to any explicit option
    if ctx.get_parameter_source(param.name) == ParameterSource.ENVIRONMENT:
        add_default(name, value)
    else:
        add_param(name, value)


def log_level_callback(ctx, param, value):
    if value is None:
        return
    logging.getLogger().setLevel(value.upper())


GLOBAL_OPTIONS = [
    click.option("--env", "-e", type=str, default=None, expose_value=False, callback=param_callback, envvar="WORKERS_ENV",
                 help="Environment to use for operations and the configuration file."),
    click.option("--config", "-c", type=click.Path(dir_okay=False), default=None, expose_value=False, callback=param_callback,
                 help="Path to the configuration file (default: ./wrangler.toml)."),
    click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False), default=None, expose_value=False,
                 callback=log_level_callback, envvar="WORKERS_LOG_LEVEL", hidden=True),
]


def global_options(func):
    for option in reversed(GLOBAL_OPTIONS):
        func = option(func)
    return func


def yes_option(func):
    return click.option(
        "--yes",
        is_flag=True,
        expose_value=False,
        callback=param_callback,
        hidden=False,
        help="Do not ask for confirmation.",
    )(func)


def name_option(func):
    return click.option("--name", type=str, default=None, help="Name of the Worker")(func)


def add_param(param, value):
    ctx = click.get_current_context()
    obj = ctx.ensure_object(dict)
    options = obj.setdefault("options", {})
    if param in options:
        ovalue = options[param]
        if not isinstance(ovalue, bool) and ovalue != value:
            param = param.replace("_", "-")
            raise click.UsageError(f"Conflicting values for --{param}: {ovalue}, {value}")
    options[param] = value


def add_default(param, value):
    ctx = click.get_current_context()
    obj = ctx.ensure_object(dict)
    obj.setdefault("defaults", {}).setdefault(param, value)


def get_options():
    ctx = click.get_current_context()
    obj = ctx.ensure_object(dict)
    options = dict(obj.get("defaults", {}))
    options.update(obj.get("options", {}))
    return options


def persist_option(param, value):
    ctx = click.get_current_context()
    obj = ctx.ensure_object(dict)
    obj.setdefault("options", {})[param] = value
    if "defaults" in obj:
        obj["defaults"][param] = value


def print_banner():
    version = get_versions().get("version", "UNKNOWN")
    text = f"⛅️ workers {version}"
    click.echo(text)
    click.echo("-" * len(text))


def click_text(text):
    def _emit(text):
        if text[0] == "@":
            text = text[1:]
            initial_indent = ""
        else:
            initial_indent = "  "
        click.echo(click.wrap_text(text, initial_indent=initial_indent, subsequent_indent="  "))

    paragraph = ""
    for line in text.splitlines():
        if not line or line.lstrip().startswith("-"):
            if paragraph:
                _emit(paragraph)
                paragraph = ""
            click.echo(line)
        elif paragraph:
            paragraph += " " + line
        else:
            paragraph = line
    if paragraph:
        _emit(paragraph)
