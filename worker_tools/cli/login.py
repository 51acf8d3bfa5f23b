import sys

import click

from ..api import WorkersSession
from ..command.context import CommandContext
from ..common.config.environment import demand_env_var_as_bool, get_env_var
from ..config import ProjectConfig, config
from ..contract import WorkerIdentity
from ..exceptions import FatalError, UserError, WorkersException
from .utils import GLOBAL_OPTIONS, click_text, get_options, param_callback, persist_option

MISSING_NAME = (
    "Required Worker name missing. Please specify the Worker name in wrangler.toml, "
    "or pass it as an argument with `--name <worker-name>`"
)


class FatalClickException(click.ClickException):
    exit_code = 3

    def format_message(self):
        return f"Internal error: {self.message}"


def print_login_help(ctx, param, value):
    if not value or ctx.resilient_parsing:
        return
    click_text('''
@Authenticating against the Workers API
--------------------------------------

Every command needs an API token and the account that owns the Worker. Both
can be supplied on the command line or by setting the environment variables
given in parentheses below.

If no API token is given and the terminal is interactive, the token is
prompted for with hidden input. It is never saved to disk.

If no account id is given, the account_id entry of the configuration file is
used, then the account_id saved in the user configuration. Failing that, the
accounts visible to the token are listed; a single account is used directly,
otherwise one must be chosen interactively.

@Options:
''')
    for option, help in _login_help.items():
        text = f'--{option}'
        spacer = ' ' * (20 - len(text))
        text = f'{text}{spacer}{help}'
        click.echo(click.wrap_text(text, initial_indent='  ', subsequent_indent=' ' * 22))
    ctx.exit()


_login_help = {
    'api-token': 'API token with Workers Scripts edit permission. (CLOUDFLARE_API_TOKEN)',
    'account-id': 'Account that owns the Worker. (CLOUDFLARE_ACCOUNT_ID)',
}


_login_options = [
    click.option('--api-token', type=str, default=None, expose_value=False, callback=param_callback, envvar='CLOUDFLARE_API_TOKEN', hidden=True),
    click.option('--account-id', type=str, default=None, expose_value=False, callback=param_callback, envvar='CLOUDFLARE_ACCOUNT_ID', hidden=True),
    click.option('--help-login', is_flag=True, callback=print_login_help, expose_value=False, is_eager=True,
                 help='Get help on the global authentication options.'),
]


GLOBAL_OPTIONS.extend(_login_options)


def is_interactive():
    return sys.stdin.isatty()


def project_config():
    ctx = click.get_current_context()
    obj = ctx.ensure_object(dict)
    if 'project_config' not in obj:
        obj['project_config'] = ProjectConfig.read(get_options().get('config'))
    return obj['project_config']


def get_script_name(name=None):
    '''Worker name for the selected environment, from --name or the configuration file.'''
    env = get_options().get('env')
    project = project_config()
    if name:
        return f'{name}-{env}' if env and project.legacy_env else name
    script_name = project.name(env)
    if not script_name:
        raise UserError(MISSING_NAME)
    return script_name


def get_api_token():
    opts = get_options()
    token = opts.get('api_token')
    if token:
        return token
    if not is_interactive():
        raise UserError('No API token found. Set CLOUDFLARE_API_TOKEN or pass --api-token.')
    token = click.prompt('API token', hide_input=True, type=str, err=True)
    persist_option('api_token', token)
    return token


def require_auth(session):
    '''Resolve the account id, asking the API which accounts the token can see if needed.'''
    opts = get_options()
    account_id = opts.get('account_id') or project_config().account_id(opts.get('env')) or config.get('account_id')
    if account_id:
        return account_id
    accounts = session.account_list()
    if len(accounts) == 1:
        account_id = accounts[0]['id']
    elif not accounts:
        raise UserError('No accounts are available to this API token.')
    elif not is_interactive():
        raise UserError(
            'More than one account available but unable to select one in non-interactive mode. '
            'Please set the appropriate `account_id` in your wrangler.toml file, or assign it to '
            'the `CLOUDFLARE_ACCOUNT_ID` environment variable.'
        )
    else:
        for index, account in enumerate(accounts, 1):
            click.echo(f'  {index}. {account["name"]} ({account["id"]})', err=True)
        choice = click.prompt('Select an account', type=click.IntRange(1, len(accounts)), err=True)
        account_id = accounts[choice - 1]["id"]
        config.set('account_id', account_id)
    persist_option('account_id', account_id)
    return account_id


def get_send_metrics():
    if get_env_var('WORKERS_SEND_METRICS') is not None:
        return demand_env_var_as_bool('WORKERS_SEND_METRICS')
    send_metrics = project_config().send_metrics
    if send_metrics is None:
        send_metrics = config.get('send_metrics', False)
    return bool(send_metrics)


SESSIONS = {}


def workers_connect():
    token = get_api_token()
    conn = SESSIONS.get(token)
    if conn is None:
        try:
            conn = WorkersSession(token)
        except ValueError as e:
            raise click.ClickException(str(e))
        SESSIONS[token] = conn
    return conn


def command_context(name=None):
    opts = get_options()
    script_name = get_script_name(name)
    session = workers_connect()
    identity = WorkerIdentity(
        account_id=require_auth(session),
        script_name=script_name,
        environment=opts.get('env'),
        legacy_env=project_config().legacy_env,
    )
    return CommandContext(
        session=session,
        identity=identity,
        interactive=is_interactive(),
        send_metrics=get_send_metrics(),
        yes=bool(opts.get('yes')),
    )


def workers_call(command, *args, name=None):
    '''Resolve the Worker and credentials, run the command, and map errors to click exceptions.'''
    try:
        context = command_context(name)
        return command.execute(*args, context=context)
    except FatalError as e:
        raise FatalClickException(str(e))
    except WorkersException as e:
        raise click.ClickException(str(e))
