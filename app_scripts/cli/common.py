"""
Common Click decorators and help output for CLI commands.
"""
from typing import Callable

import click

from app_scripts import __version__
from app_scripts.cli.context import CLIContext
from app_scripts.core.config import DEFAULT_ANGULAR_CONFIG, DEFAULT_ENV_FILE

pass_cli_context = click.make_pass_decorator(CLIContext, ensure=True)

APP_NAME = 'app-scripts'

DETAILED_HELP = f"""
{click.style('export-env', fg='blue')} <env_var> [<env_var2> ...] [-o <file.json>]
  Export environment variables to a JSON file.
  Default output file is {click.style(DEFAULT_ENV_FILE, fg='cyan')}
  Unset variables are exported as null.

{click.style('build-and-package', fg='blue')} <command> [options] [-- <cordova_options>]
  Execute Cordova commands.
  Unless the {click.style('--fast', fg='cyan')} option is provided, the Angular app is
  rebuilt before executing the command, using {click.style('npm run build', fg='cyan')}.
  Any accepted Cordova option can be passed through after {click.style('--', fg='cyan')}.

  --fast            Skip Angular app rebuild
  --copy <path>     Copy built apps to path (only works with {click.style('build', fg='cyan')})
  --dev             Build Angular app in dev mode (default is prod)
  -e, --env <name>  Target environment for {click.style('npm run build', fg='cyan')}
  --device          Deploy Cordova build to a device
  --emulate         Deploy Cordova build to an emulator
  --debug           Create a Cordova debug build
  --release         Create a Cordova release build
  --yarn            Use Yarn instead of NPM to run the {click.style('build', fg='cyan')} script

{click.style('clean', fg='blue')} [--cordova] [--dist] [--path <path>]
  Clean Cordova ({click.style('platforms', fg='cyan')}, {click.style('plugins', fg='cyan')}) and dist folders.
  Dist folders are read from {click.style(DEFAULT_ANGULAR_CONFIG, fg='cyan')}.

  --cordova         Remove only Cordova folders
  --dist            Remove only dist folders
  --path <path>     Remove only specified path

{click.style('unpin-dependency', fg='blue')} [<package>]
  Unpin a dependency's peer dependencies (default package: {click.style('ionic-angular', fg='cyan')}).
  This removes {click.style('peerDependencies', fg='cyan')} from the package's {click.style('package.json', fg='cyan')},
  allowing higher dependency versions than the ones it pins without warnings.

Global options:
  -C, --cwd <dir>   Run against another project folder
  -v, --verbose     Enable verbose output
  --version         Show the version and exit
"""


def show_help(detailed: bool = False):
    """Print the banner and usage, with per-command details if requested."""
    click.secho(f"{APP_NAME.upper()} v{__version__}", bold=True)
    click.echo(click.style('APP SUPPORT SCRIPTS', dim=True))
    usage = f"{click.style('Usage', bold=True)} {APP_NAME} {click.style('[command]', fg='blue')} [options]\n"
    if detailed:
        click.echo(usage + DETAILED_HELP, err=True)
    else:
        click.echo(usage + f"Use {click.style('--help', fg='white')} for more info.\n", err=True)


def _help_callback(ctx: click.Context, param: click.Parameter, value: bool):
    if not value or ctx.resilient_parsing:
        return
    show_help(detailed=True)
    ctx.exit(1)


def help_option(f: Callable) -> Callable:
    """
    Add --help flag showing the detailed help for every command.

    Help always terminates with exit code 1.
    """
    return click.option(
        '--help',
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=_help_callback,
        help='Show detailed help and exit'
    )(f)


def output_option(default, show_default=True) -> Callable:
    """
    Add --output/-o option to command.

    Args:
        default: Default output file, or a callable returning it
        show_default: Default shown in --help output

    Returns:
        Decorator function
    """
    def decorator(f: Callable) -> Callable:
        return click.option(
            '-o', '--output',
            type=click.Path(),
            default=default,
            show_default=show_default,
            help='Output file'
        )(f)
    return decorator
