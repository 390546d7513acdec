"""
Click-based CLI for app support scripts.

This module provides the main Click group and entry point.
Commands are organized in the commands/ subpackage.
"""
import click
import logging
import sys
from pathlib import Path

from app_scripts import __version__
from .common import APP_NAME, help_option, show_help
from .context import CLIContext

# Configure logging format
logging.basicConfig(
    level=logging.INFO,
    format='%(message)s'
)


class ScriptsGroup(click.Group):
    """Group that shows the short help for unknown commands or options instead of a usage error."""

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except click.NoSuchOption:
            show_help()
            ctx.exit(1)

    def resolve_command(self, ctx, args):
        cmd_name = click.utils.make_str(args[0])
        if self.get_command(ctx, cmd_name) is None and not ctx.resilient_parsing:
            show_help()
            ctx.exit(1)
        return super().resolve_command(ctx, args)


@click.group(
    cls=ScriptsGroup,
    invoke_without_command=True,
    context_settings={'help_option_names': []}
)
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option(
    '-C', '--cwd',
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Project folder to run in (default: current directory)'
)
@click.version_option(__version__, prog_name=APP_NAME)
@help_option
@click.pass_context
def cli(ctx, verbose, cwd):
    """
    App support scripts - build helpers for hybrid Angular/Cordova apps.
    """
    ctx.obj = CLIContext(verbose=verbose, project_dir=cwd or Path.cwd())

    # Configure logging level based on verbosity
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if ctx.invoked_subcommand is None:
        show_help()
        ctx.exit(1)


from .commands.env import export_env_command
from .commands.package import build_and_package_command
from .commands.clean import clean_command
from .commands.unpin import unpin_dependency_command

cli.add_command(export_env_command)
cli.add_command(build_and_package_command)
cli.add_command(clean_command)
cli.add_command(unpin_dependency_command)


def main():
    """
    Main entry point for the CLI.

    Script errors are reported by Click; anything unexpected is reported here.
    """
    try:
        cli(prog_name=APP_NAME)
    except Exception as e:
        click.secho(f"Error: {e}", fg='red', err=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
