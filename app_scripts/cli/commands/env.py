"""
Environment export command.
"""
import click

from app_scripts.cli.common import help_option, output_option, pass_cli_context
from app_scripts.core.config import DEFAULT_ENV_FILE, get_env_file
from app_scripts.services.env_export import export_env


@click.command('export-env')
@click.argument('names', nargs=-1)
@output_option(default=get_env_file, show_default=DEFAULT_ENV_FILE)
@help_option
@pass_cli_context
def export_env_command(cli_ctx, names, output):
    """Export environment variables to a JSON file."""
    output_path = cli_ctx.project_dir / output
    env = export_env(names, output_path)
    if cli_ctx.verbose:
        click.echo(f"Exported {len(env)} variables to {output_path}")
