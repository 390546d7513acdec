"""
Build artifact cleanup command.
"""
import click

from app_scripts.cli.common import help_option, pass_cli_context
from app_scripts.core.models import CleanOptions
from app_scripts.services.cleaner import clean


@click.command()
@click.option('--cordova', is_flag=True, help='Remove only Cordova folders')
@click.option('--dist', is_flag=True, help='Remove only dist folders')
@click.option('--path', type=click.Path(), help='Remove only specified path')
@help_option
@pass_cli_context
def clean_command(cli_ctx, cordova, dist, path):
    """Clean Cordova and dist folders."""
    # Each removal is logged by the service as it happens
    removed = clean(CleanOptions(cordova=cordova, dist=dist, path=path), cli_ctx.project_dir)
    if not removed:
        click.echo("Nothing to clean")
