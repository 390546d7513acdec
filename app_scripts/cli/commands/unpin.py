"""
Dependency unpinning command.
"""
import click

from app_scripts.cli.common import help_option, pass_cli_context
from app_scripts.core.config import DEFAULT_UNPIN_PACKAGE
from app_scripts.services.manifest import unpin_dependency


@click.command('unpin-dependency')
@click.argument('package', default=DEFAULT_UNPIN_PACKAGE)
@help_option
@pass_cli_context
def unpin_dependency_command(cli_ctx, package):
    """Remove peerDependencies from an installed package."""
    manifest_path = unpin_dependency(cli_ctx.project_dir, package)
    click.echo(f"Unpinned {click.style(package, fg='cyan')} peer dependencies in {manifest_path}")
