"""
Web app build and Cordova packaging command.
"""
import click

from app_scripts.cli.common import help_option, pass_cli_context
from app_scripts.core.models import PackageOptions
from app_scripts.services.packager import build_and_package


@click.command(
    'build-and-package',
    context_settings={'ignore_unknown_options': True}
)
@click.argument('args', nargs=-1, type=click.UNPROCESSED)
@click.option('--fast', is_flag=True, help='Skip Angular app rebuild')
@click.option('--dev', is_flag=True, help='Build Angular app in dev mode (default is prod)')
@click.option('-e', '--env', help='Target environment for the build script')
@click.option('--device', is_flag=True, help='Deploy Cordova build to a device')
@click.option('--emulate', is_flag=True, help='Deploy Cordova build to an emulator')
@click.option('--debug', is_flag=True, help='Create a Cordova debug build')
@click.option('--release', is_flag=True, help='Create a Cordova release build')
@click.option(
    '--copy',
    type=click.Path(file_okay=False),
    help='Copy built apps to path (only works with build)'
)
@click.option('--yarn', is_flag=True, help='Use Yarn instead of NPM to run the build script')
@help_option
@pass_cli_context
def build_and_package_command(cli_ctx, args, fast, dev, env, device, emulate, debug, release, copy, yarn):
    """Rebuild the app and execute a Cordova command."""
    options = PackageOptions(
        args=tuple(args),
        fast=fast,
        dev=dev,
        env=env,
        device=device,
        emulate=emulate,
        debug=debug,
        release=release,
        copy=copy,
        yarn=yarn,
    )
    copied = build_and_package(options, cli_ctx.project_dir)
    if copied:
        click.echo(f"Apps copied to {click.style(copy, fg='cyan')} folder")
