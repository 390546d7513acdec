"""
Web app build and Cordova packaging.

Runs the package manager build script, then the Cordova CLI, and optionally
collects the produced app binaries into a folder.
"""
import glob
import logging
import shutil
import subprocess
from pathlib import Path
from typing import List

from app_scripts.core.config import (
    CORDOVA_FLAGS,
    TELEMETRY_OPT_OUT,
    get_app_build_patterns,
    get_cordova_executable,
)
from app_scripts.core.errors import ExternalToolError, FileOperationError
from app_scripts.core.models import PackageOptions

logger = logging.getLogger(__name__)


def build_command(options: PackageOptions) -> List[str]:
    """Command line for the web app build script."""
    if options.yarn:
        command = ['yarn', 'build', '--']
    else:
        command = ['npm', 'run', 'build', '--']
    if options.dev:
        command.append('--dev')
    if options.env:
        command.extend(['--env', options.env])
    return command


def cordova_command(options: PackageOptions) -> List[str]:
    """Command line for the Cordova CLI."""
    command = [get_cordova_executable(), *options.args, TELEMETRY_OPT_OUT]
    for flag in CORDOVA_FLAGS:
        if getattr(options, flag):
            command.append(f'--{flag}')
    return command


def run_tool(command: List[str], project_dir: Path) -> int:
    """
    Run an external tool to completion with inherited stdio.

    The tool's exit code is returned but not checked.

    Raises
    ---
    ExternalToolError
        If the tool cannot be started
    """
    # npm and yarn are .cmd shims on Windows
    executable = shutil.which(command[0]) or command[0]
    logger.debug("Running: %s", " ".join(command))
    try:
        completed = subprocess.run([executable, *command[1:]], cwd=str(project_dir), check=False)
    except OSError as e:
        raise ExternalToolError(f"Error running {command[0]}", e) from e
    if completed.returncode != 0:
        logger.debug("%s exited with code %d", command[0], completed.returncode)
    return completed.returncode


def copy_app_builds(project_dir: Path, dest: str, release: bool = False) -> List[Path]:
    """
    Copy packaged APK and IPA files into a folder.

    The destination is created first, even if nothing is found to copy.

    Raises
    ---
    FileOperationError
        If the destination cannot be created or a file cannot be copied
    ExternalToolError
        If no app builds are found for any platform
    """
    dest_path = project_dir / dest
    try:
        dest_path.mkdir(parents=True, exist_ok=True)
        copied = []
        for pattern in get_app_build_patterns(project_dir, release):
            for match in sorted(glob.glob(pattern)):
                source = Path(match)
                if not source.is_file():
                    continue
                shutil.copy2(source, dest_path / source.name)
                copied.append(dest_path / source.name)
    except OSError as e:
        raise FileOperationError("Error during apps copy", e) from e

    if not copied:
        raise ExternalToolError("Error during apps copy: No app builds found")
    return copied


def build_and_package(options: PackageOptions, project_dir: Path) -> List[Path]:
    """
    Rebuild the web app (unless fast) and run Cordova.

    Returns
    ----
    List[Path]
        Copied app builds, empty when no copy was requested
    """
    if not options.fast:
        run_tool(build_command(options), project_dir)

    run_tool(cordova_command(options), project_dir)

    if options.command == 'build' and options.copy:
        return copy_app_builds(project_dir, options.copy, options.release)
    return []
