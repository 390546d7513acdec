"""
Configuration and path resolution for app scripts.

Centralizes the project-relative paths and tool names the commands rely on.
Each default can be overridden with an environment variable.
"""
import glob
import os
from pathlib import Path
from typing import List

DEFAULT_ENV_FILE = "src/environments/.env.json"
DEFAULT_ANGULAR_CONFIG = ".angular-cli.json"
DEFAULT_CORDOVA = "cordova"
DEFAULT_UNPIN_PACKAGE = "ionic-angular"

CORDOVA_DIRS = ("platforms", "plugins")
CORDOVA_FLAGS = ("device", "emulate", "debug", "release")
TELEMETRY_OPT_OUT = "--no-telemetry"


def get_env_file() -> str:
    """Default output file for export-env."""
    return os.environ.get("APP_SCRIPTS_ENV_FILE", DEFAULT_ENV_FILE)


def get_angular_config_name() -> str:
    """Name of the Angular CLI config file listing dist folders."""
    return os.environ.get("APP_SCRIPTS_ANGULAR_CONFIG", DEFAULT_ANGULAR_CONFIG)


def get_cordova_executable() -> str:
    return os.environ.get("APP_SCRIPTS_CORDOVA", DEFAULT_CORDOVA)


def get_app_build_patterns(project_dir: Path, release: bool = False) -> List[str]:
    """
    Get glob patterns matching packaged app binaries.

    Cordova Android < 7 writes APKs straight into ``apk/``, newer versions
    add a ``<variant>/`` subfolder, so both locations are searched.

    Parameters
    ----
    project_dir : Path
        Root folder of the app project
    release : bool
        Look for release APKs instead of debug ones

    Returns
    ----
    List[str]
        Android patterns first, then iOS
    """
    variant = "release" if release else "debug"
    # Folder names may contain glob metacharacters
    base = Path(glob.escape(str(project_dir)))
    apk_dir = base / "platforms" / "android" / "build" / "outputs" / "apk"
    ipa_dir = base / "platforms" / "ios" / "build" / "device"
    return [
        str(apk_dir / f"*-{variant}.apk"),
        str(apk_dir / variant / f"*-{variant}.apk"),
        str(ipa_dir / "*.ipa"),
    ]


def get_dependency_manifest(project_dir: Path, package: str) -> Path:
    """Path to an installed dependency's package.json."""
    return project_dir / "node_modules" / package / "package.json"
