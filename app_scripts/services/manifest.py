"""
Patching of installed dependency manifests.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict

from app_scripts.core.config import get_dependency_manifest
from app_scripts.core.errors import FileOperationError

logger = logging.getLogger(__name__)


def unpin_dependency(project_dir: Path, package: str) -> Path:
    """
    Clear the peerDependencies of an installed package.

    Some packages pin their peers to exact versions, which blocks upgrades
    outside their release schedule and floods installs with warnings.

    Parameters
    ----
    project_dir : Path
        Root folder of the app project
    package : str
        Name of the package under node_modules

    Returns
    ----
    Path
        The rewritten manifest

    Raises
    ---
    FileOperationError
        If the manifest cannot be read, parsed or written
    """
    manifest_path = get_dependency_manifest(project_dir, package)
    try:
        with open(manifest_path, 'r', encoding='utf-8') as f:
            manifest: Dict[str, Any] = json.load(f)
        if not isinstance(manifest, dict):
            raise ValueError(f"{manifest_path} does not contain a JSON object")
    except (OSError, ValueError) as e:
        raise FileOperationError(f"Error with {package} package", e) from e

    previous = manifest.get('peerDependencies') or {}
    manifest['peerDependencies'] = {}

    try:
        with open(manifest_path, 'w', encoding='utf-8') as f:
            json.dump(manifest, f, indent=2, ensure_ascii=False)
    except OSError as e:
        raise FileOperationError("Error writing file", e) from e

    logger.debug("Unpinned %d peer dependencies of %s", len(previous), package)
    return manifest_path
