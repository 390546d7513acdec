"""
Removal of generated build artifacts.
"""
import json
import logging
import shutil
from pathlib import Path
from typing import List

from app_scripts.core.config import CORDOVA_DIRS, get_angular_config_name
from app_scripts.core.errors import FileOperationError
from app_scripts.core.models import CleanOptions

logger = logging.getLogger(__name__)


def remove_path(path: Path) -> bool:
    """
    Remove a file or directory tree.

    Returns False if the path does not exist.

    Raises
    ---
    FileOperationError
        If the removal fails
    """
    if not path.exists() and not path.is_symlink():
        logger.debug("Nothing to remove at %s", path)
        return False
    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()
    except OSError as e:
        raise FileOperationError(f"Error while removing {path}", e) from e
    logger.info("Removed %s", path)
    return True


def read_dist_dirs(project_dir: Path) -> List[str]:
    """
    Read app output folders from the Angular CLI config.

    Raises
    ---
    FileOperationError
        If the config is missing or not valid JSON
    """
    config_name = get_angular_config_name()
    config_path = project_dir / config_name
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config = json.load(f)
        apps = config.get('apps', [])
        if not isinstance(apps, list):
            raise ValueError("'apps' must be a list")
    except (OSError, ValueError, AttributeError) as e:
        raise FileOperationError(f"Error reading {config_name}", e) from e
    return [app['outDir'] for app in apps if isinstance(app, dict) and app.get('outDir')]


def clean(options: CleanOptions, project_dir: Path) -> List[Path]:
    """
    Remove build artifacts selected by the options.

    The first failing removal aborts; earlier removals are kept.

    Returns
    ----
    List[Path]
        Paths that were actually removed
    """
    options = options.resolved()
    removed = []

    def _remove(target):
        path = project_dir / target
        if remove_path(path):
            removed.append(path)

    if options.cordova:
        for name in CORDOVA_DIRS:
            _remove(name)
    if options.dist:
        for out_dir in read_dist_dirs(project_dir):
            _remove(out_dir)
    if options.path:
        _remove(options.path)
    return removed
