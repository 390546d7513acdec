"""
Export environment variables to a JSON file.
"""
import json
import logging
import os
from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional, Union

from app_scripts.core.errors import FileOperationError, MissingArgumentsError

logger = logging.getLogger(__name__)


def snapshot_env(names: Iterable[str], environ: Optional[Mapping[str, str]] = None) -> Dict[str, Optional[str]]:
    """
    Look up each variable name in the environment.

    Unset variables map to None so every requested name appears as a key.

    Parameters
    ----
    names : Iterable[str]
        Variable names to look up
    environ : Mapping[str, str], optional
        Environment to read from (default: os.environ)

    Returns
    ----
    Dict[str, Optional[str]]
        Mapping of name to value
    """
    if environ is None:
        environ = os.environ
    return {name: environ.get(name) for name in names}


def export_env(names: Iterable[str], output_file: Union[str, Path]) -> Dict[str, Optional[str]]:
    """
    Write a JSON snapshot of the given environment variables.

    Raises
    ---
    MissingArgumentsError
        If no variable names are given
    FileOperationError
        If the output file cannot be written
    """
    names = list(names)
    if not names:
        raise MissingArgumentsError()

    env = snapshot_env(names)
    missing = [name for name, value in env.items() if value is None]
    if missing:
        logger.debug("Unset variables exported as null: %s", ", ".join(missing))

    try:
        with open(output_file, 'w', encoding='utf-8') as f:
            json.dump(env, f, separators=(',', ':'))
    except OSError as e:
        raise FileOperationError("Error writing file", e) from e

    logger.debug("Wrote %d variables to %s", len(env), output_file)
    return env
