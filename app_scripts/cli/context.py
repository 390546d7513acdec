"""
CLI context shared by all commands.
"""
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class CLIContext:
    """
    Shared context for CLI commands.

    Attributes:
        verbose: Enable verbose logging output
        project_dir: Root folder of the app project commands operate on
    """
    verbose: bool = False
    project_dir: Path = field(default_factory=Path.cwd)
