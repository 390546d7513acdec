"""
Option values passed from CLI commands to services.

Built once per invocation from parsed arguments and never mutated.
"""
from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class PackageOptions:
    """Options for the build-and-package command."""
    args: Tuple[str, ...] = field(default_factory=tuple)
    fast: bool = False
    dev: bool = False
    env: Optional[str] = None
    device: bool = False
    emulate: bool = False
    debug: bool = False
    release: bool = False
    copy: Optional[str] = None
    yarn: bool = False

    @property
    def command(self) -> Optional[str]:
        """First Cordova argument (e.g. ``build``, ``run``)."""
        return self.args[0] if self.args else None


@dataclass(frozen=True)
class CleanOptions:
    """Options for the clean command."""
    cordova: bool = False
    dist: bool = False
    path: Optional[str] = None

    def resolved(self) -> "CleanOptions":
        """Apply the default scope: Cordova and dist folders when nothing is selected."""
        if not (self.cordova or self.dist or self.path):
            return CleanOptions(cordova=True, dist=True)
        return self
