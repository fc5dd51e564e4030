"""Providers for the installed package registry."""

import logging
import subprocess
from typing import Protocol

from fix_imports.errors import RegistryUnavailable
from fix_imports.parse_registry_dump import parse_registry_dump

logger = logging.getLogger(__name__)


class Registry(Protocol):
    """Read-only, blocking view of the installed packages."""

    def dump(self) -> str:
        """Return the ``name``/``exposed``/``exposed-modules`` listing."""
        ...

    def find_module(self, module: str) -> list[str]:
        """Return the names of the packages exposing exactly ``module``."""
        ...


class GhcPkgRegistry:
    """Registry backed by the ``ghc-pkg`` command."""

    def __init__(self, executable: str = "ghc-pkg") -> None:
        """Use the given ``ghc-pkg`` executable."""
        self.executable = executable

    def _run(self, args: list[str]) -> str:
        cmd = [self.executable, *args]
        logger.debug("running: %s", " ".join(cmd))
        try:
            proc = subprocess.run(cmd, check=True, capture_output=True, text=True)
        except FileNotFoundError as e:
            msg = f"{self.executable} not found"
            raise RegistryUnavailable(msg) from e
        except subprocess.CalledProcessError as e:
            msg = f"{' '.join(cmd)} failed: {e.stderr.strip()}"
            raise RegistryUnavailable(msg) from e
        return proc.stdout

    def dump(self) -> str:
        """Return the listing for every package in every package db."""
        return self._run(["field", "*", "name,exposed,exposed-modules"])

    def find_module(self, module: str) -> list[str]:
        """Return the packages exposing ``module``, without versions."""
        # find-module exits non-zero when nothing matches.
        cmd = [self.executable, "--simple-output", "find-module", module]
        try:
            proc = subprocess.run(cmd, capture_output=True, text=True)
        except FileNotFoundError as e:
            msg = f"{self.executable} not found"
            raise RegistryUnavailable(msg) from e
        return [_strip_version(p) for p in proc.stdout.split()]


def _strip_version(package_id: str) -> str:
    """Turn ``containers-0.6.7`` into ``containers``."""
    name, sep, version = package_id.rpartition("-")
    if sep and version[:1].isdigit():
        return name
    return package_id


class SnapshotRegistry:
    """Registry serving a fixed listing, e.g. a saved ``ghc-pkg`` dump."""

    def __init__(self, text: str) -> None:
        """Serve ``text`` as the registry listing."""
        self.text = text

    def dump(self) -> str:
        """Return the stored listing."""
        return self.text

    def find_module(self, module: str) -> list[str]:
        """Return the exposed packages whose module list includes ``module``."""
        _, packages = parse_registry_dump(self.text)
        return [name for name, modules in packages if module in modules]
