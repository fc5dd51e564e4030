"""Exceptions raised by the import fixer."""


class FixImportsError(Exception):
    """Base class for fatal import fixing errors."""


class ResolutionFailure(FixImportsError):
    """One or more modules could not be found locally or in any package."""

    def __init__(self, unresolved: list[str]) -> None:
        """Record the names that could not be resolved."""
        self.unresolved = list(unresolved)
        super().__init__("modules not found: " + ", ".join(self.unresolved))


class RegistryUnavailable(FixImportsError):
    """The package registry could not be queried."""


class RegistryParseError(ValueError):
    """A malformed record in the package registry listing.

    These are never raised out of the index builder; they are collected and
    reported as diagnostics while the rest of the listing is used.
    """
