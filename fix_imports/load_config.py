"""Logic for loading the fixer's configuration file."""

import logging
from pathlib import Path
from typing import Any

import yaml

from fix_imports.deep_merge import deep_merge
from fix_imports.models import PriorityConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = ".fix-imports"

DEFAULT_CONFIG: dict[str, Any] = {
    "include": [],
    "import-order-first": [],
    "import-order-last": [],
    "prio-module-high": [],
    "prio-package-high": [
        "base",
        "containers",
        "bytestring",
        "text",
        "mtl",
        "transformers",
        "filepath",
        "directory",
        "process",
    ],
    "prio-package-low": ["haskell98"],
    "extension": ".hs",
    "implicit-module": "Prelude",
    "ghc-pkg": "ghc-pkg",
}

LIST_KEYS = (
    "include",
    "import-order-first",
    "import-order-last",
    "prio-module-high",
    "prio-package-high",
    "prio-package-low",
)


def _as_list(value: Any) -> list[str]:
    """Accept a YAML list or a whitespace-separated string."""
    if value is None:
        return []
    if isinstance(value, str):
        return value.split()
    return [str(v) for v in value]


def normalize_config(raw: dict[str, Any]) -> tuple[dict[str, Any], list[str]]:
    """Coerce list options to lists and report unknown keys."""
    config: dict[str, Any] = {}
    errors = []
    for key, value in raw.items():
        if key not in DEFAULT_CONFIG:
            errors.append(f"unknown config key: {key}")
            continue
        config[key] = _as_list(value) if key in LIST_KEYS else str(value)
    return config, errors


def load_config(path: str | None = None) -> tuple[dict[str, Any], list[str]]:
    """Load configuration from a YAML file and merge it with defaults.

    Returns the config and a list of problems found in the file. A missing
    file is not an error.
    """
    config = DEFAULT_CONFIG.copy()
    if not path:
        return config, []
    p = Path(path)
    if not p.exists():
        return config, []
    raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        error = f"{path}: expected a mapping of options"
        logger.debug(error)
        return config, [error]
    user_config, errors = normalize_config(raw)
    for error in errors:
        logger.debug("%s: %s", path, error)
    return deep_merge(config, user_config), errors


def priority_config(config: dict[str, Any]) -> PriorityConfig:
    """Extract the ordering and disambiguation options."""
    return PriorityConfig(
        import_order_first=tuple(config["import-order-first"]),
        import_order_last=tuple(config["import-order-last"]),
        prio_module_high=tuple(config["prio-module-high"]),
        prio_package_high=tuple(config["prio-package-high"]),
        prio_package_low=tuple(config["prio-package-low"]),
    )
