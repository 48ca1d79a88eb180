import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib

from strata.path import WILDCARD


@dataclass(frozen=True)
class StrataConfig:
    wildcard: str = WILDCARD

    def __post_init__(self):
        if not isinstance(self.wildcard, str) or not self.wildcard:
            raise ValueError("The wildcard marker must be a non-empty string.")


def _find_pyproject_toml(search_path: Path) -> Path:
    current_dir = search_path.resolve()
    while True:
        pyproject_path = current_dir / "pyproject.toml"
        if pyproject_path.is_file():
            return pyproject_path
        if current_dir.parent == current_dir:
            break
        current_dir = current_dir.parent
    raise FileNotFoundError("Could not find pyproject.toml in any parent directory.")


def load_config_from_path(search_path: Path) -> StrataConfig:
    try:
        config_path = _find_pyproject_toml(search_path)
    except FileNotFoundError:
        return StrataConfig()

    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    strata_data: Dict[str, Any] = data.get("tool", {}).get("strata", {})

    # Create config with data from file, falling back to defaults.
    return StrataConfig(wildcard=strata_data.get("wildcard", WILDCARD))
