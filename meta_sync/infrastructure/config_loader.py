"""Concrete implementation of properties loader."""

from pathlib import Path
from typing import Any, Dict

import yaml

from ..domain.interfaces import PropertiesLoader


def _to_property_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_to_property_value(item) for item in value)
    if value is None:
        return ""
    return str(value)


def flatten_properties(data: Dict[str, Any], prefix: str = "") -> Dict[str, str]:
    """Flatten nested mappings into dotted property keys.

    Example:
        {"sync": {"database": "sales", "enabled": True}}
        -> {"sync.database": "sales", "sync.enabled": "true"}
    """
    flat: Dict[str, str] = {}
    for key, value in data.items():
        full_key = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, dict):
            flat.update(flatten_properties(value, full_key))
        else:
            flat[full_key] = _to_property_value(value)
    return flat


class YamlPropertiesLoader(PropertiesLoader):
    """Loads sync property bags from YAML files."""

    def __init__(self, config_dir: str = ".") -> None:
        """Initialize YAML properties loader.

        Args:
            config_dir: Directory that relative sources are resolved against.
        """
        self._config_dir = Path(config_dir)

    def load_properties(self, source: str) -> Dict[str, str]:
        """Load a property bag from a YAML file.

        Args:
            source: File path, absolute or relative to config_dir. The ".yml"
                or ".yaml" suffix may be omitted.

        Returns:
            Flat dictionary of property key to string value.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file does not contain a mapping.
        """
        config_file = self._find_file(source)

        with open(config_file, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Properties file must contain a mapping: {config_file}")
        return flatten_properties(data)

    def _find_file(self, source: str) -> Path:
        base = Path(source)
        if not base.is_absolute():
            base = self._config_dir / base

        candidates = (base, base.with_name(base.name + ".yml"), base.with_name(base.name + ".yaml"))
        for candidate in candidates:
            if candidate.is_file():
                return candidate

        raise FileNotFoundError(f"Properties file not found: {source}")
