"""Lazy, memoized resolution of sync configuration properties."""

import logging
import threading
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Union

from ..domain.errors import ConfigurationError, InferenceCycleError
from .config_properties import SYNC_PROPERTIES, ConfigProperty, catalog_by_key

logger = logging.getLogger(__name__)

PropertyRef = Union[str, ConfigProperty]

_TRUE_VALUES = ("true",)
_FALSE_VALUES = ("false",)


def split_list_value(value: Optional[str]) -> List[str]:
    """Split a comma-separated value, trimming entries and dropping empty ones."""
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


class ConfigView:
    """Read-only view handed to inference functions.

    Exposes the raw property bag and on-demand resolution of other catalog
    properties, but nothing that can mutate the resolver.
    """

    def __init__(self, resolver: "ConfigResolver"):
        self._resolver = resolver

    def contains(self, key: str) -> bool:
        """Check whether a raw value was supplied for a key."""
        return self._resolver.contains(key)

    def get_raw(self, key: str) -> Optional[str]:
        """Get the raw value supplied for a key, or None."""
        return self._resolver.get_raw(key)

    def resolve(self, ref: PropertyRef) -> Optional[str]:
        """Resolve another catalog property."""
        return self._resolver.resolve(ref)

    def get_list(self, ref: PropertyRef) -> List[str]:
        """Resolve another catalog property as a comma-separated list."""
        return self._resolver.get_list(ref)


class ConfigResolver:
    """Resolves catalog properties from a raw property bag.

    Precedence per key: raw value, then inferred value, then default. Values
    are resolved on first access and memoized for the lifetime of the
    resolver, so each inference function runs at most once per instance.
    """

    def __init__(
        self,
        properties: Mapping[str, str],
        catalog: Iterable[ConfigProperty] = SYNC_PROPERTIES,
    ):
        """Initialize the resolver.

        Args:
            properties: Raw property bag (CLI flags, persisted table config).
            catalog: Recognized properties (default: SYNC_PROPERTIES).
        """
        self._raw = MappingProxyType(dict(properties))
        self._catalog = catalog_by_key(tuple(catalog))
        self._resolved: Dict[str, Optional[str]] = {}
        self._resolving: List[str] = []
        self._lock = threading.RLock()
        self._view = ConfigView(self)

    @property
    def raw_properties(self) -> Mapping[str, str]:
        """Read-only raw property bag."""
        return self._raw

    def contains(self, key: str) -> bool:
        return key in self._raw

    def get_raw(self, key: str) -> Optional[str]:
        return self._raw.get(key)

    def resolve(self, ref: PropertyRef) -> Optional[str]:
        """Resolve a property, computing and memoizing it on first access.

        Args:
            ref: Catalog property or its key.

        Returns:
            Resolved value, or None when the property has no raw value, no
            inferred value and no default.

        Raises:
            ConfigurationError: If the key is not in the catalog.
            InferenceCycleError: If inference re-enters the key being resolved.
        """
        prop = self._lookup(ref)
        with self._lock:
            if prop.key in self._resolved:
                return self._resolved[prop.key]

            if prop.key in self._resolving:
                raise InferenceCycleError(prop.key, self._resolving)

            self._resolving.append(prop.key)
            try:
                value = self._compute(prop)
            finally:
                self._resolving.pop()

            self._resolved[prop.key] = value
            return value

    def resolve_all(self) -> Dict[str, Optional[str]]:
        """Resolve every catalog property.

        Returns:
            Dictionary mapping each catalog key to its resolved value.
        """
        return {key: self.resolve(key) for key in self._catalog}

    def get_required_string(self, ref: PropertyRef) -> str:
        """Resolve a property that must have a non-empty value.

        Raises:
            ConfigurationError: If the property resolves to None or "".
        """
        value = self.resolve(ref)
        if not value:
            key = self._lookup(ref).key
            raise ConfigurationError(f"Missing required config property: {key}", key=key)
        return value

    def get_boolean(self, ref: PropertyRef) -> bool:
        """Resolve a property as a boolean ("true"/"false", case-insensitive).

        Raises:
            ConfigurationError: If the value is not a recognized boolean.
        """
        value = self.resolve(ref)
        key = self._lookup(ref).key
        if value is None:
            raise ConfigurationError(f"Missing boolean config property: {key}", key=key)

        normalized = value.strip().lower()
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False
        raise ConfigurationError(
            f"Invalid boolean value for {key}: '{value}' (expected 'true' or 'false')",
            key=key,
            raw_value=value,
        )

    def get_list(self, ref: PropertyRef) -> List[str]:
        """Resolve a property as a comma-separated list."""
        return split_list_value(self.resolve(ref))

    def _lookup(self, ref: PropertyRef) -> ConfigProperty:
        key = ref.key if isinstance(ref, ConfigProperty) else ref
        prop = self._catalog.get(key)
        if prop is None:
            raise ConfigurationError(f"Unknown config property: {key}", key=key)
        return prop

    def _compute(self, prop: ConfigProperty) -> Optional[str]:
        if prop.key in self._raw:
            return self._raw[prop.key]

        if prop.infer_function is not None:
            inferred = prop.infer_function(self._view)
            if inferred is not None:
                logger.debug("Inferred %s=%s", prop.key, inferred)
                return inferred

        return prop.default_value
