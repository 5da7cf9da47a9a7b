"""Registry of partition value extractor strategies."""

from typing import Dict, List, Type

from ..domain.errors import ConfigurationError
from ..domain.interfaces import PartitionValueExtractor


class ExtractorRegistry:
    """Maps extractor identifiers to extractor classes.

    Identifiers are fully-qualified class names; short aliases may be
    registered alongside them.
    """

    def __init__(self):
        """Initialize extractor registry."""
        self._extractors: Dict[str, Type[PartitionValueExtractor]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        identifier: str,
        extractor_class: Type[PartitionValueExtractor],
        alias: str = "",
    ) -> None:
        """Register an extractor class.

        Args:
            identifier: Fully-qualified identifier.
            extractor_class: Extractor class to register.
            alias: Optional short name (e.g., "hive_style").
        """
        self._extractors[identifier] = extractor_class
        if alias:
            self._aliases[alias] = identifier

    def canonical_identifier(self, name: str) -> str:
        """Resolve an alias or identifier to the fully-qualified identifier.

        Raises:
            ConfigurationError: If the name is not registered.
        """
        identifier = self._aliases.get(name, name)
        if identifier not in self._extractors:
            raise ConfigurationError(
                f"Unknown partition value extractor '{name}'. "
                f"Known extractors: {', '.join(self.names())}",
                key="sync.partition_extractor_class",
                raw_value=name,
            )
        return identifier

    def get_class(self, name: str) -> Type[PartitionValueExtractor]:
        """Get an extractor class by identifier or alias.

        Raises:
            ConfigurationError: If the name is not registered.
        """
        return self._extractors[self.canonical_identifier(name)]

    def names(self) -> List[str]:
        return sorted(self._aliases) + sorted(self._extractors)
