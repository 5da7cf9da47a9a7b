"""Partition value extractor strategies."""

from meta_sync.application.config_properties import (
    HIVE_STYLE_EXTRACTOR,
    MULTI_PART_KEYS_EXTRACTOR,
    NON_PARTITIONED_EXTRACTOR,
    SLASH_ENCODED_DAY_EXTRACTOR,
)
from meta_sync.application.extractor_registry import ExtractorRegistry
from meta_sync.infrastructure.partitioning.extractors.hive_style import (
    HiveStylePartitionValueExtractor,
)
from meta_sync.infrastructure.partitioning.extractors.multi_part_keys import (
    MultiPartKeysValueExtractor,
)
from meta_sync.infrastructure.partitioning.extractors.non_partitioned import (
    NonPartitionedExtractor,
)
from meta_sync.infrastructure.partitioning.extractors.slash_encoded_day import (
    SlashEncodedDayPartitionValueExtractor,
)


def register_extractors(registry: ExtractorRegistry) -> None:
    """Register the built-in extractor strategies.

    New strategies must be registered here and added to the extractor
    selection rule in config_properties.

    Args:
        registry: ExtractorRegistry instance to register extractors in.
    """
    registry.register(NON_PARTITIONED_EXTRACTOR, NonPartitionedExtractor, alias="non_partitioned")
    registry.register(
        SLASH_ENCODED_DAY_EXTRACTOR,
        SlashEncodedDayPartitionValueExtractor,
        alias="slash_encoded_day",
    )
    registry.register(HIVE_STYLE_EXTRACTOR, HiveStylePartitionValueExtractor, alias="hive_style")
    registry.register(
        MULTI_PART_KEYS_EXTRACTOR, MultiPartKeysValueExtractor, alias="multi_part_keys"
    )


def create_extractor_registry() -> ExtractorRegistry:
    """Create an ExtractorRegistry with all built-in extractors registered.

    Returns:
        ExtractorRegistry instance with all extractors registered.
    """
    registry = ExtractorRegistry()
    register_extractors(registry)
    return registry


__all__ = [
    "HiveStylePartitionValueExtractor",
    "MultiPartKeysValueExtractor",
    "NonPartitionedExtractor",
    "SlashEncodedDayPartitionValueExtractor",
    "create_extractor_registry",
    "register_extractors",
]
