"""Partitioning components for catalog sync."""

from meta_sync.infrastructure.partitioning.extractors import (
    HiveStylePartitionValueExtractor,
    MultiPartKeysValueExtractor,
    NonPartitionedExtractor,
    SlashEncodedDayPartitionValueExtractor,
    create_extractor_registry,
)
from meta_sync.infrastructure.partitioning.partition_value_extractor_factory import (
    PartitionValueExtractorFactory,
)

__all__ = [
    "HiveStylePartitionValueExtractor",
    "MultiPartKeysValueExtractor",
    "NonPartitionedExtractor",
    "PartitionValueExtractorFactory",
    "SlashEncodedDayPartitionValueExtractor",
    "create_extractor_registry",
]
