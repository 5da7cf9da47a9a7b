"""Factory for creating PartitionValueExtractor instances."""

import logging
from typing import Optional

from meta_sync.application.extractor_registry import ExtractorRegistry
from meta_sync.application.sync_config import SyncConfig
from meta_sync.domain.interfaces import PartitionValueExtractor
from meta_sync.infrastructure.partitioning.extractors import (
    HiveStylePartitionValueExtractor,
    MultiPartKeysValueExtractor,
    create_extractor_registry,
)

logger = logging.getLogger(__name__)


class PartitionValueExtractorFactory:
    """Factory for creating the extractor selected by a SyncConfig."""

    @staticmethod
    def create(
        config: SyncConfig, registry: Optional[ExtractorRegistry] = None
    ) -> PartitionValueExtractor:
        """Create the PartitionValueExtractor named in the configuration.

        Args:
            config: Resolved sync configuration. Its partition_value_extractor_class
                may be a fully-qualified identifier or a short alias, e.g.:
                - "meta_sync.infrastructure.partitioning.extractors.hive_style.HiveStylePartitionValueExtractor"
                - "hive_style"
            registry: Extractor registry (defaults to the built-in extractors).

        Returns:
            PartitionValueExtractor instance wired with the decode flag and
            partition field count where the strategy needs them.

        Raises:
            ConfigurationError: If the extractor identifier is unknown.
        """
        registry = registry or create_extractor_registry()
        extractor_class = registry.get_class(config.partition_value_extractor_class)

        if extractor_class is HiveStylePartitionValueExtractor:
            extractor: PartitionValueExtractor = HiveStylePartitionValueExtractor(
                decode_partition=config.decode_partition
            )
        elif extractor_class is MultiPartKeysValueExtractor:
            extractor = MultiPartKeysValueExtractor(
                num_fields=len(config.partition_fields),
                decode_partition=config.decode_partition,
            )
        else:
            extractor = extractor_class()

        logger.debug(
            "Selected %s for %s.%s", extractor.name, config.database_name, config.table_name
        )
        return extractor
