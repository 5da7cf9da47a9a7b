"""Tests for PartitionValueExtractorFactory."""

import pytest

from meta_sync.application.config_properties import (
    HIVE_STYLE_EXTRACTOR,
    MULTI_PART_KEYS_EXTRACTOR,
)
from meta_sync.application.sync_config import SyncConfig
from meta_sync.domain.errors import ConfigurationError
from meta_sync.infrastructure.partitioning import (
    HiveStylePartitionValueExtractor,
    MultiPartKeysValueExtractor,
    NonPartitionedExtractor,
    PartitionValueExtractorFactory,
    SlashEncodedDayPartitionValueExtractor,
)
from tests.builders import PropertiesBuilder, SyncConfigBuilder


class TestPartitionValueExtractorFactory:
    """Tests for PartitionValueExtractorFactory class."""

    def test_create_defaults_to_slash_encoded_day(self):
        """Test that a table without partition information gets the date extractor."""
        config = SyncConfig.from_properties(PropertiesBuilder().build())

        result = PartitionValueExtractorFactory.create(config)

        assert isinstance(result, SlashEncodedDayPartitionValueExtractor)

    def test_create_with_fully_qualified_identifier(self):
        """Test creating an extractor from its fully-qualified identifier."""
        config = SyncConfigBuilder().with_extractor(HIVE_STYLE_EXTRACTOR).build()

        result = PartitionValueExtractorFactory.create(config)

        assert isinstance(result, HiveStylePartitionValueExtractor)

    def test_create_with_alias(self):
        """Test creating an extractor from its short alias."""
        config = SyncConfigBuilder().with_extractor("non_partitioned").build()

        result = PartitionValueExtractorFactory.create(config)

        assert isinstance(result, NonPartitionedExtractor)

    def test_create_hive_style_wires_decode_flag(self):
        """Test that the decode flag reaches the hive-style extractor."""
        config = SyncConfigBuilder().with_extractor("hive_style").with_decode().build()

        result = PartitionValueExtractorFactory.create(config)

        assert result == HiveStylePartitionValueExtractor(decode_partition=True)

    def test_create_multi_part_keys_wires_field_count(self):
        """Test that the partition field count reaches the multi-part extractor."""
        config = (
            SyncConfigBuilder()
            .with_extractor(MULTI_PART_KEYS_EXTRACTOR)
            .with_partition_fields("region", "city", "dt")
            .build()
        )

        result = PartitionValueExtractorFactory.create(config)

        assert result == MultiPartKeysValueExtractor(num_fields=3, decode_partition=False)

    def test_create_from_inferred_configuration(self):
        """Test the end-to-end selection from table-level properties."""
        properties = (
            PropertiesBuilder()
            .with_keygen_partition_fields("region", "city")
            .with_url_encoding()
            .build()
        )
        config = SyncConfig.from_properties(properties)

        result = PartitionValueExtractorFactory.create(config)

        assert result == MultiPartKeysValueExtractor(num_fields=2, decode_partition=True)
        assert result.extract("us/New%20York") == ["us", "New York"]

    def test_create_with_unknown_extractor_raises_error(self):
        """Test that an unknown identifier is a configuration error."""
        config = SyncConfigBuilder().with_extractor("com.example.Unknown").build()

        with pytest.raises(ConfigurationError) as exc_info:
            PartitionValueExtractorFactory.create(config)

        assert exc_info.value.raw_value == "com.example.Unknown"
        assert "Unknown partition value extractor 'com.example.Unknown'" in str(exc_info.value)
