"""Resolved configuration for one sync job."""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Tuple

from .config_properties import (
    META_SYNC_ASSUME_DATE_PARTITION,
    META_SYNC_BASE_FILE_FORMAT,
    META_SYNC_BASE_PATH,
    META_SYNC_DATABASE_NAME,
    META_SYNC_DECODE_PARTITION,
    META_SYNC_ENABLED,
    META_SYNC_PARTITION_EXTRACTOR_CLASS,
    META_SYNC_PARTITION_FIELDS,
    META_SYNC_TABLE_NAME,
)
from .config_resolver import ConfigResolver


@dataclass(frozen=True)
class SyncConfig:
    """Fully resolved sync configuration."""

    enabled: bool
    database_name: str
    table_name: str
    base_path: str
    base_file_format: str
    partition_fields: Tuple[str, ...]
    partition_value_extractor_class: str
    assume_date_partitioning: bool
    decode_partition: bool

    @classmethod
    def from_properties(cls, properties: Mapping[str, str]) -> "SyncConfig":
        """Resolve a SyncConfig from a raw property bag.

        Args:
            properties: Raw property bag.

        Returns:
            SyncConfig instance.

        Raises:
            ConfigurationError: If the base path is missing or a value is invalid.
        """
        return cls.from_resolver(ConfigResolver(properties))

    @classmethod
    def from_resolver(cls, resolver: ConfigResolver) -> "SyncConfig":
        """Build a SyncConfig from an existing resolver."""
        return cls(
            enabled=resolver.get_boolean(META_SYNC_ENABLED),
            database_name=resolver.get_required_string(META_SYNC_DATABASE_NAME),
            table_name=resolver.get_required_string(META_SYNC_TABLE_NAME),
            base_path=resolver.get_required_string(META_SYNC_BASE_PATH),
            base_file_format=resolver.get_required_string(META_SYNC_BASE_FILE_FORMAT),
            partition_fields=tuple(resolver.get_list(META_SYNC_PARTITION_FIELDS)),
            partition_value_extractor_class=resolver.get_required_string(
                META_SYNC_PARTITION_EXTRACTOR_CLASS
            ),
            assume_date_partitioning=resolver.get_boolean(META_SYNC_ASSUME_DATE_PARTITION),
            decode_partition=resolver.get_boolean(META_SYNC_DECODE_PARTITION),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["partition_fields"] = list(self.partition_fields)
        return data
