"""Catalog of recognized sync configuration properties."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Dict, Optional, Tuple

if TYPE_CHECKING:
    from meta_sync.application.config_resolver import ConfigView

InferFunction = Callable[["ConfigView"], Optional[str]]


@dataclass(frozen=True)
class ConfigProperty:
    """A recognized configuration key with its default and inference rule."""

    key: str
    default_value: Optional[str] = None
    infer_function: Optional[InferFunction] = None
    documentation: str = ""

    def has_default(self) -> bool:
        return self.default_value is not None


# Table-level properties written alongside the table data. They are only read
# by inference functions and never resolved on their own.
TABLE_WRITE_NAME = "table.write.name"
TABLE_NAME = "table.name"
KEYGEN_PARTITION_PATH_FIELD = "keygen.partitionpath.field"
KEYGEN_HIVE_STYLE_PARTITIONING = "keygen.hive_style_partitioning"
KEYGEN_URL_ENCODE_PARTITIONING = "keygen.partitionpath.urlencode"

_EXTRACTORS_PACKAGE = "meta_sync.infrastructure.partitioning.extractors"
NON_PARTITIONED_EXTRACTOR = f"{_EXTRACTORS_PACKAGE}.non_partitioned.NonPartitionedExtractor"
SLASH_ENCODED_DAY_EXTRACTOR = (
    f"{_EXTRACTORS_PACKAGE}.slash_encoded_day.SlashEncodedDayPartitionValueExtractor"
)
HIVE_STYLE_EXTRACTOR = f"{_EXTRACTORS_PACKAGE}.hive_style.HiveStylePartitionValueExtractor"
MULTI_PART_KEYS_EXTRACTOR = f"{_EXTRACTORS_PACKAGE}.multi_part_keys.MultiPartKeysValueExtractor"


def _infer_table_name(cfg: "ConfigView") -> Optional[str]:
    if cfg.contains(TABLE_WRITE_NAME):
        return cfg.get_raw(TABLE_WRITE_NAME)
    if cfg.contains(TABLE_NAME):
        return cfg.get_raw(TABLE_NAME)
    return None


def _infer_partition_fields(cfg: "ConfigView") -> Optional[str]:
    if cfg.contains(KEYGEN_PARTITION_PATH_FIELD):
        return cfg.get_raw(KEYGEN_PARTITION_PATH_FIELD)
    return None


def _infer_partition_extractor_class(cfg: "ConfigView") -> Optional[str]:
    # Tables that predate explicit partition fields keep the date layout default.
    has_fields = cfg.contains(META_SYNC_PARTITION_FIELDS.key) or cfg.contains(
        KEYGEN_PARTITION_PATH_FIELD
    )
    if not has_fields:
        return None

    partition_fields = cfg.get_list(META_SYNC_PARTITION_FIELDS)
    if not partition_fields:
        return NON_PARTITIONED_EXTRACTOR

    hive_style = (cfg.get_raw(KEYGEN_HIVE_STYLE_PARTITIONING) or "").strip().lower() == "true"
    if len(partition_fields) == 1 and hive_style:
        return HIVE_STYLE_EXTRACTOR
    return MULTI_PART_KEYS_EXTRACTOR


def _infer_decode_partition(cfg: "ConfigView") -> Optional[str]:
    if cfg.contains(KEYGEN_URL_ENCODE_PARTITIONING):
        return cfg.get_raw(KEYGEN_URL_ENCODE_PARTITIONING)
    return None


META_SYNC_ENABLED = ConfigProperty(
    key="sync.enabled",
    default_value="false",
    documentation="Enable syncing the table with an external metastore or data catalog.",
)

META_SYNC_DATABASE_NAME = ConfigProperty(
    key="sync.database",
    default_value="default",
    documentation="Name of the destination database to sync the table to.",
)

META_SYNC_TABLE_NAME = ConfigProperty(
    key="sync.table",
    default_value="unknown",
    infer_function=_infer_table_name,
    documentation=(
        "Name of the destination table. Falls back to the table's write name, "
        "then to the table name."
    ),
)

META_SYNC_BASE_PATH = ConfigProperty(
    key="sync.base_path",
    documentation="Base path of the table to sync. Required.",
)

META_SYNC_BASE_FILE_FORMAT = ConfigProperty(
    key="sync.base_file_format",
    default_value="PARQUET",
    documentation="Format of the table's base files (e.g., PARQUET, ORC, HFILE).",
)

META_SYNC_PARTITION_FIELDS = ConfigProperty(
    key="sync.partition_fields",
    default_value="",
    infer_function=_infer_partition_fields,
    documentation=(
        "Comma-separated partition columns. Falls back to the key generator's "
        "partition path fields."
    ),
)

META_SYNC_PARTITION_EXTRACTOR_CLASS = ConfigProperty(
    key="sync.partition_extractor_class",
    default_value=SLASH_ENCODED_DAY_EXTRACTOR,
    infer_function=_infer_partition_extractor_class,
    documentation=(
        "Extractor used to turn partition paths into partition values. Chosen from "
        "the partition fields and hive-style flag when not set."
    ),
)

META_SYNC_ASSUME_DATE_PARTITION = ConfigProperty(
    key="sync.assume_date_partitioning",
    default_value="false",
    documentation="Assume partitions are laid out as yyyy/mm/dd.",
)

META_SYNC_DECODE_PARTITION = ConfigProperty(
    key="sync.decode_partition_values",
    default_value="false",
    infer_function=_infer_decode_partition,
    documentation=(
        "URL-decode partition values. Falls back to the table's URL-encode "
        "partitioning flag."
    ),
)

SYNC_PROPERTIES: Tuple[ConfigProperty, ...] = (
    META_SYNC_ENABLED,
    META_SYNC_DATABASE_NAME,
    META_SYNC_TABLE_NAME,
    META_SYNC_BASE_PATH,
    META_SYNC_BASE_FILE_FORMAT,
    META_SYNC_PARTITION_FIELDS,
    META_SYNC_PARTITION_EXTRACTOR_CLASS,
    META_SYNC_ASSUME_DATE_PARTITION,
    META_SYNC_DECODE_PARTITION,
)


def catalog_by_key(
    properties: Tuple[ConfigProperty, ...] = SYNC_PROPERTIES,
) -> Dict[str, ConfigProperty]:
    """Index a property catalog by key.

    Raises:
        ValueError: If two properties share a key.
    """
    indexed: Dict[str, ConfigProperty] = {}
    for prop in properties:
        if prop.key in indexed:
            raise ValueError(f"Duplicate config property: {prop.key}")
        indexed[prop.key] = prop
    return indexed
