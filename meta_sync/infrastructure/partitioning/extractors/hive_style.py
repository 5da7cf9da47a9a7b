"""Hive-style partition extractor: {field}={value}/..."""

from dataclasses import dataclass
from typing import List

from meta_sync.domain.errors import PartitionParseError
from meta_sync.domain.interfaces import PartitionValueExtractor
from meta_sync.infrastructure.partitioning.path_segments import (
    decode_value,
    split_partition_path,
)


@dataclass(frozen=True)
class HiveStylePartitionValueExtractor(PartitionValueExtractor):
    """Keeps the value part of every "key=value" segment, in segment order."""

    decode_partition: bool = False

    def extract(self, partition_path: str) -> List[str]:
        """Extract partition values from a hive-style partition path.

        Args:
            partition_path: Partition path (e.g., "year=2024/month=01").

        Returns:
            One value per segment (e.g., ["2024", "01"]).

        Raises:
            PartitionParseError: If a segment has no '='.
        """
        values = []
        for segment in split_partition_path(partition_path):
            if "=" not in segment:
                raise PartitionParseError(
                    partition_path, self.name, f"segment '{segment}' is not in key=value form"
                )
            _, value = segment.split("=", 1)
            values.append(decode_value(value, self.decode_partition))
        return values
