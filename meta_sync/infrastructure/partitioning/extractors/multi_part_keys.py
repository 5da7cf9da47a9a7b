"""Multi-part keys partition extractor: {value1}/{value2}/..."""

from dataclasses import dataclass
from typing import List

from meta_sync.domain.errors import PartitionParseError
from meta_sync.domain.interfaces import PartitionValueExtractor
from meta_sync.infrastructure.partitioning.path_segments import (
    decode_value,
    split_partition_path,
)


@dataclass(frozen=True)
class MultiPartKeysValueExtractor(PartitionValueExtractor):
    """Returns raw path segments, one per declared partition field."""

    num_fields: int
    decode_partition: bool = False

    def extract(self, partition_path: str) -> List[str]:
        """Extract partition values from a plain multi-level partition path.

        Args:
            partition_path: Partition path (e.g., "us/ca/2024").

        Returns:
            Segments in path order (e.g., ["us", "ca", "2024"]).

        Raises:
            PartitionParseError: If the segment count differs from num_fields.
        """
        segments = split_partition_path(partition_path)
        if len(segments) != self.num_fields:
            raise PartitionParseError(
                partition_path,
                self.name,
                f"expected {self.num_fields} segments, got {len(segments)}",
            )
        return [decode_value(segment, self.decode_partition) for segment in segments]
