"""Slash-encoded day partition extractor: {yyyy}/{mm}/{dd}"""

from dataclasses import dataclass
from datetime import date
from typing import List

from meta_sync.domain.errors import PartitionParseError
from meta_sync.domain.interfaces import PartitionValueExtractor
from meta_sync.infrastructure.partitioning.path_segments import split_partition_path


@dataclass(frozen=True)
class SlashEncodedDayPartitionValueExtractor(PartitionValueExtractor):
    """Collapses three date directory levels into a single "yyyy-mm-dd" value.

    Each segment may carry a hive-style prefix, so both "2024/01/15" and
    "year=2024/month=01/day=15" are accepted.
    """

    EXPECTED_SEGMENTS = 3

    def extract(self, partition_path: str) -> List[str]:
        """Extract the partition date from a partition path.

        Args:
            partition_path: Partition path (e.g., "2024/01/15").

        Returns:
            Single-element list with the date (e.g., ["2024-01-15"]).

        Raises:
            PartitionParseError: If the path is not exactly three numeric
                segments forming a valid calendar date.
        """
        segments = split_partition_path(partition_path)
        if len(segments) != self.EXPECTED_SEGMENTS:
            raise PartitionParseError(
                partition_path,
                self.name,
                f"expected {self.EXPECTED_SEGMENTS} segments (yyyy/mm/dd), got {len(segments)}",
            )

        numbers = []
        for segment in segments:
            value = segment.split("=", 1)[1] if "=" in segment else segment
            if not (value.isascii() and value.isdigit()):
                raise PartitionParseError(
                    partition_path, self.name, f"segment '{segment}' is not numeric"
                )
            numbers.append(int(value))

        try:
            day = date(numbers[0], numbers[1], numbers[2])
        except ValueError as e:
            raise PartitionParseError(partition_path, self.name, str(e)) from e

        return [day.strftime("%Y-%m-%d")]
