"""Extractor for tables without partition fields."""

from dataclasses import dataclass
from typing import List

from meta_sync.domain.interfaces import PartitionValueExtractor


@dataclass(frozen=True)
class NonPartitionedExtractor(PartitionValueExtractor):
    """Always returns no partition values."""

    def extract(self, partition_path: str) -> List[str]:
        return []
