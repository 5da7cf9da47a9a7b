"""Partition sync use case."""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from ..domain.errors import PartitionParseError
from ..domain.interfaces import PartitionValueExtractor
from .sync_config import SyncConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PartitionValues:
    """Partition values extracted from one partition path."""

    partition_path: str
    values: Tuple[str, ...]


class PartitionSyncUseCase:
    """Turns candidate partition paths into ordered partition values."""

    def __init__(
        self,
        config: SyncConfig,
        extractor: PartitionValueExtractor,
        skip_invalid: bool = False,
        workers: int = 1,
    ):
        """Initialize partition sync use case.

        Args:
            config: Resolved sync configuration.
            extractor: Extractor selected for the table.
            skip_invalid: Log and skip paths that fail to parse instead of raising (default: False).
            workers: Number of parallel extraction workers (default: 1).
        """
        self._config = config
        self._extractor = extractor
        self._skip_invalid = skip_invalid
        self._workers = max(1, workers)

    @property
    def extractor(self) -> PartitionValueExtractor:
        return self._extractor

    def execute(self, partition_paths: Iterable[str]) -> List[PartitionValues]:
        """Extract partition values for every candidate partition path.

        Args:
            partition_paths: Paths relative to the table base path.

        Returns:
            Extracted values, in the same order as the input paths. Skipped
            paths are omitted.

        Raises:
            PartitionParseError: If a path cannot be parsed and skip_invalid is False.
        """
        paths = list(partition_paths)
        logger.info(
            "Extracting partition values for %d paths of %s.%s using %s",
            len(paths),
            self._config.database_name,
            self._config.table_name,
            self._extractor.name,
        )

        if self._workers > 1 and len(paths) > 1:
            with ThreadPoolExecutor(max_workers=self._workers) as executor:
                results = list(executor.map(self._extract_one, paths))
        else:
            results = [self._extract_one(path) for path in paths]

        extracted = [result for result in results if result is not None]
        skipped = len(paths) - len(extracted)
        if skipped:
            logger.warning("Skipped %d of %d partition paths", skipped, len(paths))
        logger.info("Extracted partition values for %d paths", len(extracted))
        return extracted

    def _extract_one(self, partition_path: str) -> Optional[PartitionValues]:
        try:
            values = self._extractor.extract(partition_path)
            self._check_field_count(partition_path, values)
        except PartitionParseError as e:
            if not self._skip_invalid:
                raise
            logger.warning("Skipping partition path: %s", e)
            return None
        return PartitionValues(partition_path=partition_path, values=tuple(values))

    def _check_field_count(self, partition_path: str, values: List[str]) -> None:
        """Check that values line up with the declared partition fields.

        Tables without declared fields are exempt, which covers both the
        non-partitioned case and legacy date-layout tables.
        """
        fields = self._config.partition_fields
        if fields and len(values) != len(fields):
            raise PartitionParseError(
                partition_path,
                self._extractor.name,
                f"extracted {len(values)} values for {len(fields)} partition fields "
                f"({', '.join(fields)})",
            )
