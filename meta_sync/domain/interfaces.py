"""Domain interfaces (ports)."""

from abc import ABC, abstractmethod
from typing import Dict, List


class PartitionValueExtractor(ABC):
    """Interface for turning a partition path into partition-column values.

    Implementations must be stateless and picklable so they can be shipped
    to remote workers.
    """

    @abstractmethod
    def extract(self, partition_path: str) -> List[str]:
        """Extract partition values from a partition path.

        Args:
            partition_path: Path relative to the table base path (e.g., "2024/01/15").

        Returns:
            Partition values, one per partition field, in declared field order.

        Raises:
            PartitionParseError: If the path does not match the expected layout.
        """

    @property
    def name(self) -> str:
        """Short strategy name used in logs and errors."""
        return type(self).__name__


class PropertiesLoader(ABC):
    """Interface for loading a sync property bag."""

    @abstractmethod
    def load_properties(self, source: str) -> Dict[str, str]:
        """Load properties from a source.

        Args:
            source: Identifier of the properties source (e.g., a file path).

        Returns:
            Flat mapping of property key to string value.
        """
