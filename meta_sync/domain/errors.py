"""Domain errors."""

from typing import Optional, Sequence


class MetaSyncError(ValueError):
    """Base class for all sync configuration and extraction errors."""


class ConfigurationError(MetaSyncError):
    """Raised when a sync job cannot be configured.

    Fatal: the sync job must abort before any partition is processed.
    """

    def __init__(self, message: str, key: Optional[str] = None, raw_value: Optional[str] = None):
        self.key = key
        self.raw_value = raw_value
        super().__init__(message)


class InferenceCycleError(MetaSyncError):
    """Raised when resolving a key re-enters resolution of the same key."""

    def __init__(self, key: str, chain: Sequence[str]):
        self.key = key
        self.chain = tuple(chain)
        path = " -> ".join(list(self.chain) + [key])
        super().__init__(f"Inference cycle detected while resolving '{key}': {path}")


class PartitionParseError(MetaSyncError):
    """Raised when a partition path does not match the selected extractor."""

    def __init__(self, partition_path: str, strategy: str, reason: str):
        self.partition_path = partition_path
        self.strategy = strategy
        self.reason = reason
        super().__init__(
            f"Cannot extract partition values from '{partition_path}' with {strategy}: {reason}"
        )
