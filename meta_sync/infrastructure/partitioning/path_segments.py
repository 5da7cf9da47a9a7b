"""Helpers for splitting partition paths into directory segments."""

from typing import List
from urllib.parse import unquote


def split_partition_path(partition_path: str) -> List[str]:
    """Split a partition path into its directory segments.

    Leading and trailing slashes are ignored, so "" and "/" both yield [].

    Args:
        partition_path: Slash-separated path relative to the table base path.

    Returns:
        List of segments in path order.
    """
    stripped = partition_path.strip("/")
    if not stripped:
        return []
    return stripped.split("/")


def decode_value(value: str, decode: bool) -> str:
    """URL-decode a partition value when decoding is enabled."""
    return unquote(value) if decode else value
