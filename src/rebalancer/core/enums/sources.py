"""
Price source enumerations.
"""

from enum import StrEnum


class PriceSourceKind(StrEnum):
    """Kinds of price history providers that can be configured."""

    JSON = "json"
    CSV = "csv"
    REMOTE = "remote"
    SYNTHETIC = "synthetic"

    @property
    def is_file_based(self) -> bool:
        """Check if the source reads a local file."""
        return self in [self.JSON, self.CSV]
