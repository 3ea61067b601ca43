from __future__ import annotations

from typing import Final

__all__: list[str] = ["StringUtils"]

PREVIEW_LENGTH_LIMIT: Final[int] = 50  # Number of characters kept in log previews.


class StringUtils:
    """Utility class for string handling.

    Provides static methods for type coercion, blank checks and log previews.
    """

    @staticmethod
    def ensure_str(value: str | None) -> str:
        """Ensure that the value is a string, returning an empty string if None.

        Note: Does not use strip(); whitespace in queries and translations is significant.

        Args:
            value (str | None): The value to ensure as a string.

        Returns:
            str: The value as a string, or empty string if None.
        """
        if not isinstance(value, str):
            value = str(value) if value is not None else ""
        return value

    @staticmethod
    def is_blank(value: str | None) -> bool:
        """Check whether the value is None, empty, or whitespace only."""
        return not StringUtils.ensure_str(value).strip()

    @staticmethod
    def preview(value: str | None, limit: int = PREVIEW_LENGTH_LIMIT) -> str:
        """Shorten a string for log output.

        Args:
            value (str | None): The string to shorten.
            limit (int): Maximum number of characters kept. 0 or negative disables shortening.

        Returns:
            str: The string, cut to ``limit`` characters with ``...`` appended when shortened.
        """
        value = StringUtils.ensure_str(value).replace("\n", "\\n")
        if limit <= 0 or len(value) <= limit:
            return value
        return f"{value[:limit]}..."
