"""Utility modules for the translator.

This package provides utility functions for logging, path resolution, string handling
and terminal highlighting.
"""

from utils.file_utils import FileUtils
from utils.highlight_utils import HighlightUtils
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

__all__: list[str] = ["FileUtils", "HighlightUtils", "LoggerUtils", "StringUtils"]
