"""Core components of the translator.

This package contains the query recognition engine, the translation engines and manager,
the translation cache, the settings provider and the search dispatcher.
"""

from core.version import VERSION

__all__: list[str] = ["VERSION"]
