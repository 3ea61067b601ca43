"""Unit tests for the translator.

This package contains test modules for all components of the translator.
Tests use pytest with asyncio support and mock HTTP/network calls via monkeypatch.
"""
