"""Snippet source adapters."""

from .package_source import PackageSnippetSource

__all__ = ["PackageSnippetSource"]
