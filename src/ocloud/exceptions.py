"""Custom exception hierarchy for ocloud.

These exceptions allow callers to discriminate error categories
and handle them appropriately while preserving the original context.
"""

from __future__ import annotations


class OcloudError(Exception):
    """Base class for all ocloud exceptions."""


class ConfigError(OcloudError):
    """Raised when configuration loading or validation fails."""


class ConnectorError(OcloudError):
    """Raised when a resource export cannot be read, fetched, or decoded."""


class SearchError(OcloudError):
    """Raised for search indexing/query issues."""


class IndexBuildError(SearchError):
    """Raised when an index is requested without any declared fields."""


class InvalidPatternError(SearchError):
    """Raised when a search pattern is empty or whitespace-only."""


class UnknownResourceError(OcloudError, ValueError):
    """Raised when a resource type key is not registered."""
