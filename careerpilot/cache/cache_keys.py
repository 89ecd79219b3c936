"""Cache key definitions for CareerPilot."""

from enum import Enum


class CacheNamespace(str, Enum):
    """Cache namespaces for different data types."""

    CAREER = "career"


class CacheKeys:
    """Cache key generation."""

    PATTERNS = {
        "career_catalog": "{namespace}:catalog",
    }

    @classmethod
    def career_catalog(cls) -> str:
        """Key holding the full career catalog in catalog order."""
        return cls.PATTERNS["career_catalog"].format(namespace=CacheNamespace.CAREER.value)


__all__ = ["CacheKeys", "CacheNamespace"]
