"""
jsontoolkit configuration utilities.
"""

from .config import CacheSettings, ErrorReporting, QueryConfig, QueryLimits

__all__ = ['QueryConfig', 'QueryLimits', 'CacheSettings', 'ErrorReporting']
