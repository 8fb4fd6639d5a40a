"""
tinysh Filesystem Module

Search path resolution and permission checks against the real filesystem.
"""

from .path_resolver import SearchPathResolver, has_execute_bit, EXECUTE_BITS

__all__ = [
    'SearchPathResolver',
    'has_execute_bit',
    'EXECUTE_BITS',
]
