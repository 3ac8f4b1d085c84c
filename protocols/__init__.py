"""
Cookbook Protocols.

Defines interfaces for pluggable collaborators.
"""

from cookbook.protocols.links import PageLinkResolver

__all__ = [
    "PageLinkResolver",
]
