"""
Cookbook Adapters.

Implementations of protocols for the host Django project.
"""

from cookbook.adapters.urls import ReverseLinkResolver

__all__ = [
    "ReverseLinkResolver",
]
