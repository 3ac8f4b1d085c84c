"""
Link Protocol: interface for resolving a page's public base link.

Cookbook defines this protocol. The default adapter reverses the app's URLconf;
sites that mount pages elsewhere (a CMS tree, a subdomain) implement their own.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class PageLinkResolver(Protocol):
    """
    Protocol for computing page links.

    Implementations return the base link of a page, ending in "/",
    so that actions can be appended directly (base + "show/1").
    """

    def base_link(self, page) -> str:
        """
        Return the base link of a page.

        Args:
            page: A page instance (anything with a `slug`)

        Returns:
            URL path ending in "/"
        """
        ...
