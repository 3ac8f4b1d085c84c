"""
URLconf Link Adapter: page links via django.urls.reverse.

Requires cookbook.urls to be included in the project's URLconf
(the "cookbook" namespace).

Configuration (default):
    COOKBOOK = {
        "LINK_RESOLVER": "cookbook.adapters.urls.ReverseLinkResolver",
    }
"""

from __future__ import annotations

from django.urls import reverse


class ReverseLinkResolver:
    """Resolves page links by reversing the `cookbook:page` route."""

    url_name = "cookbook:page"

    def base_link(self, page) -> str:
        link = reverse(self.url_name, kwargs={"slug": page.slug})
        if not link.endswith("/"):
            link += "/"
        return link
