"""
Cookbook Record Types.

Plain, framework-free views of persisted recipes, returned by
RecipeRepository and handed to templates.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RecipeRecord:
    """
    A recipe, decoupled from the ORM.

    link is None while the recipe is not attached to a page.
    image_src is the URL to display (uploaded image, else image_url).
    """

    id: int
    title: str
    content: str
    image: str
    image_url: str
    image_src: str
    page_id: int | None
    link: str | None = None

    @property
    def is_attached(self) -> bool:
        return self.page_id is not None
