"""
Cookbook Models.

- BasePage: Abstract content page (title, URL segment, content, publishing)
- RecipesPage: Listing page that owns recipe records
- Recipe: A single recipe (title, rich text, image) shown at page/show/<id>
"""

from cookbook.models.page import BasePage, RecipesPage
from cookbook.models.recipe import Recipe

__all__ = [
    "BasePage",
    "RecipesPage",
    "Recipe",
]
