"""
Django Cookbook - Recipes page type for Django sites.

A listing page that owns recipe records, edited through the page's admin
grid and rendered one recipe per detail URL.

Usage:
    from cookbook import RecipeRepository, CookbookError

    repo = RecipeRepository()
    record = repo.create(page.pk, title="Pão de Queijo", content="<p>...</p>")
    repo.link(record)  # "/recipes/show/1"

    # Directly on the model
    recipe = page.recipes.first()
    recipe.link()
"""

from cookbook.exceptions import CookbookError


def __getattr__(name):
    """Lazy import to avoid AppRegistryNotReady errors."""
    if name == "RecipeRepository":
        from cookbook.repository import RecipeRepository

        return RecipeRepository
    if name == "RecipeRecord":
        from cookbook.records import RecipeRecord

        return RecipeRecord
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["RecipeRepository", "RecipeRecord", "CookbookError"]
__version__ = "0.1.0"
