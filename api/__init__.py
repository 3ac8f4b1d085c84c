"""
Cookbook REST API.

Provides read-only DRF ViewSets for:
- RecipesPage (published only, looked up by slug, recipes nested)
- Recipe
"""
