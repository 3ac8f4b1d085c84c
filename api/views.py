"""
Cookbook API ViewSets.
"""

from rest_framework import viewsets

from cookbook.models import Recipe, RecipesPage
from .serializers import RecipeSerializer, RecipesPageSerializer


class RecipesPageViewSet(viewsets.ReadOnlyModelViewSet):
    """
    ViewSet for RecipesPage (read-only).

    list: List published pages
    retrieve: Get a published page and its recipes by slug
    """

    queryset = RecipesPage.objects.published().prefetch_related("recipes__page")
    serializer_class = RecipesPageSerializer
    lookup_field = "slug"


class RecipeViewSet(viewsets.ReadOnlyModelViewSet):
    """
    ViewSet for Recipe (read-only).

    list: List all recipes
    retrieve: Get a specific recipe by id
    """

    queryset = Recipe.objects.select_related("page")
    serializer_class = RecipeSerializer
