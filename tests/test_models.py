"""
Tests for Cookbook models (cookbook.models).

Verifies recipe links, image fallback, validation on save and
page deletion semantics.
"""

import pytest
from django.core.exceptions import ValidationError

from cookbook.exceptions import CookbookError
from cookbook.models import Recipe, RecipesPage


# ═══════════════════════════════════════════════════════════════════
# Links
# ═══════════════════════════════════════════════════════════════════


class TestLinks:
    """Page and recipe links."""

    def test_page_base_link(self, page):
        assert page.base_link() == "/recipes/"

    def test_page_link_with_action(self, page):
        assert page.link("show/3") == "/recipes/show/3"

    def test_recipe_link_is_page_link_plus_show_id(self, page, recipe):
        assert recipe.link() == page.base_link() + "show/" + str(recipe.id)

    def test_get_absolute_url(self, page, recipe):
        assert page.get_absolute_url() == "/recipes/"
        assert recipe.get_absolute_url() == f"/recipes/show/{recipe.pk}"

    def test_recipe_without_page_has_no_link(self, db):
        orphan = Recipe.objects.create(title="Loose")

        with pytest.raises(CookbookError) as exc:
            orphan.link()

        assert exc.value.code == "RECIPE_NOT_ATTACHED"
        assert exc.value.as_dict() == {"code": "RECIPE_NOT_ATTACHED", "recipe_id": orphan.pk}


# ═══════════════════════════════════════════════════════════════════
# Recipe
# ═══════════════════════════════════════════════════════════════════


class TestRecipe:
    """Tests for Recipe model."""

    def test_str(self, recipe):
        assert str(recipe) == "Pão de Queijo"

    def test_title_is_required(self, page):
        with pytest.raises(ValidationError) as exc:
            Recipe.objects.create(page=page, title="")

        assert "title" in exc.value.message_dict

    def test_save_rejects_disallowed_image_extension(self, page):
        recipe = Recipe(page=page, title="Gif", image="RecipeImages/pao.gif")

        with pytest.raises(ValidationError) as exc:
            recipe.save()

        assert "image" in exc.value.message_dict
        assert not Recipe.objects.filter(title="Gif").exists()

    def test_image_src_falls_back_to_image_url(self, page):
        recipe = Recipe.objects.create(
            page=page,
            title="Legacy",
            image_url="https://cdn.example.com/legacy.jpg",
        )

        assert recipe.image_src == "https://cdn.example.com/legacy.jpg"

    def test_image_src_prefers_uploaded_image(self, page):
        recipe = Recipe.objects.create(
            page=page,
            title="Uploaded",
            image="RecipeImages/pao.jpg",
            image_url="https://cdn.example.com/legacy.jpg",
        )

        assert recipe.image_src == "/media/RecipeImages/pao.jpg"

    def test_image_src_empty_without_any_image(self, recipe):
        assert recipe.image_src == ""

    def test_ordering_by_id(self, page):
        first = Recipe.objects.create(page=page, title="Zucchini Soup")
        second = Recipe.objects.create(page=page, title="Apple Pie")

        assert list(page.recipes.all()) == [first, second]


# ═══════════════════════════════════════════════════════════════════
# RecipesPage
# ═══════════════════════════════════════════════════════════════════


class TestRecipesPage:
    """Tests for RecipesPage model."""

    def test_published_queryset(self, page):
        RecipesPage.objects.create(title="Drafts", slug="drafts")

        assert list(RecipesPage.objects.published()) == [page]

    def test_unpublished_by_default(self, db):
        draft = RecipesPage.objects.create(title="Drafts", slug="drafts")

        assert draft.is_published is False

    def test_history_is_recorded(self, page):
        page.title = "All Recipes"
        page.save()

        assert page.history.count() == 2
        assert page.history.earliest().title == "Recipes"

    def test_deleting_page_orphans_recipes(self, page, recipe):
        page.delete()

        recipe = Recipe.objects.get(pk=recipe.pk)
        assert recipe.page is None
        assert recipe.title == "Pão de Queijo"
