"""
Cookbook Admin (Unfold theme).

RecipesPage is edited like any content page, with its recipes managed in a
grid (tabular inline) below the page fields. Recipes have no admin of their
own: they are created, edited and deleted only through their page.

Requires in INSTALLED_APPS (before django.contrib.admin):
    "unfold", "unfold.contrib.forms", "unfold.contrib.simple_history"
"""

from django.contrib import admin
from django.db.models import Count
from django.utils.translation import gettext_lazy as _
from simple_history.admin import SimpleHistoryAdmin
from unfold.admin import ModelAdmin, TabularInline
from unfold.decorators import display

from cookbook.forms import RecipeForm, RecipesPageForm
from cookbook.models import Recipe, RecipesPage


class RecipeInline(TabularInline):
    """Recipes grid: inline create/edit/delete of the page's recipes."""

    model = Recipe
    form = RecipeForm
    fields = ("title", "image", "content")
    extra = 0
    can_delete = True
    verbose_name = _("Recipe")
    verbose_name_plural = _("Recipes")


@admin.register(RecipesPage)
class RecipesPageAdmin(SimpleHistoryAdmin, ModelAdmin):
    """Admin for recipe listing pages."""

    form = RecipesPageForm
    list_display = ("title", "slug", "is_published", "display_recipe_count", "updated_at")
    prepopulated_fields = {"slug": ("title",)}
    readonly_fields = ("created_at", "updated_at")
    inlines = [RecipeInline]

    fieldsets = (
        (
            None,
            {
                "fields": (
                    "title",
                    "slug",
                    "content",
                    "is_published",
                ),
            },
        ),
        (
            _("Metadata"),
            {
                "classes": ["collapse"],
                "fields": (
                    "meta_description",
                    ("created_at", "updated_at"),
                ),
            },
        ),
    )

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(recipe_count=Count("recipes"))

    @display(description=_("Recipes"))
    def display_recipe_count(self, obj):
        return obj.recipe_count
