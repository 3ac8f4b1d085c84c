"""
Cookbook Signal Handlers.

Tracks recipes left without a page when a RecipesPage is deleted.

This module is imported in apps.py to register handlers.
"""

import logging

from django.db.models.signals import post_delete, pre_delete
from django.dispatch import receiver

from cookbook.models import RecipesPage
from cookbook.signals import recipes_orphaned

logger = logging.getLogger(__name__)


@receiver(pre_delete, sender=RecipesPage)
def remember_page_recipes(sender, instance, **kwargs):
    """
    Collect recipe ids before SET_NULL detaches them from the page.
    """
    instance._orphaned_recipe_ids = list(
        instance.recipes.values_list("pk", flat=True)
    )


@receiver(post_delete, sender=RecipesPage)
def announce_orphaned_recipes(sender, instance, **kwargs):
    """
    Send recipes_orphaned once the page is gone.

    The recipes themselves are kept and stay reachable by id.
    """
    recipe_ids = getattr(instance, "_orphaned_recipe_ids", [])
    if not recipe_ids:
        return

    logger.warning(
        f"RecipesPage '{instance.slug}' deleted, {len(recipe_ids)} recipe(s) orphaned: {recipe_ids}"
    )
    recipes_orphaned.send(sender=sender, page=instance, recipe_ids=recipe_ids)
