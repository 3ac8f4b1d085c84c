"""
Cookbook Signals.

Signals:
    recipes_orphaned: A RecipesPage was deleted; its recipes lost their page
"""

from django.dispatch import Signal

# Listing page deleted - recipes remain, detached
# Sent after the page row is gone
# Args: page (the deleted instance), recipe_ids (list of int)
recipes_orphaned = Signal()

__all__ = ["recipes_orphaned"]
