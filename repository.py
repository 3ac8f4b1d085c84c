"""
Recipe repository - typed CRUD over Recipe records.

Returns RecipeRecord dataclasses instead of model instances, and takes its
collaborators explicitly so callers (and tests) can swap them:

    repo = RecipeRepository(
        link_resolver=ReverseLinkResolver(),
        storage=FileSystemStorage(location="/srv/media"),
    )
    record = repo.create(page.pk, title="Brigadeiro", image=upload)
    repo.link(record)  # "/recipes/show/7"
"""

import logging
import os

from django import forms
from django.db import transaction

from cookbook.conf import get_image_storage, get_link_resolver
from cookbook.exceptions import CookbookError
from cookbook.models import Recipe, RecipesPage
from cookbook.models.recipe import recipe_image_upload_to, validate_recipe_image_extension
from cookbook.records import RecipeRecord

logger = logging.getLogger(__name__)

_unset = object()


class RecipeRepository:
    """
    Data access for recipes.

    Args:
        link_resolver: PageLinkResolver used to build record links
            (default: COOKBOOK['LINK_RESOLVER'])
        storage: Django Storage receiving uploaded images
            (default: COOKBOOK['IMAGE_STORAGE'] or default_storage)
    """

    updatable_fields = ("title", "content", "image_url", "page_id", "image")

    def __init__(self, link_resolver=None, storage=None):
        self.link_resolver = link_resolver or get_link_resolver()
        self.storage = storage or get_image_storage()

    # ══════════════════════════════════════════════════════════════
    # QUERIES
    # ══════════════════════════════════════════════════════════════

    def get(self, recipe_id) -> RecipeRecord | None:
        """Return the recipe with this primary key, or None."""
        recipe = Recipe.objects.select_related("page").filter(pk=recipe_id).first()
        if recipe is None:
            logger.info(f"Recipe {recipe_id} not found")
            return None
        return self._to_record(recipe)

    def for_page(self, page_id) -> list[RecipeRecord]:
        """All recipes owned by a page, oldest first."""
        recipes = Recipe.objects.select_related("page").filter(page_id=page_id).order_by("id")
        return [self._to_record(recipe) for recipe in recipes]

    def link(self, record: RecipeRecord) -> str:
        """
        Public detail link of a record.

        Raises:
            CookbookError: RECIPE_NOT_ATTACHED if the record has no page
        """
        if record.link is None:
            raise CookbookError("RECIPE_NOT_ATTACHED", recipe_id=record.id)
        return record.link

    # ══════════════════════════════════════════════════════════════
    # COMMANDS
    # ══════════════════════════════════════════════════════════════

    def create(
        self,
        page_id,
        *,
        title: str,
        content: str = "",
        image=None,
        image_url: str = "",
    ) -> RecipeRecord:
        """
        Create a recipe on a page.

        Raises:
            CookbookError: PAGE_NOT_FOUND
            ValidationError: invalid title, or an image that is not a picture
                with an allowed extension
        """
        page = RecipesPage.objects.filter(pk=page_id).first()
        if page is None:
            raise CookbookError("PAGE_NOT_FOUND", page_id=page_id)

        recipe = Recipe(page=page, title=title, content=content, image_url=image_url)
        self._save(recipe, image)

        logger.info(f"Recipe {recipe.pk} created on page '{page.slug}'")
        return self._to_record(recipe)

    def update(self, recipe_id, **fields) -> RecipeRecord:
        """
        Update a recipe.

        Accepts title, content, image_url, page_id and image (an uploaded
        file, or None to clear the image; the old file stays in storage).

        Raises:
            CookbookError: RECIPE_NOT_FOUND, INVALID_FIELD
            ValidationError: invalid values
        """
        for name in fields:
            if name not in self.updatable_fields:
                raise CookbookError("INVALID_FIELD", field=name)

        recipe = Recipe.objects.select_related("page").filter(pk=recipe_id).first()
        if recipe is None:
            raise CookbookError("RECIPE_NOT_FOUND", recipe_id=recipe_id)

        changed = sorted(fields)
        image = fields.pop("image", _unset)
        if image is None:
            recipe.image = ""
            image = _unset
        for name, value in fields.items():
            setattr(recipe, name, value)

        self._save(recipe, image)

        logger.info(f"Recipe {recipe.pk} updated: {changed}")
        return self._to_record(recipe)

    def delete(self, recipe_id) -> bool:
        """Delete a recipe. The image file stays in storage."""
        recipe = Recipe.objects.filter(pk=recipe_id).first()
        if recipe is None:
            return False
        recipe.delete()
        logger.info(f"Recipe {recipe_id} deleted")
        return True

    # ══════════════════════════════════════════════════════════════
    # HELPERS
    # ══════════════════════════════════════════════════════════════

    def _save(self, recipe: Recipe, image) -> None:
        # Nothing reaches storage until the row itself is known to be valid
        recipe.full_clean(exclude=["image"])
        if image is None or image is _unset:
            recipe.save()
            return

        with transaction.atomic():
            self._store_image(recipe, image)
            try:
                recipe.save()
            except Exception:
                logger.warning(f"Removing {recipe.image.name} after failed recipe save")
                self.storage.delete(recipe.image.name)
                raise

    def _store_image(self, recipe: Recipe, image) -> None:
        # Same checks as the admin upload: a real image with an allowed extension
        forms.ImageField(validators=[validate_recipe_image_extension]).clean(image)
        path = recipe_image_upload_to(recipe, os.path.basename(image.name))
        recipe.image = self.storage.save(path, image)

    def _to_record(self, recipe: Recipe) -> RecipeRecord:
        if recipe.image:
            image_src = self.storage.url(recipe.image.name)
        else:
            image_src = recipe.image_url

        link = None
        if recipe.page is not None:
            link = self.link_resolver.base_link(recipe.page) + f"show/{recipe.pk}"

        return RecipeRecord(
            id=recipe.pk,
            title=recipe.title,
            content=recipe.content,
            image=recipe.image.name or "",
            image_url=recipe.image_url,
            image_src=image_src,
            page_id=recipe.page_id,
            link=link,
        )
