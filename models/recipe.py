"""
Recipe model.

A recipe record belongs to a RecipesPage and is reachable publicly at
<page link>show/<id>.
"""

from django.core.validators import FileExtensionValidator
from django.db import models
from django.utils.translation import gettext_lazy as _

from cookbook.conf import get_image_extensions, get_image_folder, get_image_storage
from cookbook.exceptions import CookbookError


def recipe_image_upload_to(instance, filename: str) -> str:
    return f"{get_image_folder()}/{filename}"


def validate_recipe_image_extension(value):
    """Reject images whose extension is not in COOKBOOK['IMAGE_EXTENSIONS']."""
    FileExtensionValidator(allowed_extensions=get_image_extensions())(value)


class Recipe(models.Model):
    """
    A single recipe.

    The image file is never removed when the recipe is deleted;
    storage cleanup is left to the project.
    """

    page = models.ForeignKey(
        "cookbook.RecipesPage",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="recipes",
        verbose_name=_("Recipes page"),
    )

    title = models.CharField(
        max_length=255,
        verbose_name=_("Title"),
    )
    content = models.TextField(
        blank=True,
        verbose_name=_("Content"),
    )
    image = models.ImageField(
        upload_to=recipe_image_upload_to,
        storage=get_image_storage,
        validators=[validate_recipe_image_extension],
        max_length=255,
        blank=True,
        verbose_name=_("Image"),
    )
    # Legacy external URL, shown when no image was uploaded
    image_url = models.TextField(
        blank=True,
        verbose_name=_("Image URL"),
    )

    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    class Meta:
        db_table = "cookbook_recipe"
        verbose_name = _("Recipe")
        verbose_name_plural = _("Recipes")
        ordering = ["id"]

    def save(self, *args, **kwargs):
        self.full_clean()
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return self.title

    def link(self) -> str:
        """
        Public detail link: the page link plus "show/<id>".

        Raises:
            CookbookError: RECIPE_NOT_ATTACHED if the recipe has no page
        """
        if self.page_id is None:
            raise CookbookError("RECIPE_NOT_ATTACHED", recipe_id=self.pk)
        return self.page.link(f"show/{self.pk}")

    def get_absolute_url(self) -> str:
        return self.link()

    @property
    def image_src(self) -> str:
        """URL to display: uploaded image first, legacy image_url otherwise."""
        if self.image:
            return self.image.url
        return self.image_url
