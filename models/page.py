"""
Page models.

BasePage = generic content page (title, URL segment, body, publishing).
RecipesPage = the page type that lists Recipe records.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _
from simple_history.models import HistoricalRecords

from cookbook.conf import get_link_resolver


class PublishedPageQuerySet(models.QuerySet):
    def published(self):
        return self.filter(is_published=True)


class BasePage(models.Model):
    """
    Abstract content page.

    Links are resolved through the configured PageLinkResolver so the
    same page can be mounted under any URL prefix.
    """

    title = models.CharField(
        max_length=255,
        verbose_name=_("Title"),
    )
    slug = models.SlugField(
        unique=True,
        max_length=100,
        verbose_name=_("URL segment"),
        help_text=_("Last part of the page URL (ex: recipes)"),
    )
    content = models.TextField(
        blank=True,
        verbose_name=_("Content"),
    )
    meta_description = models.TextField(
        blank=True,
        verbose_name=_("Meta description"),
    )
    is_published = models.BooleanField(
        default=False,
        verbose_name=_("Published"),
    )

    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    objects = PublishedPageQuerySet.as_manager()

    class Meta:
        abstract = True
        ordering = ["title"]

    def __str__(self) -> str:
        return self.title

    def base_link(self) -> str:
        """Public link of the page, ending in "/"."""
        return get_link_resolver().base_link(self)

    def link(self, action: str = "") -> str:
        """Page link with an optional action appended (ex: "show/3")."""
        return self.base_link() + action

    def get_absolute_url(self) -> str:
        return self.base_link()


class RecipesPage(BasePage):
    """
    Listing page for recipes.

    Owns Recipe records through the reverse FK `recipes`. Deleting the page
    orphans its recipes instead of deleting them.
    """

    history = HistoricalRecords()

    class Meta(BasePage.Meta):
        db_table = "cookbook_recipes_page"
        verbose_name = _("Recipes Page")
        verbose_name_plural = _("Recipes Pages")
