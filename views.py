"""
Cookbook Views.

Page controllers: a page is resolved from its URL segment, then the request
is dispatched to the index or to an action:

    /<slug>/                       -> index
    /<slug>/<action>/<identifier>  -> action, only if listed in allowed_actions

Actions return either a context dict (rendered with the action's template)
or an HttpResponse.
"""

import logging

from django.core.exceptions import PermissionDenied
from django.http import Http404, HttpResponse
from django.shortcuts import get_object_or_404
from django.template.loader import render_to_string
from django.views import View

from cookbook.models import RecipesPage
from cookbook.repository import RecipeRepository

logger = logging.getLogger(__name__)


class PageController(View):
    """
    Base controller for content pages.

    Subclasses set `page_model`, `allowed_actions` and one template per
    action in `templates` ("index" included).
    """

    page_model = None
    allowed_actions: tuple[str, ...] = ()
    templates: dict[str, str] = {}
    error_template = "cookbook/http_error.html"

    def get(self, request, slug, action=None, identifier=None):
        self.page = self.get_page(slug)

        if action is None:
            return self.render("index", self.index(request))

        if action not in self.allowed_actions:
            if callable(getattr(self, action, None)):
                raise PermissionDenied(
                    f"Action '{action}' isn't allowed on {type(self).__name__}"
                )
            raise Http404(f"Unknown action '{action}'")

        result = getattr(self, action)(request, identifier)
        if isinstance(result, HttpResponse):
            return result
        return self.render(action, result)

    def get_page(self, slug):
        return get_object_or_404(self.page_model.objects.published(), slug=slug)

    def index(self, request) -> dict:
        return {}

    def get_context_data(self, **kwargs) -> dict:
        return {"page": self.page, **kwargs}

    def render(self, action: str, context: dict) -> HttpResponse:
        return HttpResponse(
            render_to_string(
                self.templates[action],
                self.get_context_data(**context),
                request=self.request,
            )
        )

    def http_error(self, status: int, message: str) -> HttpResponse:
        """Render an error page with a fixed message and status."""
        body = render_to_string(
            self.error_template,
            self.get_context_data(status=status, message=message),
            request=self.request,
        )
        return HttpResponse(body, status=status)


class RecipesPageController(PageController):
    """
    Public views of a RecipesPage: the recipe list and one recipe per
    <page link>show/<id>.
    """

    page_model = RecipesPage
    allowed_actions = ("show",)
    templates = {
        "index": "cookbook/recipes_page.html",
        "show": "cookbook/recipe_detail.html",
    }
    repository_class = RecipeRepository

    def setup(self, request, *args, **kwargs):
        super().setup(request, *args, **kwargs)
        self.repository = self.repository_class()

    def index(self, request) -> dict:
        return {"recipes": self.repository.for_page(self.page.pk)}

    def show(self, request, identifier):
        """
        Show one recipe by primary key.

        GET <page link>show/<identifier>
        """
        recipe = self.repository.get(identifier)

        if recipe is None:
            logger.info(f"No such recipe {identifier} on page '{self.page.slug}'")
            return self.http_error(404, "No such recipe")

        return {"recipe": recipe}
