"""
Shared fixtures for Cookbook tests.
"""

import pytest

from cookbook.conf import reset_backends
from cookbook.models import Recipe, RecipesPage
from cookbook.tests.factories import make_image


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    """Uploaded files go to a per-test directory."""
    settings.MEDIA_ROOT = str(tmp_path / "media")
    return tmp_path / "media"


@pytest.fixture(autouse=True)
def fresh_backends():
    reset_backends()
    yield
    reset_backends()


@pytest.fixture
def png_upload():
    return make_image("pao.png", "PNG")


@pytest.fixture
def gif_upload():
    return make_image("pao.gif", "GIF")


@pytest.fixture
def page(db):
    return RecipesPage.objects.create(
        title="Recipes",
        slug="recipes",
        content="<p>Our recipes</p>",
        is_published=True,
    )


@pytest.fixture
def recipe(page):
    return Recipe.objects.create(
        page=page,
        title="Pão de Queijo",
        content="<p>Mix tapioca flour and cheese.</p>",
    )
