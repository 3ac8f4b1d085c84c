"""
Tests for Cookbook settings (cookbook.conf).
"""

import pytest
from django.core.exceptions import ImproperlyConfigured
from django.core.files.storage import default_storage

from cookbook.adapters.urls import ReverseLinkResolver
from cookbook.conf import (
    get_image_extensions,
    get_image_folder,
    get_image_storage,
    get_link_resolver,
    get_setting,
)
from cookbook.protocols import PageLinkResolver
from cookbook.tests.factories import AltStorage


class TestGetSetting:
    def test_defaults(self, settings):
        settings.COOKBOOK = {}

        assert get_setting("IMAGE_FOLDER") == "RecipeImages"
        assert get_image_extensions() == ["jpg", "jpeg", "png"]

    def test_flat_setting(self, settings):
        settings.COOKBOOK = {}
        settings.COOKBOOK_IMAGE_FOLDER = "Photos"

        assert get_image_folder() == "Photos"

    def test_dict_wins_over_flat(self, settings):
        settings.COOKBOOK = {"IMAGE_FOLDER": "/Dict/"}
        settings.COOKBOOK_IMAGE_FOLDER = "Flat"

        assert get_image_folder() == "Dict"

    def test_extensions_normalized(self, settings):
        settings.COOKBOOK = {"IMAGE_EXTENSIONS": [".JPG", "webp"]}

        assert get_image_extensions() == ["jpg", "webp"]


class TestBackends:
    def test_default_link_resolver(self):
        resolver = get_link_resolver()

        assert isinstance(resolver, ReverseLinkResolver)
        assert isinstance(resolver, PageLinkResolver)
        assert get_link_resolver() is resolver

    def test_invalid_link_resolver(self, settings):
        settings.COOKBOOK = {"LINK_RESOLVER": "cookbook.nowhere.Resolver"}

        with pytest.raises(ImproperlyConfigured):
            get_link_resolver()

    def test_default_image_storage(self):
        assert get_image_storage() is default_storage

    def test_configured_image_storage(self, settings):
        settings.COOKBOOK = {"IMAGE_STORAGE": "cookbook.tests.factories.AltStorage"}

        storage = get_image_storage()

        assert isinstance(storage, AltStorage)
        assert get_image_storage() is storage

    def test_extension_setting_drives_validation(self, db, settings, page):
        from django.core.exceptions import ValidationError

        from cookbook.models import Recipe

        settings.COOKBOOK = {"IMAGE_EXTENSIONS": ["gif"]}

        Recipe.objects.create(page=page, title="Gif ok", image="RecipeImages/a.gif")
        with pytest.raises(ValidationError):
            Recipe.objects.create(page=page, title="Png not ok", image="RecipeImages/a.png")
