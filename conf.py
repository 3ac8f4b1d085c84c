"""
Cookbook Settings.

Supports two formats (dict takes priority):

    # Option 1: Dict
    COOKBOOK = {
        "IMAGE_FOLDER": "RecipeImages",
        "IMAGE_STORAGE": "myproject.storages.RecipeImageStorage",
    }

    # Option 2: Flat
    COOKBOOK_IMAGE_FOLDER = "RecipeImages"

All settings have sensible defaults, zero configuration required.
"""

import logging
import threading

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

logger = logging.getLogger(__name__)


# ── Defaults ──

DEFAULTS = {
    "IMAGE_FOLDER": "RecipeImages",
    "IMAGE_EXTENSIONS": ["jpg", "jpeg", "png"],
    "IMAGE_STORAGE": None,
    "LINK_RESOLVER": "cookbook.adapters.urls.ReverseLinkResolver",
}


# ── Accessors ──

_sentinel = object()


def get_setting(name, default=_sentinel):
    """
    Get a cookbook setting.

    Looks up in order:
    1. COOKBOOK dict (e.g. COOKBOOK = {"IMAGE_FOLDER": "..."})
    2. Flat setting (e.g. COOKBOOK_IMAGE_FOLDER = "...")
    3. DEFAULTS
    """
    cookbook_dict = getattr(settings, "COOKBOOK", {})
    if name in cookbook_dict:
        return cookbook_dict[name]

    flat_value = getattr(settings, f"COOKBOOK_{name}", _sentinel)
    if flat_value is not _sentinel:
        return flat_value

    if default is not _sentinel:
        return default

    return DEFAULTS.get(name)


def get_image_folder() -> str:
    """Folder (relative to the storage root) that receives recipe images."""
    return get_setting("IMAGE_FOLDER").strip("/")


def get_image_extensions() -> list[str]:
    """Allowed image extensions, lowercase and without dots."""
    return [ext.lower().lstrip(".") for ext in get_setting("IMAGE_EXTENSIONS")]


def _load_backend(name: str):
    path = get_setting(name)
    try:
        backend = import_string(path)()
    except ImportError as e:
        raise ImproperlyConfigured(
            f"Failed to import cookbook backend COOKBOOK['{name}'] = '{path}': {e}"
        ) from e
    logger.debug("Loaded cookbook backend %s: %s", name, path)
    return backend


_lock = threading.Lock()
_image_storage_instance = None
_link_resolver_instance = None


def get_image_storage():
    """
    Return the storage used for recipe images.

    Falls back to Django's default_storage when IMAGE_STORAGE is not set.
    Also used as the callable `storage` of Recipe.image.
    """
    global _image_storage_instance

    if not get_setting("IMAGE_STORAGE"):
        from django.core.files.storage import default_storage

        return default_storage

    if _image_storage_instance is None:
        with _lock:
            if _image_storage_instance is None:  # double-checked
                _image_storage_instance = _load_backend("IMAGE_STORAGE")

    return _image_storage_instance


def get_link_resolver():
    """Return the configured page link resolver instance."""
    global _link_resolver_instance

    if _link_resolver_instance is None:
        with _lock:
            if _link_resolver_instance is None:  # double-checked
                _link_resolver_instance = _load_backend("LINK_RESOLVER")

    return _link_resolver_instance


def reset_backends() -> None:
    """Reset singletons (for tests)."""
    global _image_storage_instance, _link_resolver_instance
    _image_storage_instance = None
    _link_resolver_instance = None
