"""
Cookbook Forms.

Presentation layer for the admin: which fields are editable and with which
editors. Models stay free of widget metadata.

    Title   -> text input
    Image   -> file upload (jpg, jpeg, png; stored under IMAGE_FOLDER)
    Content -> rich text editor (Unfold WYSIWYG)

RecipeFormSet is the recipes grid of a RecipesPage: inline create, edit and
delete of the page's recipes, committed only by formset.save().
"""

from django import forms
from django.utils.translation import gettext as _
from unfold.contrib.forms.widgets import WysiwygWidget

from cookbook.conf import get_image_extensions, get_image_folder
from cookbook.models import Recipe, RecipesPage


class RecipeForm(forms.ModelForm):
    """Admin form for a single recipe."""

    class Meta:
        model = Recipe
        fields = ["title", "image", "content"]
        widgets = {
            "content": WysiwygWidget,
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        extensions = get_image_extensions()
        image = self.fields["image"]
        image.widget.attrs["accept"] = ",".join(f".{ext}" for ext in extensions)
        image.help_text = _("Allowed: %(extensions)s. Saved in %(folder)s/.") % {
            "extensions": ", ".join(extensions),
            "folder": get_image_folder(),
        }


class RecipesPageForm(forms.ModelForm):
    """Admin form for the page itself (standard page fields)."""

    class Meta:
        model = RecipesPage
        fields = ["title", "slug", "content", "meta_description", "is_published"]
        widgets = {
            "content": WysiwygWidget,
            "meta_description": forms.Textarea(attrs={"rows": 2}),
        }


RecipeFormSet = forms.inlineformset_factory(
    RecipesPage,
    Recipe,
    form=RecipeForm,
    extra=0,
    can_delete=True,
)
