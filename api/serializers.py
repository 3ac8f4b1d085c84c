"""
Cookbook API Serializers.
"""

from rest_framework import serializers

from cookbook.models import Recipe, RecipesPage


class RecipeSerializer(serializers.ModelSerializer):
    """Serializer for Recipe model."""

    link = serializers.SerializerMethodField()
    image_src = serializers.CharField(read_only=True)

    class Meta:
        model = Recipe
        fields = [
            "id",
            "page",
            "title",
            "content",
            "image_src",
            "link",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_link(self, obj) -> str | None:
        if obj.page_id is None:
            return None
        return obj.link()


class RecipesPageSerializer(serializers.ModelSerializer):
    """Serializer for RecipesPage model."""

    link = serializers.CharField(source="base_link", read_only=True)
    recipes = RecipeSerializer(many=True, read_only=True)

    class Meta:
        model = RecipesPage
        fields = [
            "id",
            "title",
            "slug",
            "content",
            "meta_description",
            "link",
            "recipes",
            "updated_at",
        ]
        read_only_fields = fields
