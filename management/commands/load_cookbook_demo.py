"""
Load demo data for Cookbook.

Creates a published "Recipes" page (slug: recipes) with a few recipes.
Running it twice does not duplicate anything.

Usage:
    python manage.py load_cookbook_demo
    python manage.py load_cookbook_demo --clear
"""

from django.core.management.base import BaseCommand
from django.db import transaction

DEMO_PAGE = {
    "slug": "recipes",
    "title": "Recipes",
    "content": "<p>Family recipes, tested in our kitchen.</p>",
    "meta_description": "A small collection of home recipes.",
}

DEMO_RECIPES = [
    {
        "title": "Pão de Queijo",
        "content": (
            "<p>Scald 250 ml milk with 100 ml oil and a pinch of salt. "
            "Pour over 500 g sour tapioca flour, mix, add 2 eggs and "
            "200 g grated cheese. Shape into balls and bake at 180 °C "
            "for 25 minutes.</p>"
        ),
    },
    {
        "title": "Brigadeiro",
        "content": (
            "<p>Cook 1 can condensed milk, 1 tbsp butter and 2 tbsp cocoa "
            "over low heat, stirring, until it pulls away from the pan. "
            "Cool, roll into balls and coat with chocolate sprinkles.</p>"
        ),
    },
    {
        "title": "Banana Bread",
        "content": (
            "<p>Mash 3 ripe bananas, mix with 75 g melted butter, 150 g "
            "sugar, 1 egg, 1 tsp baking soda and 190 g flour. Bake in a "
            "loaf tin at 175 °C for 60 minutes.</p>"
        ),
    },
]


class Command(BaseCommand):
    help = "Loads demo data for Cookbook"

    def add_arguments(self, parser):
        parser.add_argument(
            "--clear",
            action="store_true",
            help="Delete the demo page and its recipes before loading",
        )

    def handle(self, *args, **options):
        from cookbook.models import Recipe, RecipesPage

        if options["clear"]:
            self.stdout.write("Clearing demo data...")
            Recipe.objects.filter(page__slug=DEMO_PAGE["slug"]).delete()
            RecipesPage.objects.filter(slug=DEMO_PAGE["slug"]).delete()
            self.stdout.write(self.style.SUCCESS("  ✓ Cleared"))

        with transaction.atomic():
            page, created = RecipesPage.objects.get_or_create(
                slug=DEMO_PAGE["slug"],
                defaults={**DEMO_PAGE, "is_published": True},
            )
            if created:
                self.stdout.write(f"  ✓ Page created: {page.title}")

            added = 0
            for data in DEMO_RECIPES:
                _, recipe_created = Recipe.objects.get_or_create(
                    page=page,
                    title=data["title"],
                    defaults={"content": data["content"]},
                )
                added += int(recipe_created)

        self.stdout.write(
            self.style.SUCCESS(
                f"Demo data loaded: {added} new recipe(s), "
                f"{page.recipes.count()} on {page.link()}"
            )
        )
