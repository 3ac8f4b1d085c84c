"""
Cookbook API URLs.

Include this in your project's urlpatterns:

    path('api/cookbook/', include('cookbook.api.urls')),
"""

from rest_framework.routers import DefaultRouter

from .views import RecipeViewSet, RecipesPageViewSet

router = DefaultRouter()
router.register("pages", RecipesPageViewSet)
router.register("recipes", RecipeViewSet)

urlpatterns = router.urls
