"""
Cookbook URL Configuration.

Include at the site root (or under any prefix):

    path("", include("cookbook.urls")),
"""

from django.urls import path

from cookbook.views import RecipesPageController

app_name = "cookbook"

urlpatterns = [
    path("<slug:slug>/", RecipesPageController.as_view(), name="page"),
    path(
        "<slug:slug>/<slug:action>/<int:identifier>",
        RecipesPageController.as_view(),
        name="page_action",
    ),
]
