"""
Cookbook Exceptions.

Domain errors raised by the models and RecipeRepository. Form and model
validation failures stay Django ValidationErrors.
"""

from typing import Any


class CookbookError(Exception):
    """
    A cookbook domain error, identified by a code.

    Usage:
        raise CookbookError("RECIPE_NOT_FOUND", recipe_id=42)

    Attributes:
        code: Error code, one of the codes listed below
        details: Identifiers of the records involved
    """

    def __init__(self, code: str, **details: Any):
        self.code = code
        self.details = details
        message = f"{code}: {details}" if details else code
        super().__init__(message)

    def as_dict(self) -> dict:
        """Return error as dictionary for API responses."""
        return {"code": self.code, **self.details}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"CookbookError({self.code}: {details_str})"
        return f"CookbookError({self.code})"


# Codes in use
# RECIPE_NOT_FOUND (recipe_id): RecipeRepository.update
# RECIPE_NOT_ATTACHED (recipe_id): Recipe.link, RecipeRepository.link
# PAGE_NOT_FOUND (page_id): RecipeRepository.create
# INVALID_FIELD (field): RecipeRepository.update
