"""Recipe data model and loading."""

from aspectgraph.model.loader import (
    load_default_recipe_book,
    load_recipe_book,
    load_recipe_data,
    load_recipe_yaml,
)
from aspectgraph.model.recipes import RecipeBook

__all__ = [
    "RecipeBook",
    "load_default_recipe_book",
    "load_recipe_book",
    "load_recipe_data",
    "load_recipe_yaml",
]
