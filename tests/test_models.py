"""
Tests for the Recipe and MealSearchResponse models.

These tests check that TheMealDB's field names map onto Recipe attributes and
that partial records do not fail validation.
"""

import pytest
from pydantic import ValidationError

from recipe_search.models import MealSearchResponse, Recipe


class TestRecipe:
    """Test cases for Recipe mapping."""

    def test_maps_api_field_names(self):
        recipe = Recipe.model_validate({
            "idMeal": "52771",
            "strMeal": "Spicy Arrabiata Penne",
            "strMealThumb": "https://www.themealdb.com/images/media/meals/ustsqw1468250014.jpg",
            "strInstructions": "Bring a large pot of water to a boil.",
        })
        assert recipe.id == "52771"
        assert recipe.name == "Spicy Arrabiata Penne"
        assert recipe.image_url.endswith("ustsqw1468250014.jpg")
        assert recipe.instructions.startswith("Bring a large pot")

    def test_missing_thumb_and_instructions_are_none(self):
        """Test a record missing strMealThumb/strInstructions maps to None fields."""
        recipe = Recipe.model_validate({"idMeal": "7", "strMeal": "Toast"})
        assert recipe.image_url is None
        assert recipe.instructions is None

    def test_explicit_nulls_are_none(self):
        recipe = Recipe.model_validate({"idMeal": "7", "strMeal": None, "strMealThumb": None, "strInstructions": None})
        assert recipe.name is None

    def test_id_is_required(self):
        with pytest.raises(ValidationError):
            Recipe.model_validate({"strMeal": "No id"})

    def test_recipe_is_immutable(self):
        recipe = Recipe(id="1", name="Pasta")
        with pytest.raises(ValidationError):
            recipe.name = "Pizza"


class TestMealSearchResponse:
    """Test cases for the response envelope."""

    def test_null_meals_maps_to_empty_list(self):
        assert MealSearchResponse.model_validate({"meals": None}).recipes == []

    def test_missing_meals_maps_to_empty_list(self):
        assert MealSearchResponse.model_validate({}).recipes == []

    def test_meals_keep_api_order(self):
        envelope = MealSearchResponse.model_validate({
            "meals": [{"idMeal": "2"}, {"idMeal": "1"}]
        })
        assert [r.id for r in envelope.recipes] == ["2", "1"]
