"""
Recipe models for the search system.

This module defines the canonical recipe schema used throughout the app.
Records are built only from TheMealDB responses, so the models validate the
API's own field names (idMeal, strMeal, ...) through aliases and expose
Pythonic attribute names to the rest of the code.

TheMealDB search response shape:
    {"meals": [{"idMeal": "52772", "strMeal": "...", "strMealThumb": "...",
                "strInstructions": "...", ...}, ...]}
    or {"meals": null} when nothing matches.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Recipe(BaseModel):
    """
    A single dish record returned by the lookup API.

    Only id is required. Name, image and instructions are frequently missing
    or null in the upstream data and are kept as None.
    """
    id: str = Field(..., alias="idMeal", description="TheMealDB meal identifier")
    name: Optional[str] = Field(None, alias="strMeal", description="Dish name")
    image_url: Optional[str] = Field(None, alias="strMealThumb", description="URL to dish thumbnail")
    instructions: Optional[str] = Field(None, alias="strInstructions", description="Cooking instructions")

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,  # Allow Recipe(id=..., name=...) in code and tests
        extra="ignore",  # The API returns ~50 strIngredientN/strMeasureN fields we don't use
        json_schema_extra={
            "example": {
                "idMeal": "1",
                "strMeal": "Pasta",
                "strMealThumb": "http://x/img.jpg",
                "strInstructions": "Boil water...",
            }
        },
    )


class MealSearchResponse(BaseModel):
    """JSON envelope of GET search.php."""
    meals: Optional[List[Recipe]] = Field(None, description="Matching meals, null when there are none")

    model_config = ConfigDict(extra="ignore")

    @property
    def recipes(self) -> List[Recipe]:
        """Matching recipes, with a null meals field mapped to an empty list."""
        return list(self.meals or [])
