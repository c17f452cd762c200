"""
Raw add-recipe form submitted by a user.
"""
from pydantic import BaseModel, ConfigDict


class RecipeForm(BaseModel):
    """
    User-entered recipe fields, exactly as typed.

    Every field is text; validation and normalization happen in recipe
    creation so that missing fields can be reported together.
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = ""
    cuisine: str = ""
    meal_type: str = ""
    cook_time: str = ""
    ingredients: str = ""
    source: str = ""
