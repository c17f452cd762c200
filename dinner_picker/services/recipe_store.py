"""
DynamoDB-backed recipe store.

Typical usage:
    store = RecipeStore()
    recipes = store.list_recipes()     # newest first
    recipe = store.insert_recipe(draft)
"""
import uuid
from datetime import datetime, timezone
from typing import List

from aws_lambda_powertools import Logger
from boto3.dynamodb.conditions import Key
from botocore.exceptions import BotoCoreError, ClientError

from dinner_picker.models.recipe import Recipe, RecipeDraft
from dinner_picker.services.exceptions import StoreUnavailable
from dinner_picker.utils.dynamo import RECIPES_PK, create_recipe_sk, get_dynamo

logger = Logger()


class RecipeStore:
    """Persistent table of recipes."""

    def __init__(self, dynamo=None):
        """Initialize recipe store with an optional DynamoDB client."""
        self.dynamo = dynamo if dynamo is not None else get_dynamo()

    def list_recipes(self) -> List[Recipe]:
        """
        Get every stored recipe, newest created first.

        Returns:
            List of recipes

        Raises:
            StoreUnavailable: If the table cannot be queried
        """
        try:
            items = self.dynamo.query_items(
                partition_key="PK",
                partition_value=RECIPES_PK,
                sort_key_condition=Key("SK").begins_with("RECIPE#"),
                scan_index_forward=False
            )
        except (BotoCoreError, ClientError) as e:
            logger.error("Error loading recipes", extra={
                "error": str(e),
                "error_type": e.__class__.__name__
            })
            raise StoreUnavailable(f"Failed to load recipes: {str(e)}") from e

        recipes = [Recipe.from_item(item) for item in items]
        logger.info("Loaded recipes", extra={"recipe_count": len(recipes)})
        return recipes

    def insert_recipe(self, draft: RecipeDraft) -> Recipe:
        """
        Store a validated recipe.

        Args:
            draft: Validated recipe fields

        Returns:
            The stored recipe with its assigned id and creation timestamp

        Raises:
            StoreUnavailable: If the item cannot be written
        """
        recipe = Recipe.from_draft(
            draft,
            recipe_id=uuid.uuid4().hex,
            created_at=datetime.now(timezone.utc).isoformat()
        )
        item = {
            "PK": RECIPES_PK,
            "SK": create_recipe_sk(recipe.created_at, recipe.id),
            **recipe.to_item()
        }

        try:
            self.dynamo.put_item(item)
        except (BotoCoreError, ClientError) as e:
            logger.error("Error adding recipe", extra={
                "recipe_name": draft.name,
                "error": str(e),
                "error_type": e.__class__.__name__
            })
            raise StoreUnavailable(f"Failed to add recipe: {str(e)}") from e

        logger.info("Added recipe", extra={
            "recipe_id": recipe.id,
            "recipe_name": recipe.name,
            "cuisine": recipe.cuisine,
            "meal_type": recipe.meal_type
        })
        return recipe
