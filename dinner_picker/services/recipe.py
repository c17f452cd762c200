"""
Recipe service for the in-memory recipe snapshot.

The collection is read from the store once and held for the session (a warm
Lambda container). It is refreshed after a successful insert or when the
user asks for it.
"""
from typing import List, Optional

from aws_lambda_powertools import Logger

from dinner_picker.models.recipe import FilterCriteria, Recipe
from dinner_picker.models.recipe_form import RecipeForm
from dinner_picker.services.recipe_creation import create_recipe_draft
from dinner_picker.services.recipe_filter import filter_recipes
from dinner_picker.services.recipe_selection import select_recipe
from dinner_picker.services.exceptions import StoreUnavailable
from dinner_picker.services.recipe_store import RecipeStore

logger = Logger()

class RecipeService:
    """Service for reading, filtering, choosing and adding recipes."""

    def __init__(self, store: Optional[RecipeStore] = None):
        """Initialize recipe service with an optional recipe store."""
        self.store = store if store is not None else RecipeStore()
        self._recipes: Optional[List[Recipe]] = None

    @property
    def recipes(self) -> List[Recipe]:
        """
        Current snapshot of the collection, newest first.

        Loaded from the store on first access.

        Raises:
            StoreUnavailable: If the snapshot has to be loaded and the store fails
        """
        if self._recipes is None:
            self.refresh()
        return self._recipes

    def refresh(self) -> List[Recipe]:
        """
        Reload the snapshot from the store.

        On failure the previous snapshot is kept untouched.

        Raises:
            StoreUnavailable: If the store cannot be queried
        """
        recipes = self.store.list_recipes()
        self._recipes = recipes
        logger.info("Refreshed recipe snapshot", extra={"recipe_count": len(recipes)})
        return recipes

    def get_recipe_by_id(self, recipe_id: str) -> Optional[Recipe]:
        """Get recipe from the snapshot by its identifier."""
        for recipe in self.recipes:
            if str(recipe.id) == str(recipe_id):
                return recipe
        logger.warning(f"Recipe not found: {recipe_id}")
        return None

    def get_candidates(self, criteria: FilterCriteria) -> List[Recipe]:
        """Recipes from the snapshot matching the criteria."""
        return filter_recipes(self.recipes, criteria)

    def pick_recipe(self, criteria: FilterCriteria, previous_id: Optional[str] = None) -> Recipe:
        """
        Choose a recipe matching the criteria, avoiding an immediate repeat.

        Args:
            criteria: Active filters
            previous_id: Identifier of the previously shown recipe

        Returns:
            The chosen recipe

        Raises:
            EmptySelection: If no recipe matches the criteria
            StoreUnavailable: If the snapshot has to be loaded and the store fails
        """
        candidates = self.get_candidates(criteria)
        recipe = select_recipe(candidates, previous_id)
        logger.info("Picked recipe", extra={
            "recipe_id": recipe.id,
            "candidate_count": len(candidates),
            "filters": criteria.to_dict()
        })
        return recipe

    def add_recipe(self, form: RecipeForm) -> Recipe:
        """
        Validate, store and load a new recipe.

        Args:
            form: Raw user-entered fields

        Returns:
            The stored recipe

        Raises:
            ValidationError: If the form is incomplete or malformed
            StoreUnavailable: If the recipe cannot be stored
        """
        draft = create_recipe_draft(form)
        recipe = self.store.insert_recipe(draft)
        try:
            self.refresh()
        except StoreUnavailable as e:
            # Insert succeeded; the stale snapshot is recovered by /refresh
            logger.warning("Could not refresh recipes after insert", extra={
                "recipe_id": recipe.id,
                "error": str(e)
            })
        return recipe
