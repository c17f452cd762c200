"""
Random recipe selection with the no-immediate-repeat rule.

The previous choice is passed in explicitly; remembering the new choice is
left to the caller (see dinner_picker.services.session).
"""
import random
from typing import List, Optional, Sequence

from aws_lambda_powertools import Logger

from dinner_picker.models.recipe import Recipe
from dinner_picker.services.exceptions import EmptySelection

logger = Logger()


def eligible_recipes(candidates: Sequence[Recipe], previous_id: Optional[str]) -> List[Recipe]:
    """
    Candidates that may be drawn given the previous choice.

    The previous recipe is excluded when there is more than one candidate.
    If the exclusion would leave nothing, all candidates stay eligible.

    Args:
        candidates: Filtered candidate list
        previous_id: Identifier of the previously shown recipe, if any

    Returns:
        Eligible recipes in candidate order
    """
    if len(candidates) > 1 and previous_id is not None:
        remaining = [recipe for recipe in candidates if str(recipe.id) != str(previous_id)]
        if remaining:
            return remaining
    return list(candidates)


def select_recipe(
    candidates: Sequence[Recipe],
    previous_id: Optional[str] = None,
    rng: Optional[random.Random] = None
) -> Recipe:
    """
    Choose one recipe uniformly at random, avoiding an immediate repeat.

    Args:
        candidates: Filtered candidate list
        previous_id: Identifier of the previously shown recipe, if any
        rng: Optional random source (defaults to the module-level generator)

    Returns:
        The chosen recipe

    Raises:
        EmptySelection: If there are no candidates
    """
    if not candidates:
        raise EmptySelection()

    pool = eligible_recipes(candidates, previous_id)
    rng = rng or random
    chosen = pool[rng.randrange(len(pool))]

    logger.debug("Selected recipe", extra={
        "recipe_id": chosen.id,
        "previous_id": previous_id,
        "candidate_count": len(candidates),
        "eligible_count": len(pool)
    })
    return chosen
