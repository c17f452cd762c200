"""
Per-chat session state.

Holds the chat's selection memory (the last shown recipe id) and its active
filters. Kept under the user's own partition, apart from the shared recipe
partition.

Typical usage:
    sessions = SessionStore()
    session = sessions.get_session(user_id)
    recipe = select_recipe(candidates, session.last_selected_id)
    sessions.remember_selection(user_id, recipe.id)
"""
from dataclasses import dataclass, field
from typing import Optional

from aws_lambda_powertools import Logger
from botocore.exceptions import BotoCoreError, ClientError

from dinner_picker.models.recipe import FilterCriteria
from dinner_picker.services.constants import FILTERS_KEY, LAST_SELECTED_KEY
from dinner_picker.services.exceptions import StoreUnavailable
from dinner_picker.utils.dynamo import SESSION_SK, create_pk, get_dynamo

logger = Logger()


@dataclass
class DinnerSession:
    """
    Session state for one chat user.

    Attributes:
        last_selected_id: Identifier of the most recently shown recipe
        filters: Active filter criteria
    """
    last_selected_id: Optional[str] = None
    filters: FilterCriteria = field(default_factory=FilterCriteria)


class SessionStore:
    """DynamoDB storage for chat sessions."""

    def __init__(self, dynamo=None):
        """Initialize session store with an optional DynamoDB client."""
        self.dynamo = dynamo if dynamo is not None else get_dynamo()

    def _key(self, user_id: str):
        return {"PK": create_pk(user_id), "SK": SESSION_SK}

    def get_session(self, user_id: str) -> DinnerSession:
        """
        Get the session for a user, or an empty one if none is stored.

        Raises:
            StoreUnavailable: If the session cannot be read
        """
        try:
            item = self.dynamo.get_item(self._key(user_id))
        except (BotoCoreError, ClientError) as e:
            logger.error("Error reading session", extra={
                "user_id": user_id,
                "error": str(e)
            })
            raise StoreUnavailable(f"Failed to read session: {str(e)}") from e

        if not item:
            return DinnerSession()

        last_selected = item.get(LAST_SELECTED_KEY)
        return DinnerSession(
            last_selected_id=str(last_selected) if last_selected else None,
            filters=FilterCriteria.from_dict(item.get(FILTERS_KEY))
        )

    def _set(self, user_id: str, attribute: str, value) -> None:
        try:
            self.dynamo.update_item(
                key=self._key(user_id),
                update_expression="SET #attr = :value",
                expression_values={":value": value},
                expression_names={"#attr": attribute}
            )
        except (BotoCoreError, ClientError) as e:
            logger.error("Error writing session", extra={
                "user_id": user_id,
                "attribute": attribute,
                "error": str(e)
            })
            raise StoreUnavailable(f"Failed to write session: {str(e)}") from e

    def remember_selection(self, user_id: str, recipe_id: str) -> None:
        """Record the recipe just shown as the user's previous selection."""
        self._set(user_id, LAST_SELECTED_KEY, str(recipe_id))
        logger.info("Remembered selection", extra={
            "user_id": user_id,
            "recipe_id": recipe_id
        })

    def save_filters(self, user_id: str, filters: FilterCriteria) -> None:
        """Replace the user's active filters."""
        self._set(user_id, FILTERS_KEY, filters.to_dict())
        logger.info("Saved filters", extra={
            "user_id": user_id,
            "filters": filters.to_dict()
        })

    def clear_filters(self, user_id: str) -> None:
        """Remove every active filter."""
        self.save_filters(user_id, FilterCriteria())
