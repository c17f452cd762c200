"""
Pytest configuration and shared fixtures.
"""
import os

os.environ.setdefault("RECIPES_TABLE_NAME", "test-recipes")
os.environ.setdefault("TELEGRAM_BOT_TOKEN", "test_token")
os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "true")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")

import json
import pytest
from typing import List
from unittest.mock import Mock

from dinner_picker.models.recipe import Recipe

def make_recipe(
    recipe_id="1",
    name="Test Recipe",
    cuisine="italian",
    meal_type="main",
    cook_time=30,
    ingredients=("1 cup test ingredient", "2 tbsp olive oil"),
    source="Personal collection",
    created_at="2024-01-01T00:00:00+00:00"
) -> Recipe:
    """Create a recipe for testing."""
    return Recipe(
        id=recipe_id,
        name=name,
        cuisine=cuisine,
        meal_type=meal_type,
        cook_time=cook_time,
        ingredients=tuple(ingredients),
        source=source,
        created_at=created_at
    )

@pytest.fixture
def sample_recipes() -> List[Recipe]:
    """A small recipe box, newest first."""
    return [
        make_recipe(
            "4", "Kale Soup", "italian", "soup", 25,
            ["2 cups kale", "1 onion", "4 cups broth"]
        ),
        make_recipe(
            "3", "Green Curry", "thai", "main", 35,
            ["1 can coconut milk", "2 tbsp green curry paste", "1 lb chicken"]
        ),
        make_recipe(
            "2", "Pasta Aglio e Olio", "italian", "main", 15,
            ["200g spaghetti", "3 cloves Garlic", "1/4 cup olive oil"]
        ),
        make_recipe(
            "1", "Dal", "indian", "main", 40,
            ["1 cup lentils", "2 tsp cumin"]
        )
    ]

@pytest.fixture
def telegram_mock():
    """Mock Telegram client for testing."""
    mock = Mock()
    mock.send_message.return_value = {
        "statusCode": 200,
        "body": json.dumps({"ok": True})
    }
    return mock

@pytest.fixture
def dynamo_mock():
    """Mock DynamoDB client for testing."""
    mock = Mock()
    mock.query_items.return_value = []
    mock.get_item.return_value = None
    return mock

@pytest.fixture
def recipe_factory():
    """Factory for one-off recipes."""
    return make_recipe
