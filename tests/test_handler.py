"""
Tests for the Telegram webhook handler.
"""
import json
import pytest
import requests
from unittest.mock import Mock, patch

from dinner_picker.handlers.telegram.handler import handler
from dinner_picker.models.recipe import FilterCriteria
from dinner_picker.services.exceptions import StoreUnavailable
from dinner_picker.services.recipe import RecipeService
from dinner_picker.services.session import DinnerSession
from dinner_picker.utils.telegram import format_empty_selection, format_store_error

@pytest.fixture
def lambda_context():
    """Mock Lambda context."""
    context = Mock()
    context.aws_request_id = "req-123"
    context.function_name = "dinner-picker"
    context.function_version = "$LATEST"
    context.memory_limit_in_mb = 128
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:dinner-picker"
    return context

@pytest.fixture
def store(sample_recipes):
    """Mock recipe store holding the sample recipes."""
    mock = Mock()
    mock.list_recipes.return_value = list(sample_recipes)
    return mock

@pytest.fixture
def sessions():
    """Mock session store with an empty session."""
    mock = Mock()
    mock.get_session.return_value = DinnerSession()
    return mock

@pytest.fixture
def clients(telegram_mock, store, sessions):
    """Patch the shared clients used by the command handlers."""
    with patch("dinner_picker.utils.clients._telegram", telegram_mock), \
         patch("dinner_picker.utils.clients._recipes", RecipeService(store=store)), \
         patch("dinner_picker.utils.clients._sessions", sessions):
        yield telegram_mock

def message_event(text, user_id=42, chat_id=42):
    return {
        "body": json.dumps({
            "update_id": 1,
            "message": {
                "message_id": 10,
                "from": {"id": user_id, "username": "cook"},
                "chat": {"id": chat_id, "type": "private"},
                "date": 1700000000,
                "text": text
            }
        })
    }

def callback_event(data, user_id=42, chat_id=42):
    return {
        "body": json.dumps({
            "update_id": 2,
            "callback_query": {
                "id": "cb-1",
                "from": {"id": user_id},
                "message": {"message_id": 11, "chat": {"id": chat_id, "type": "private"}},
                "data": data
            }
        })
    }

def body_of(response):
    return json.loads(response["body"])

def sent_text(telegram_mock):
    return telegram_mock.send_message.call_args.kwargs["text"]

def test_dinner_picks_and_remembers(clients, sessions, lambda_context):
    """Test that /dinner shows a recipe and remembers it."""
    sessions.get_session.return_value = DinnerSession(last_selected_id="4")

    response = handler(message_event("/dinner"), lambda_context)

    recipe_id = body_of(response)["result"]["recipe_id"]
    assert response["statusCode"] == 200
    assert recipe_id != "4"
    sessions.get_session.assert_called_once_with("42")
    sessions.remember_selection.assert_called_once_with("42", recipe_id)
    keyboard = clients.send_message.call_args.kwargs["reply_markup"]
    assert keyboard["inline_keyboard"][0][0]["callback_data"] == f"share:{recipe_id}"

def test_dinner_respects_filters(clients, sessions, lambda_context):
    """Test that the chat's filters narrow the pick."""
    sessions.get_session.return_value = DinnerSession(filters=FilterCriteria(cuisine="thai"))

    response = handler(message_event("/dinner"), lambda_context)

    assert body_of(response)["result"]["recipe_id"] == "3"
    assert "Green Curry" in sent_text(clients)

def test_dinner_no_match(clients, sessions, lambda_context):
    """Test the empty-selection message."""
    sessions.get_session.return_value = DinnerSession(filters=FilterCriteria(cuisine="french"))

    response = handler(message_event("/dinner"), lambda_context)

    assert response["statusCode"] == 200
    assert body_of(response)["error_code"] == 404
    assert sent_text(clients) == format_empty_selection()
    sessions.remember_selection.assert_not_called()

def test_dinner_store_unavailable(clients, store, lambda_context):
    """Test the store error message when recipes cannot be loaded."""
    store.list_recipes.side_effect = StoreUnavailable("down")

    response = handler(message_event("/dinner"), lambda_context)

    assert body_of(response)["error_code"] == 503
    assert sent_text(clients) == format_store_error()

def test_dinner_remember_failure_still_shows_recipe(clients, sessions, lambda_context):
    """Test that losing the selection memory does not hide the pick."""
    sessions.remember_selection.side_effect = StoreUnavailable("down")

    response = handler(message_event("/dinner"), lambda_context)

    assert body_of(response)["ok"] is True
    clients.send_message.assert_called_once()

def test_pick_again_callback(clients, sessions, lambda_context):
    """Test the "Pick another" button."""
    response = handler(callback_event("pick_again"), lambda_context)

    clients.answer_callback_query.assert_called_once_with("cb-1")
    assert body_of(response)["ok"] is True
    sessions.remember_selection.assert_called_once()

def test_share_callback(clients, lambda_context):
    """Test the "Copy & Share" button."""
    response = handler(callback_event("share:1"), lambda_context)

    assert body_of(response)["result"] == {"recipe_id": "1"}
    assert "<pre>" in sent_text(clients)
    assert "• 1 cup lentils" in sent_text(clients)

def test_share_last_pick(clients, sessions, lambda_context):
    """Test /share with the remembered recipe."""
    sessions.get_session.return_value = DinnerSession(last_selected_id="2")

    handler(message_event("/share"), lambda_context)

    assert "Pasta Aglio e Olio" in sent_text(clients)

def test_share_without_pick(clients, lambda_context):
    """Test /share before anything was picked."""
    response = handler(message_event("/share"), lambda_context)

    assert body_of(response)["error_code"] == 404
    assert "Send /dinner first" in sent_text(clients)

def test_filter_command_saves_merged_filters(clients, sessions, lambda_context):
    """Test that /filter keeps existing filters it does not mention."""
    sessions.get_session.return_value = DinnerSession(filters=FilterCriteria(meal_type="main"))

    response = handler(message_event("/filter cuisine=Italian time=20"), lambda_context)

    sessions.save_filters.assert_called_once_with(
        "42", FilterCriteria(cuisine="italian", meal_type="main", max_cook_time=20)
    )
    assert body_of(response)["result"]["count"] == 1
    assert "1 recipe available with current filters" in sent_text(clients)

def test_filter_command_invalid(clients, sessions, lambda_context):
    """Test an unknown filter name."""
    response = handler(message_event("/filter colour=red"), lambda_context)

    assert body_of(response)["error_code"] == 400
    assert "Unknown filter" in sent_text(clients)
    sessions.save_filters.assert_not_called()

def test_filters_overview(clients, lambda_context):
    """Test /filters lists the options."""
    handler(message_event("/filters"), lambda_context)

    assert "Cuisines: indian, italian, thai" in sent_text(clients)

def test_clearfilters(clients, sessions, lambda_context):
    """Test /clearfilters."""
    handler(message_event("/clearfilters"), lambda_context)

    sessions.clear_filters.assert_called_once_with("42")

def test_addrecipe_incomplete(clients, store, lambda_context):
    """Test that an incomplete form is answered with guidance."""
    response = handler(message_event("/addrecipe\nName: Dal"), lambda_context)

    assert body_of(response)["error_code"] == 400
    assert "Please fill in all required fields" in sent_text(clients)
    store.insert_recipe.assert_not_called()

def test_addrecipe_success(clients, store, recipe_factory, lambda_context):
    """Test adding a recipe from a complete form."""
    store.insert_recipe.return_value = recipe_factory("9", name="Dal", cuisine="indian")

    response = handler(message_event(
        "/addrecipe\n"
        "Name: Dal\n"
        "Cuisine: Indian\n"
        "Meal type: Main\n"
        "Cook time: 25\n"
        "Ingredients:\n"
        "1 cup lentils\n"
        "2 tsp cumin"
    ), lambda_context)

    draft = store.insert_recipe.call_args.args[0]
    assert draft.main_ingredients == ("cup lentils", "tsp cumin")
    assert body_of(response)["result"]["recipe_id"] == "9"
    assert "Recipe added successfully!" in sent_text(clients)

def test_recipes_and_refresh(clients, store, lambda_context):
    """Test /recipes and /refresh."""
    handler(message_event("/recipes"), lambda_context)
    assert "4 recipes available" in sent_text(clients)

    store.list_recipes.return_value = []
    response = handler(message_event("/refresh"), lambda_context)
    assert body_of(response)["result"] == {"count": 0}

def test_unknown_command(clients, lambda_context):
    """Test the fallback reply."""
    handler(message_event("/lasagna"), lambda_context)

    assert "Unrecognized command" in sent_text(clients)

def test_rate_limit_propagates_429(clients, lambda_context):
    """Test that Telegram rate limiting returns 429 so the update is retried."""
    clients.send_message.side_effect = requests.exceptions.HTTPError(response=Mock(status_code=429))

    response = handler(message_event("/help"), lambda_context)

    assert response["statusCode"] == 429

def test_unexpected_error_returns_200(clients, sessions, lambda_context):
    """Test that unexpected errors do not cause endless redelivery."""
    sessions.get_session.side_effect = RuntimeError("boom")

    response = handler(message_event("/dinner"), lambda_context)

    assert response["statusCode"] == 200
    assert body_of(response)["error_code"] == 500
    assert "something went wrong" in sent_text(clients)

def test_non_text_update(clients, lambda_context):
    """Test messages without text."""
    event = {"body": json.dumps({"message": {"chat": {"id": 1}, "from": {"id": 1}}})}

    response = handler(event, lambda_context)

    assert body_of(response)["error_code"] == 400
    clients.send_message.assert_not_called()

def test_stale_callback_query_still_runs_action(clients, sessions, lambda_context):
    """Test that a rejected callback answer does not block the button action."""
    clients.answer_callback_query.side_effect = requests.exceptions.HTTPError(
        response=Mock(status_code=400)
    )

    response = handler(callback_event("pick_again"), lambda_context)

    assert response["statusCode"] == 200
    assert body_of(response)["ok"] is True
    sessions.remember_selection.assert_called_once()
    clients.send_message.assert_called_once()

def test_callback_answer_rate_limited(clients, lambda_context):
    """Test that a 429 while answering a callback is propagated."""
    clients.answer_callback_query.side_effect = requests.exceptions.HTTPError(
        response=Mock(status_code=429)
    )

    response = handler(callback_event("pick_again"), lambda_context)

    assert response["statusCode"] == 429
    clients.send_message.assert_not_called()

def test_whitespace_only_message(clients, lambda_context):
    """Test that a blank message is treated like one without text."""
    response = handler(message_event("   \n "), lambda_context)

    assert response["statusCode"] == 200
    assert body_of(response)["error_code"] == 400
    clients.send_message.assert_not_called()

def test_share_reloads_recipes_for_unknown_id(clients, store, sample_recipes, recipe_factory, lambda_context):
    """Test that a recipe added elsewhere is found after reloading the snapshot."""
    handler(message_event("/recipes"), lambda_context)
    store.list_recipes.return_value = [recipe_factory("9", name="Dal Makhani")] + sample_recipes

    response = handler(callback_event("share:9"), lambda_context)

    assert body_of(response)["result"] == {"recipe_id": "9"}
    assert "Dal Makhani" in sent_text(clients)
    assert store.list_recipes.call_count == 2

def test_share_recipe_missing_after_reload(clients, store, lambda_context):
    """Test the message for a recipe id that is not in the recipe box."""
    response = handler(callback_event("share:99"), lambda_context)

    assert body_of(response)["error_code"] == 404
    assert "no longer in the recipe box" in sent_text(clients)
    assert "Send /dinner first" not in sent_text(clients)
