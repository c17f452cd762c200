"""
Tests for per-user session storage.
"""
from decimal import Decimal

import pytest
from botocore.exceptions import ClientError

from dinner_picker.models.recipe import FilterCriteria
from dinner_picker.services.exceptions import StoreUnavailable
from dinner_picker.services.session import DinnerSession, SessionStore

def test_missing_session_is_empty(dynamo_mock):
    """Test that a user without a stored session gets an empty one."""
    session = SessionStore(dynamo_mock).get_session("123")

    dynamo_mock.get_item.assert_called_once_with({"PK": "USER#123", "SK": "SESSION"})
    assert session == DinnerSession()
    assert session.last_selected_id is None
    assert not session.filters.is_active

def test_stored_session_is_loaded(dynamo_mock):
    """Test session item mapping."""
    dynamo_mock.get_item.return_value = {
        "PK": "USER#123",
        "SK": "SESSION",
        "lastSelectedRecipeId": "abc",
        "filters": {"cuisine": "thai", "max_cook_time": Decimal("30")}
    }

    session = SessionStore(dynamo_mock).get_session("123")

    assert session.last_selected_id == "abc"
    assert session.filters == FilterCriteria(cuisine="thai", max_cook_time=30)

def test_remember_selection(dynamo_mock):
    """Test that the last shown recipe id is written as a string."""
    SessionStore(dynamo_mock).remember_selection("123", 42)

    dynamo_mock.update_item.assert_called_once_with(
        key={"PK": "USER#123", "SK": "SESSION"},
        update_expression="SET #attr = :value",
        expression_values={":value": "42"},
        expression_names={"#attr": "lastSelectedRecipeId"}
    )

def test_save_filters_drops_unset_fields(dynamo_mock):
    """Test the stored filter map."""
    SessionStore(dynamo_mock).save_filters("123", FilterCriteria(meal_type="soup", max_cook_time=0))

    kwargs = dynamo_mock.update_item.call_args.kwargs
    assert kwargs["expression_names"] == {"#attr": "filters"}
    assert kwargs["expression_values"] == {":value": {"meal_type": "soup", "max_cook_time": 0}}

def test_clear_filters(dynamo_mock):
    """Test that clearing stores an empty filter map."""
    SessionStore(dynamo_mock).clear_filters("123")

    assert dynamo_mock.update_item.call_args.kwargs["expression_values"] == {":value": {}}

def test_store_failure(dynamo_mock):
    """Test that DynamoDB errors surface as StoreUnavailable."""
    error = ClientError({"Error": {"Code": "InternalServerError", "Message": "boom"}}, "GetItem")
    dynamo_mock.get_item.side_effect = error
    dynamo_mock.update_item.side_effect = error
    store = SessionStore(dynamo_mock)

    with pytest.raises(StoreUnavailable):
        store.get_session("123")
    with pytest.raises(StoreUnavailable):
        store.remember_selection("123", "1")
