"""
Tests for the shareable recipe summary.
"""
from dinner_picker.services.share import format_share_text

def test_format_share_text(recipe_factory):
    """Test the full shareable text."""
    recipe = recipe_factory(
        name="Dal",
        cuisine="indian",
        cook_time=25,
        ingredients=["1 cup lentils", "2 tsp cumin"]
    )

    assert format_share_text(recipe) == (
        "🍽️ Tonight's Dinner: Dal\n"
        "\n"
        "📋 Shopping List:\n"
        "• 1 cup lentils\n"
        "• 2 tsp cumin\n"
        "\n"
        "⏱️ Cook Time: 25 minutes\n"
        "🌍 Cuisine: indian\n"
        "📖 Source: Personal collection"
    )

def test_format_share_text_blank_source(recipe_factory):
    """Test that a blank source falls back to the default attribution."""
    text = format_share_text(recipe_factory(source=""))
    assert text.endswith("📖 Source: Personal collection")

def test_format_share_text_keeps_ingredient_order(recipe_factory):
    """Test that ingredients are listed in recipe order."""
    text = format_share_text(recipe_factory(ingredients=["b", "a", "c"]))
    assert "• b\n• a\n• c" in text
