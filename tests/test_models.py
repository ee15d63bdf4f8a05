from __future__ import annotations

from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from cookbook.models import RECIPE_SCHEMA, Recipe, name_key, validate_recipe


def test_schema_follows_recipe_fields():
    assert list(RECIPE_SCHEMA) == ["name", "ingredients", "instructions", "category", "tags"]
    assert [key for key, rule in RECIPE_SCHEMA.items() if rule.required] == [
        "name",
        "ingredients",
        "instructions",
    ]


def test_create_mode_fills_optional_fields():
    validated = validate_recipe({"name": "Soup", "ingredients": ("water",), "instructions": "Boil."})

    assert validated == {
        "name": "Soup",
        "ingredients": ["water"],
        "instructions": "Boil.",
        "category": "",
        "tags": [],
    }


def test_create_mode_requires_required_fields():
    assert validate_recipe({"name": "Soup", "instructions": "Boil."}) is None


def test_create_mode_coerces_wrong_types():
    validated = validate_recipe(
        {"name": "Soup", "ingredients": ["water", 3], "instructions": ["Boil."], "tags": "hot"}
    )

    assert validated["ingredients"] == []
    assert validated["instructions"] == ""
    assert validated["tags"] == []


def test_update_mode_keeps_only_valid_given_fields():
    validated = validate_recipe(
        {"category": "Soups", "tags": [1], "maliciousField": True}, partial=True
    )

    assert validated == {"category": "Soups"}


def test_non_mapping_is_invalid():
    assert validate_recipe(None) is None
    assert validate_recipe("Soup", partial=True) is None


def test_name_key_ignores_case_and_whitespace():
    assert name_key("  Crème Brûlée ") == name_key("crème brûlée")
    assert name_key(None) == ""


def test_to_dict_orders_keys():
    recipe = Recipe(id=3, name="Soup", ingredients=["water"], instructions="Boil.")

    assert list(recipe.to_dict()) == ["id", "name", "ingredients", "instructions", "category", "tags"]
