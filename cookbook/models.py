from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Mapping, Optional

TEXT = "text"
TEXT_LIST = "text_list"


def _rule(kind: str, *, required: bool) -> Dict[str, Any]:
    return {"kind": kind, "required": required}


@dataclass
class Recipe:
    """Domain object representing a stored recipe.

    Field metadata doubles as the validation schema: ``kind`` names the
    accepted value shape and ``required`` marks fields that must be supplied
    when a recipe is created. ``id`` carries no metadata because it is always
    assigned by the service, never taken from input.
    """

    name: str = field(metadata=_rule(TEXT, required=True))
    ingredients: List[str] = field(metadata=_rule(TEXT_LIST, required=True))
    instructions: str = field(metadata=_rule(TEXT, required=True))
    category: str = field(default="", metadata=_rule(TEXT, required=False))
    tags: List[str] = field(default_factory=list, metadata=_rule(TEXT_LIST, required=False))
    id: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "ingredients": list(self.ingredients),
            "instructions": self.instructions,
            "category": self.category,
            "tags": list(self.tags),
        }


@dataclass(frozen=True)
class FieldRule:
    kind: str
    required: bool

    def accepts(self, value: Any) -> bool:
        if self.kind == TEXT:
            return isinstance(value, str)
        return isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value)

    def zero_value(self) -> Any:
        return "" if self.kind == TEXT else []

    def normalize(self, value: Any) -> Any:
        return value if self.kind == TEXT else list(value)


RECIPE_SCHEMA: Dict[str, FieldRule] = {
    f.name: FieldRule(kind=f.metadata["kind"], required=f.metadata["required"])
    for f in fields(Recipe)
    if "kind" in f.metadata
}


def name_key(value: Any) -> str:
    """Return the key used to compare recipe names."""

    if not isinstance(value, str):
        return ""
    return value.strip().casefold()


def validate_recipe(data: Any, *, partial: bool = False) -> Optional[Dict[str, Any]]:
    """Sanitize ``data`` against :data:`RECIPE_SCHEMA`.

    Only schema fields are copied; anything else in ``data`` is dropped.

    When ``partial`` is false the result describes a new recipe: missing
    required fields make the whole input invalid (``None`` is returned),
    wrongly typed values fall back to the field's zero value and absent
    optional fields are filled in, so the result always carries every schema
    field. The name must be a non-blank string and is stored trimmed.

    When ``partial`` is true the result is an update set: absent fields stay
    absent and wrongly typed values are left out instead of being reset.
    """

    if not isinstance(data, Mapping):
        return None

    validated: Dict[str, Any] = {}
    for key, rule in RECIPE_SCHEMA.items():
        if key not in data:
            if rule.required and not partial:
                return None
            continue

        value = data[key]
        if rule.accepts(value):
            validated[key] = rule.normalize(value)
        elif not partial:
            validated[key] = rule.zero_value()

    if partial:
        return validated

    name = validated["name"].strip()
    if not name:
        return None
    validated["name"] = name

    for key, rule in RECIPE_SCHEMA.items():
        validated.setdefault(key, rule.zero_value())
    return validated


__all__ = ["FieldRule", "RECIPE_SCHEMA", "Recipe", "name_key", "validate_recipe"]
