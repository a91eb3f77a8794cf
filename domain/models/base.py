"""
Shared pydantic base for domain entities.

Entities serialise with camelCase keys (``setDetails``, ``templateId``,
``loggedWorkouts``) so exported snapshots stay readable by older builds,
while Python code uses snake_case attribute names.
"""

from typing import Annotated, Any, Dict, Iterable, List

from pydantic import AfterValidator, BaseModel, Field
from pydantic.alias_generators import to_camel


def _require_non_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("id must not be blank")
    return value


EntityId = Annotated[
    str,
    Field(min_length=1, description="Identifier, immutable once created"),
    AfterValidator(_require_non_blank),
]


def find_duplicate_ids(items: Iterable[Any]) -> List[str]:
    """
    Return ids that appear more than once, in order of first repetition.

    Args:
        items: Objects exposing an ``id`` attribute.

    Returns:
        Duplicate ids (each listed once).
    """
    seen = set()
    duplicates: List[str] = []
    for item in items:
        if item.id in seen and item.id not in duplicates:
            duplicates.append(item.id)
        seen.add(item.id)
    return duplicates


class DomainModel(BaseModel):
    """Immutable base model with camelCase wire aliases."""

    def to_wire(self) -> Dict[str, Any]:
        """
        Dump to the interchange shape.

        Returns:
            JSON-compatible dict using camelCase keys, unset optionals omitted.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "frozen": True,  # whole-entity replacement only
        "extra": "ignore",
    }
