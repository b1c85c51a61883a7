"""Schema validation per content kind.

Validation never raises for a malformed payload. ``validate_content`` returns a
``ValidationResult`` holding either the typed item or the list of violated
constraints; callers that want exception semantics call ``unwrap()``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from portfolio_content.errors import ContentValidationError
from portfolio_content.models import (
    BlogPost,
    ContentBase,
    ContentKind,
    Experience,
    PortfolioMetadata,
    Project,
    Skill,
    SkillCategory,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

ItemT = TypeVar("ItemT", bound=ContentBase)

MODELS: dict[ContentKind, type[ContentBase]] = {
    ContentKind.PROJECT: Project,
    ContentKind.SKILL: Skill,
    ContentKind.EXPERIENCE: Experience,
    ContentKind.BLOG: BlogPost,
    ContentKind.SKILL_CATEGORY: SkillCategory,
    ContentKind.METADATA: PortfolioMetadata,
}

_KINDS: dict[type[ContentBase], ContentKind] = {model: kind for kind, model in MODELS.items()}


@dataclass(frozen=True)
class ValidationResult(Generic[ItemT]):
    """Outcome of validating one payload."""

    kind: ContentKind
    item: ItemT | None = None
    errors: list[dict[str, Any]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.item is not None and not self.errors

    def unwrap(self) -> ItemT:
        """Return the validated item or raise ``ContentValidationError``."""
        if self.item is None or self.errors:
            raise ContentValidationError(self.kind.value, self.errors)
        return self.item


def model_for(kind: ContentKind | str) -> type[ContentBase]:
    return MODELS[ContentKind(kind)]


def kind_of(item: ContentBase | type[ContentBase]) -> ContentKind:
    """Return the kind tag of a content model instance or class."""
    model = item if isinstance(item, type) else type(item)
    try:
        return _KINDS[model]
    except KeyError:
        raise TypeError(f"{model.__name__} is not a content model") from None


def _errors(exc: ValidationError) -> list[dict[str, Any]]:
    return [{"loc": tuple(e["loc"]), "msg": e["msg"], "type": e["type"]} for e in exc.errors()]


def validate_content(
    kind: ContentKind | str,
    payload: ContentBase | Mapping[str, Any],
) -> ValidationResult[Any]:
    """Validate ``payload`` against the schema of ``kind``.

    Model instances are re-validated from their field values, so an item built
    with ``model_construct`` or mutated after construction is still checked.
    """
    kind = ContentKind(kind)
    model = MODELS[kind]
    data = payload.model_dump() if isinstance(payload, BaseModel) else dict(payload)
    try:
        item = model.model_validate(data)
    except ValidationError as exc:
        return ValidationResult(kind=kind, errors=_errors(exc))
    return ValidationResult(kind=kind, item=item)
