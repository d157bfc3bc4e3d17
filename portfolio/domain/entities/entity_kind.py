"""Registry of the list kinds the portfolio editors manage.

Each kind only declares what the collection core needs to know about it:
which fields are required and whether records carry a category.
"""

from dataclasses import dataclass, field
from typing import Any

from portfolio.domain.exceptions import EntityNotFoundError, RecordValidationError


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


@dataclass(frozen=True)
class EntityKind:
    """Static description of one list-style entity kind."""

    name: str
    label: str
    required_fields: tuple[str, ...]
    has_category: bool = False
    defaults: dict[str, Any] = field(default_factory=dict)

    def missing_fields(self, fields: dict[str, Any], category: str | None = None) -> list[str]:
        """Return the required fields that are absent, None or blank."""
        missing = []
        for name in self.required_fields:
            value = category if name == "category" else fields.get(name)
            if is_blank(value):
                missing.append(name)
        return missing

    def validate(
        self,
        fields: dict[str, Any],
        category: str | None = None,
        reference: str | None = None,
    ) -> None:
        missing = self.missing_fields(fields, category)
        if missing:
            raise RecordValidationError(self.label, missing, reference)

    def with_defaults(self, fields: dict[str, Any]) -> dict[str, Any]:
        return {**self.defaults, **fields}


EDUCATION = EntityKind(
    name="education",
    label="Education",
    required_fields=("institution", "degree", "start_date"),
)
EXPERIENCE = EntityKind(
    name="experience",
    label="Experience",
    required_fields=("company", "position", "start_date"),
)
PROJECTS = EntityKind(
    name="projects",
    label="Project",
    required_fields=("title",),
    defaults={"technologies": [], "featured": False},
)
SKILLS = EntityKind(
    name="skills",
    label="Skill",
    required_fields=("name", "category"),
    has_category=True,
    defaults={"level": 50},
)

ENTITY_KINDS: dict[str, EntityKind] = {
    kind.name: kind for kind in (EDUCATION, EXPERIENCE, PROJECTS, SKILLS)
}


def get_entity_kind(name: str) -> EntityKind:
    """Look up a kind by name, raising EntityNotFoundError when unknown."""
    try:
        return ENTITY_KINDS[name]
    except KeyError:
        raise EntityNotFoundError("EntityKind", name) from None
