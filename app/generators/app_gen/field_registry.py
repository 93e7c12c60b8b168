"""Model-name to field-template lookup shared by the type and schema renderers."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Tuple


@dataclass(frozen=True)
class ModelField:
    """One model-specific field, in its TypeScript and SQL spellings."""
    name: str
    ts_type: str
    column: str
    sql_type: str
    optional: bool = False


USER_FIELDS = (
    ModelField("email", "string", "email", "TEXT UNIQUE NOT NULL"),
    ModelField("name", "string", "name", "TEXT"),
    ModelField("avatar", "string", "avatar_url", "TEXT", optional=True),
)

CONTENT_FIELDS = (
    ModelField("title", "string", "title", "TEXT NOT NULL"),
    ModelField("content", "string", "content", "TEXT"),
    ModelField("authorId", "string", "author_id", "UUID REFERENCES auth.users(id)"),
    ModelField("published", "boolean", "published", "BOOLEAN DEFAULT false"),
)

GENERIC_FIELDS = (
    ModelField("name", "string", "name", "TEXT NOT NULL"),
    ModelField("description", "string", "description", "TEXT", optional=True),
)


@dataclass(frozen=True)
class FieldRegistry:
    """
    Exact-name lookup from data model to field template.

    Names without an entry get ``generic``. ``with_model`` returns an extended
    copy so the default registry is never mutated.
    """
    mapping: Dict[str, Tuple[ModelField, ...]] = field(default_factory=dict)
    generic: Tuple[ModelField, ...] = GENERIC_FIELDS

    def get(self, model_name: str) -> Tuple[ModelField, ...]:
        return self.mapping.get(model_name, self.generic)

    def with_model(self, model_name: str, fields: Tuple[ModelField, ...]) -> "FieldRegistry":
        mapping = dict(self.mapping)
        mapping[model_name] = tuple(fields)
        return FieldRegistry(mapping=mapping, generic=self.generic)

    @staticmethod
    def default() -> "FieldRegistry":
        return FieldRegistry(mapping={
            "User": USER_FIELDS,
            "Post": CONTENT_FIELDS,
            "Content": CONTENT_FIELDS,
        })
