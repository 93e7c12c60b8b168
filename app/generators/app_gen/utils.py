"""Utility functions for app generation."""
import json
import re


def model_to_table(model_name: str) -> str:
    """Table name for a data model: lower-cased with a trailing 's' (Policy -> policys)."""
    return model_name.lower() + "s"


def endpoint_to_function_name(endpoint: str) -> str:
    """Edge function name for an endpoint path (/api/recipes/top -> recipes-top)."""
    name = endpoint
    if name.startswith("/api/"):
        name = name[len("/api/"):]
    name = name.strip("/")
    return name.replace("/", "-")


def slugify(text: str) -> str:
    """Lower-case kebab slug (RecipeShare -> recipeshare, My App -> my-app)."""
    slug = re.sub(r"[^a-z0-9]+", "-", text.lower())
    return slug.strip("-") or "app"


def to_pascal_case(name: str) -> str:
    """Join the alphanumeric words of a name into PascalCase (recipe step -> RecipeStep)."""
    words = re.split(r"[^A-Za-z0-9]+", name)
    return "".join(w[0].upper() + w[1:] for w in words if w)


def ts_string(value: str) -> str:
    """Quote a value as a TypeScript string literal."""
    return json.dumps(value)


def ts_value(value) -> str:
    """Render a JSON-compatible value as a TypeScript literal, indented two spaces."""
    return json.dumps(value, indent=2)
