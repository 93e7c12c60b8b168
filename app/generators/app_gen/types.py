"""Dataclasses for app generation."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple


COMPLEXITY_LEVELS = ("simple", "medium", "complex")


def _string_list(data: Dict[str, Any], key: str) -> Tuple[str, ...]:
    value = data[key]
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise TypeError(f"'{key}' must be a list of strings")
    return tuple(value)


def _unique(items: Tuple[str, ...]) -> Tuple[str, ...]:
    return tuple(dict.fromkeys(items))


@dataclass(frozen=True)
class AppSpecification:
    """Structured description of the app to generate."""
    title: str
    description: str
    features: Tuple[str, ...]
    data_models: Tuple[str, ...]
    api_endpoints: Tuple[str, ...]
    integrations: Tuple[str, ...]
    ui_components: Tuple[str, ...]
    complexity: str = "simple"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppSpecification":
        """
        Build a specification from the camelCase JSON shape returned by the LLM.

        Raises KeyError for missing fields, TypeError for ill-typed ones and
        ValueError for an unknown complexity level.
        """
        if not isinstance(data, dict):
            raise TypeError("specification must be a JSON object")
        title = data["title"]
        description = data["description"]
        if not isinstance(title, str) or not isinstance(description, str):
            raise TypeError("'title' and 'description' must be strings")
        complexity = data["complexity"]
        if complexity not in COMPLEXITY_LEVELS:
            raise ValueError(f"unknown complexity: {complexity!r}")
        return cls(
            title=title,
            description=description,
            features=_string_list(data, "features"),
            data_models=_unique(_string_list(data, "dataModels")),
            api_endpoints=_string_list(data, "apiEndpoints"),
            integrations=_unique(_string_list(data, "integrations")),
            ui_components=_string_list(data, "uiComponents"),
            complexity=complexity,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "features": list(self.features),
            "dataModels": list(self.data_models),
            "apiEndpoints": list(self.api_endpoints),
            "integrations": list(self.integrations),
            "uiComponents": list(self.ui_components),
            "complexity": self.complexity,
        }


def fallback_specification(prompt: str) -> AppSpecification:
    """Specification used when the LLM answer cannot be parsed."""
    return AppSpecification(
        title="Generated App",
        description=prompt,
        features=("User Authentication", "Data Management", "Responsive Design"),
        data_models=("User", "Content"),
        api_endpoints=("/api/users", "/api/content"),
        integrations=(),
        ui_components=("Header", "MainContent", "Footer"),
        complexity="simple",
    )


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of requirement analysis; degraded marks a fallback specification."""
    spec: AppSpecification
    degraded: bool = False
    reason: Optional[str] = None


@dataclass(frozen=True)
class InfrastructureSelection:
    """Caller's choice of database, storage, RPC provider and paymaster."""
    database: str
    storage: str
    rpc: str
    paymaster: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InfrastructureSelection":
        return cls(
            database=data["database"],
            storage=data["storage"],
            rpc=data["rpc"],
            paymaster=data.get("paymaster"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "database": self.database,
            "storage": self.storage,
            "rpc": self.rpc,
            "paymaster": self.paymaster,
        }


@dataclass
class GeneratedCode:
    components: Dict[str, str]
    hooks: Dict[str, str]
    utils: Dict[str, str]
    types: str
    config: str


@dataclass
class GeneratedBackend:
    schema: str
    edge_functions: Dict[str, str]
    rls: List[str]


@dataclass
class DeploymentDescription:
    env_vars: Dict[str, str]
    build_commands: List[str]


@dataclass
class GeneratedArtifactBundle:
    """Everything produced for one generation request."""
    title: str
    description: str
    features: List[str]
    code: GeneratedCode
    backend: GeneratedBackend
    deployment: DeploymentDescription
    degraded: bool = False
    infrastructure: Optional[InfrastructureSelection] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "features": list(self.features),
            "code": {
                "components": dict(self.code.components),
                "hooks": dict(self.code.hooks),
                "utils": dict(self.code.utils),
                "types": self.code.types,
                "config": self.code.config,
            },
            "backend": {
                "schema": self.backend.schema,
                "edgeFunctions": dict(self.backend.edge_functions),
                "rls": list(self.backend.rls),
            },
            "deployment": {
                "envVars": dict(self.deployment.env_vars),
                "buildCommands": list(self.deployment.build_commands),
            },
            "degraded": self.degraded,
            "infrastructure": self.infrastructure.to_dict() if self.infrastructure else None,
        }


@dataclass
class GeneratedFile:
    """Represents a generated file."""
    path: str  # Relative path from output directory
    content: str  # File contents
