"""Static infrastructure and template catalogs, loaded from packaged YAML."""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from app.core.errors import InvalidInfrastructureId
from app.generators.app_gen.types import InfrastructureSelection

# Ids that switch template variants on
LOCAL_FIRST_DATABASE = "fireproof"
ALCHEMY_RPC = "alchemy"

DATA_DIR = Path(__file__).resolve().parents[2] / "data"


@dataclass(frozen=True)
class InfrastructureCatalog:
    databases: List[Dict[str, Any]]
    rpc: List[Dict[str, Any]]
    storage: List[Dict[str, Any]]
    paymaster: List[Dict[str, Any]]
    recommended: Dict[str, Dict[str, str]]

    def ids(self, category: str) -> List[str]:
        entries = {
            "database": self.databases,
            "rpc": self.rpc,
            "storage": self.storage,
            "paymaster": self.paymaster,
        }[category]
        return [entry["id"] for entry in entries]

    def validate(self, selection: InfrastructureSelection) -> None:
        """Raise InvalidInfrastructureId for the first id not in the catalog."""
        checks = [
            ("database", selection.database),
            ("storage", selection.storage),
            ("rpc", selection.rpc),
        ]
        if selection.paymaster is not None:
            checks.append(("paymaster", selection.paymaster))
        for category, value in checks:
            if value not in self.ids(category):
                raise InvalidInfrastructureId(category, value)

    def recommended_stack(self, app_type: str) -> InfrastructureSelection:
        stack = self.recommended.get(app_type) or self.recommended["default"]
        return InfrastructureSelection.from_dict(stack)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "databases": self.databases,
            "rpc": self.rpc,
            "storage": self.storage,
            "paymaster": self.paymaster,
            "recommended": self.recommended,
        }


def _read_yaml(path: Path) -> Dict[str, Any]:
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError(f"Catalog file must be a YAML mapping: {path}")
    return raw


def load_infrastructure_catalog(path: Optional[Path] = None) -> InfrastructureCatalog:
    raw = _read_yaml(path or DATA_DIR / "infrastructure.yml")
    return InfrastructureCatalog(
        databases=raw.get("databases", []),
        rpc=raw.get("rpc", []),
        storage=raw.get("storage", []),
        paymaster=raw.get("paymaster", []),
        recommended=raw.get("recommended", {}),
    )


def load_templates(path: Optional[Path] = None) -> List[Dict[str, Any]]:
    raw = _read_yaml(path or DATA_DIR / "templates.yml")
    return raw.get("templates", [])


def find_template(template_id: str, templates: Optional[List[Dict[str, Any]]] = None) -> Optional[Dict[str, Any]]:
    """Return the catalog entry for a template id, or None if it is not a known template."""
    for template in templates if templates is not None else load_templates():
        if template.get("id") == template_id:
            return template
    return None
