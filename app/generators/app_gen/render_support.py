"""Utility modules, type declarations and app configuration."""
from typing import Dict, Optional

from app.generators.app_gen.field_registry import FieldRegistry
from app.generators.app_gen.templates import CodeTemplate
from app.generators.app_gen.types import AppSpecification, InfrastructureSelection
from app.generators.app_gen.utils import (
    endpoint_to_function_name,
    to_pascal_case,
    ts_string,
    ts_value,
)


HELPERS = CodeTemplate(
    name="helpers.ts",
    params=(),
    skeleton="""export const formatDate = (date: Date | string): string => {
  const value = typeof date === 'string' ? new Date(date) : date;
  return new Intl.DateTimeFormat('en-US', {
    year: 'numeric',
    month: 'long',
    day: 'numeric',
  }).format(value);
};

export const truncateText = (text: string, maxLength: number): string => {
  if (text.length <= maxLength) return text;
  return text.slice(0, maxLength) + '...';
};

export const generateId = (): string => {
  return Math.random().toString(36).slice(2, 11);
};

export const sleep = (ms: number): Promise<void> => {
  return new Promise((resolve) => setTimeout(resolve, ms));
};
""",
)

CONSTANTS = CodeTemplate(
    name="constants.ts",
    params=("title", "routes"),
    skeleton="""export const APP_NAME = @@title;
export const APP_VERSION = '1.0.0';
export const API_BASE_URL = import.meta.env.VITE_SUPABASE_URL
  ? `${import.meta.env.VITE_SUPABASE_URL}/functions/v1`
  : '/api';

export const API_ROUTES = @@routes as const;
""",
)

TYPES_HEADER = "// Data model types\n"

INTERFACE = CodeTemplate(
    name="interface",
    params=("name", "fields"),
    skeleton="""export interface @@name {
  id: string;
@@fields  createdAt: string;
  updatedAt: string;
}
""",
)

APP_CONFIG = CodeTemplate(
    name="app.config.ts",
    params=("app", "infrastructure"),
    skeleton="""export const appConfig = {
  app: @@app,
  infrastructure: @@infrastructure,
  theme: {
    mode: 'system',
    radius: '0.5rem',
    colors: {
      primary: 'hsl(222.2 47.4% 11.2%)',
      secondary: 'hsl(210 40% 96.1%)',
      accent: 'hsl(210 40% 96.1%)',
      background: 'hsl(0 0% 100%)',
      foreground: 'hsl(222.2 84% 4.9%)',
    },
  },
} as const;

export type AppConfig = typeof appConfig;
""",
)


def _nested(value) -> str:
    """JSON literal re-indented to sit one level inside an object literal."""
    return ts_value(value).replace("\n", "\n  ")


def synthesize_utils(spec: AppSpecification) -> Dict[str, str]:
    routes = {endpoint_to_function_name(endpoint): endpoint for endpoint in spec.api_endpoints}
    return {
        "helpers.ts": HELPERS.render(),
        "constants.ts": CONSTANTS.render(title=ts_string(spec.title), routes=ts_value(routes)),
    }


def synthesize_types(spec: AppSpecification, registry: Optional[FieldRegistry] = None) -> str:
    """One interface per data model, fields looked up in the registry."""
    registry = registry or FieldRegistry.default()
    blocks = [TYPES_HEADER]
    for model in spec.data_models:
        lines = []
        for field in registry.get(model):
            optional = "?" if field.optional else ""
            lines.append(f"  {field.name}{optional}: {field.ts_type};\n")
        blocks.append(INTERFACE.render(name=to_pascal_case(model), fields="".join(lines)))
    return "\n".join(blocks)


def synthesize_config(spec: AppSpecification, infra: Optional[InfrastructureSelection] = None) -> str:
    return APP_CONFIG.render(
        app=_nested(spec.to_dict()),
        infrastructure=_nested(infra.to_dict() if infra is not None else None),
    )
