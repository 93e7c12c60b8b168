"""Turns a free-text app request into an AppSpecification via one LLM call."""
import json
import logging
import re
from typing import Any, Dict, List, Optional

from app.generators.app_gen.catalog import find_template
from app.generators.app_gen.templates import CodeTemplate
from app.generators.app_gen.types import (
    AnalysisResult,
    AppSpecification,
    fallback_specification,
)

log = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = (
    "You are an expert app architect. Analyze app requests and respond with "
    "a single valid JSON object and nothing else."
)

ANALYSIS_PROMPT = CodeTemplate(
    name="analysis-prompt",
    params=("prompt", "template_context"),
    skeleton="""Analyze this app request and produce a structured specification.

Request: "@@prompt"
@@template_context
Respond with JSON using exactly these fields:
{
  "title": "Short app name",
  "description": "One or two sentence description",
  "features": ["feature 1", "feature 2"],
  "dataModels": ["User", "Post"],
  "apiEndpoints": ["/api/posts"],
  "integrations": ["stripe"],
  "uiComponents": ["Header", "MainContent", "Footer"],
  "complexity": "simple | medium | complex"
}

Data model names are singular PascalCase nouns. API endpoints are paths under /api/.
""",
)

JSON_OBJECT_RE = re.compile(r"\{.*\}", re.DOTALL)


def parse_specification(content: str) -> AppSpecification:
    """
    Extract and validate the specification JSON embedded in a model reply.

    Raises ValueError, KeyError or TypeError when the reply is unusable.
    """
    match = JSON_OBJECT_RE.search(content or "")
    if not match:
        raise ValueError("No JSON object found in response")
    data = json.loads(match.group(0))
    return AppSpecification.from_dict(data)


class RequirementAnalyzer:
    """
    Builds the analysis instruction, calls the completion client and parses
    the answer. ``client`` needs a ``complete(system, user, max_tokens,
    temperature) -> str`` method; its exceptions propagate unchanged.
    """

    def __init__(
        self,
        client,
        max_tokens: int = 2000,
        temperature: float = 0.3,
        templates: Optional[List[Dict[str, Any]]] = None,
    ):
        self.client = client
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.templates = templates

    def build_prompt(self, prompt: str, template_id: Optional[str] = None) -> str:
        template_context = ""
        if template_id:
            template = find_template(template_id, self.templates)
            if template is None:
                template_context = f"Template: {template_id}\n"
            else:
                template_context = (
                    f"Template: {template_id} ({template['title']})\n"
                    f"Template brief: {template['prompt']}\n"
                    f"Template features: {', '.join(template.get('features', []))}\n"
                )
        return ANALYSIS_PROMPT.render(prompt=prompt, template_context=template_context)

    def analyze(self, prompt: str, template_id: Optional[str] = None) -> AnalysisResult:
        content = self.client.complete(
            SYSTEM_INSTRUCTION,
            self.build_prompt(prompt, template_id),
            self.max_tokens,
            self.temperature,
        )
        try:
            spec = parse_specification(content)
        except (ValueError, KeyError, TypeError) as e:
            reason = f"{type(e).__name__}: {e}"
            log.warning("Falling back to default specification (%s)", reason)
            return AnalysisResult(spec=fallback_specification(prompt), degraded=True, reason=reason)
        return AnalysisResult(spec=spec)
