"""Exceptions raised by the generation pipeline."""


class GeneratorError(Exception):
    """Base class for errors surfaced to API callers."""


class UpstreamError(GeneratorError):
    """The LLM provider could not be reached or answered with an error."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class InvalidInfrastructureId(GeneratorError):
    """An infrastructure id is not present in the catalog."""

    def __init__(self, category: str, value: str):
        super().__init__(f"Unknown {category} id: {value!r}")
        self.category = category
        self.value = value


class TemplateParameterError(GeneratorError):
    """A code template was rendered with missing or unexpected parameters."""


class ConfigurationError(GeneratorError):
    """Required configuration (such as the provider API key) is missing."""
