from dataclasses import dataclass
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    app_name: str = "remixable-app-generator"
    api_host: str = "0.0.0.0"
    api_port: int = 8080

    database_url: str = "sqlite:///./remixable.db"

    openrouter_api_key: str | None = None
    openrouter_base_url: str = "https://openrouter.ai/api/v1"
    openrouter_model: str = "anthropic/claude-3.5-sonnet"

    llm_max_tokens: int = 2000
    llm_temperature: float = 0.3
    llm_timeout_seconds: float = 60.0

    strict_infrastructure: bool = False

settings = Settings()


@dataclass(frozen=True)
class GeneratorConfig:
    """Everything the generation pipeline needs, passed in explicitly."""
    openrouter_api_key: str | None = None
    openrouter_base_url: str = "https://openrouter.ai/api/v1"
    model: str = "anthropic/claude-3.5-sonnet"
    max_tokens: int = 2000
    temperature: float = 0.3
    timeout_seconds: float = 60.0
    strict_infrastructure: bool = False

    @classmethod
    def from_settings(cls, s: Settings) -> "GeneratorConfig":
        return cls(
            openrouter_api_key=s.openrouter_api_key,
            openrouter_base_url=s.openrouter_base_url,
            model=s.openrouter_model,
            max_tokens=s.llm_max_tokens,
            temperature=s.llm_temperature,
            timeout_seconds=s.llm_timeout_seconds,
            strict_infrastructure=s.strict_infrastructure,
        )
