import os
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field

PROJECT_ROOT = Path(__file__).resolve().parents[2]
TRUTHY_VALUES = {"1", "true", "yes", "on"}


def _read_dotenv(path: Path) -> dict[str, str]:
    if not path.exists():
        return {}

    values: dict[str, str] = {}
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        key, sep, value = raw_line.strip().partition("=")
        if not sep or key.startswith("#"):
            continue
        values[key.strip()] = value.strip().strip("'\"")
    return values


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in TRUTHY_VALUES


class Settings(BaseModel):
    app_name: str = Field(default="Vested")
    environment: str = Field(default="development")
    debug: bool = Field(default=False)
    cors_origins: str = Field(default="*")

    @property
    def is_development(self) -> bool:
        return self.environment.lower() in {"development", "dev", "local", "test"}

    @property
    def debug_logging(self) -> bool:
        """DEBUG output includes per-schedule detail, so only development honours it."""
        return self.debug and self.is_development

    @property
    def cors_origin_list(self) -> list[str]:
        if self.cors_origins.strip() == "*":
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @classmethod
    def from_environment(cls, dotenv_path: Path = PROJECT_ROOT / ".env") -> "Settings":
        for key, value in _read_dotenv(dotenv_path).items():
            os.environ.setdefault(key, value)
        return cls(
            app_name=os.getenv("APP_NAME", "Vested"),
            environment=os.getenv("ENVIRONMENT", "development"),
            debug=_env_flag("DEBUG", "false"),
            cors_origins=os.getenv("CORS_ORIGINS", "*"),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_environment()
