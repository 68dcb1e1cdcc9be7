from pathlib import Path
from typing import Optional, ClassVar, List
from pydantic import Field, ValidationError, HttpUrl, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parents[3]
ENV_FILE = PROJECT_ROOT / "config.env"


class AppConfig(BaseSettings):
    """
    Application configuration loaded from config.env file and environment variables.
    """

    api_token: Optional[str] = Field(
        None,
        description="Bearer token for the Satelit API; requests are anonymous when unset",
    )
    base_url: Optional[HttpUrl] = Field(
        None,
        description="Base URL for the Satelit API (will be inferred from environment if not provided)",
    )
    environment: Optional[str] = Field(
        "pro",
        description="Satelit environment to target. One of: 'pro' (default), 'beta' or 'local'.",
    )
    log_level: Optional[str] = Field(
        "INFO",
        description="App logging level",
    )
    request_timeout: float = Field(
        30.0,
        gt=0,
        description="Total timeout of a single API request in seconds",
    )
    mock_response_delay: float = Field(
        2.0,
        ge=0,
        description="Default latency of emulated responses from mock services, in seconds",
    )

    proxy_servers_http: Optional[str] = Field(
        None,
        description="HTTP proxy server URL",
    )
    proxy_servers_https: Optional[str] = Field(
        None,
        description="HTTPS proxy server URL",
    )

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_prefix="SATELIT_",
        case_sensitive=False,
        extra="ignore",
    )

    def __init__(self, **values):
        """
        This ensures tests can monkeypatch `satelit.config.settings.ENV_FILE`
        """
        super().__init__(
            _env_file=ENV_FILE,
            _env_file_encoding="utf-8",
            **values,
        )

    @field_validator("api_token")
    @classmethod
    def check_token(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        if not v:
            return None
        if any(ch.isspace() for ch in v):
            raise ValueError("Invalid API token: must not contain whitespace")
        return v

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v: Optional[str]) -> str:
        level = (v or "INFO").strip().upper()
        if level not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"):
            raise ValueError(f"Unknown log level: {v!r}")
        return level

    def model_post_init(self, __context) -> None:
        """Post-initialization to handle base_url inference."""
        if not self.base_url:
            self.base_url = HttpUrl(_infer_base_url_from_env(self.environment))

    @property
    def proxy_servers(self) -> dict[str, str]:
        """Return proxy servers as a dictionary."""
        proxies = {}
        if self.proxy_servers_http:
            proxies["http"] = self.proxy_servers_http
        if self.proxy_servers_https:
            proxies["https"] = self.proxy_servers_https
        return proxies


def get_settings() -> AppConfig:
    """
    Load AppConfig from config.env file and environment variables.
    """
    try:
        return AppConfig()
    except ValidationError as exc:
        missing_or_invalid: List[str] = []
        for err in exc.errors():
            loc = ".".join(str(x) for x in err["loc"])
            msg = err["msg"]
            missing_or_invalid.append(f"• {loc}: {msg}")

        detail = "\n".join(missing_or_invalid)
        raise RuntimeError(
            f"\nConfiguration error: one or more settings are invalid:\n\n"
            f"{detail}\n\n"
            f"Please fix them via SATELIT_* environment variables or in `{ENV_FILE}`."
        ) from exc


def _infer_base_url_from_env(environment: str) -> str:
    """
    Infers the Satelit API base URL from an environment string.

    Supported values (case-insensitive):
      - 'pro'/'prod' (default): https://api.satelit.moe/v1
      - 'beta'/'staging':       https://beta.api.satelit.moe/v1
      - 'local'/'dev'/'development': http://localhost:8080/v1

    Falls back to the 'pro' URL if the input is empty or unrecognized.
    """
    env = (environment or "").strip().lower()

    if env in ("beta", "staging"):
        return "https://beta.api.satelit.moe/v1"
    if env in ("local", "dev", "development"):
        return "http://localhost:8080/v1"

    return "https://api.satelit.moe/v1"
