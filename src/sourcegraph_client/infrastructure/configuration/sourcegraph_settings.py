from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://sourcegraph.com/api/"


class SourcegraphSettings(BaseSettings):
    """Settings for the Sourcegraph API client."""

    base_url: str = Field(default=DEFAULT_BASE_URL, description="API root, e.g. https://sourcegraph.com/api/")
    token: SecretStr | None = Field(default=None, description="Access token sent with every request")
    timeout: float = Field(default=10.0, gt=0, description="Per-request timeout in seconds")
    user_agent: str = Field(default="sourcegraph-client-python")

    @field_validator("base_url")
    @classmethod
    def ensure_trailing_slash(cls, value: str) -> str:
        """Route paths are relative, so the root must end with '/'."""
        if not value:
            raise ValueError("base_url must be non-empty")
        return value if value.endswith("/") else f"{value}/"

    def validate_credentials(self) -> None:
        if not self.token or not self.token.get_secret_value():
            raise ValueError("Sourcegraph token is missing in settings.")

    model_config = SettingsConfigDict(env_prefix="SOURCEGRAPH_", env_file=None, extra="ignore")
