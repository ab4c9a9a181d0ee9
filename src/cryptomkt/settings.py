from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, SecretStr

from .api import DEFAULT_API_VERSION, DEFAULT_DOMAIN
from .transport import DEFAULT_USER_AGENT


class ProxySettings(BaseModel):
    enabled: bool = False
    url: str | None = None
    username: str | None = None
    password: SecretStr | None = None

    model_config = {"extra": "forbid"}


class ApiCredentials(BaseModel):
    api_key: SecretStr
    api_secret: SecretStr

    model_config = {"extra": "forbid"}


class Settings(BaseModel):
    base_url: str = DEFAULT_DOMAIN
    api_version: str = DEFAULT_API_VERSION
    timeout: float | None = Field(default=None, gt=0)
    user_agent: str = DEFAULT_USER_AGENT
    credentials: ApiCredentials | None = None
    proxy: ProxySettings = Field(default_factory=ProxySettings)

    model_config = {"extra": "forbid"}

    def redacted(self) -> dict[str, Any]:
        data = self.model_dump(mode="json")
        creds = data.get("credentials")
        if isinstance(creds, dict):
            for key in ("api_key", "api_secret"):
                if key in creds:
                    creds[key] = "***"
        proxy = data.get("proxy")
        if isinstance(proxy, dict) and proxy.get("password") is not None:
            proxy["password"] = "***"
        return data
