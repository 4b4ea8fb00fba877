"""Configuration models (Pydantic classes)."""

from enum import Enum

from pydantic import BaseModel, Field, field_validator, model_validator

from infrastructure.constants import DEFAULT_USER_AGENT


class TransportKind(str, Enum):
    """Supported transports. The value must match the module name under infrastructure/transport/."""

    REST = "rest"
    MOCK = "mock"


class ClientConfig(BaseModel):
    """
    Connection settings for one Terra server.
    - Loaded from configs/terra.yaml, with TERRA_* environment overrides
    - Consumed by the transport factory and TerraClient.authenticate
    """

    base_url: str = Field(..., description="Base URL of the Terra API, e.g. http://terra.brilliantarc.com/api")
    transport: TransportKind = Field(default=TransportKind.REST, description="Transport backend to use.")
    timeout_s: float = Field(default=30.0, gt=0, description="Per-request timeout in seconds.")
    verify_tls: bool = True
    headers: dict[str, str] = Field(default_factory=dict, description="Extra static headers sent with every request.")

    # Default account for TerraClient.authenticate()
    login: str | None = None
    password: str | None = Field(default=None, repr=False)

    user_agent: str = DEFAULT_USER_AGENT

    @field_validator("base_url")
    @classmethod
    def _strip_base_url(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v:
            raise ValueError("base_url must not be blank")
        return v

    @model_validator(mode="after")
    def _validate(self) -> "ClientConfig":
        if (self.login is None) != (self.password is None):
            raise ValueError("login and password must be configured together")
        return self
