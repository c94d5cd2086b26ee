"""
Pydantic schemas for client configuration.
"""

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from bittrex_api.api.constants import ApiVersion


class ClientConfig(BaseModel):
    """Bittrex client configuration, immutable once built"""

    model_config = ConfigDict(frozen=True)

    api_key: SecretStr = Field(..., description="Bittrex API key")
    api_secret: SecretStr = Field(..., description="Bittrex API secret, never logged")
    calls_per_second: float = Field(
        default=1.0,
        gt=0,
        description="Maximum number of requests per second",
    )
    api_version: ApiVersion = Field(
        default=ApiVersion.V1_1,
        description="Active API version",
        examples=["v1.1", "v2.0"],
    )
    request_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Total HTTP request timeout in seconds",
    )
