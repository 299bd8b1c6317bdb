"""Service configuration with Pydantic validation."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .Options import Options


class Config(BaseModel):
    """Description of the program to run as a service.

    Created once by the caller and read-only afterwards.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    name: str = Field(..., description="Service identifier, used as the descriptor base name")
    display_name: str = Field("", description="Human readable service name")
    description: str = Field("", description="Long description of the service")
    user_name: str = Field("", description="Account the service runs as (system-wide installs only)")
    executable: str = Field("", description="Program to run; empty means the running program")
    arguments: tuple[str, ...] = Field((), description="Program arguments")
    working_directory: str = Field("", description="Working directory of the service")
    dependencies: tuple[str, ...] = Field((), description="Services this one depends on")
    env_vars: Mapping[str, str] = Field(
        default_factory=dict, validate_default=True, description="Environment for the service"
    )
    option: Options = Field(default_factory=Options, description="Platform specific options")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v:
            raise ValueError("service name is required")
        if any(c.isspace() for c in v) or "/" in v or "\\" in v:
            raise ValueError(f"service name must not contain whitespace or path separators, got: {v!r}")
        return v

    @field_validator("env_vars")
    @classmethod
    def freeze_env_vars(cls, v: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(v))

    @field_validator("option", mode="before")
    @classmethod
    def wrap_option(cls, v: Any) -> Options:
        if v is None:
            return Options()
        if isinstance(v, Options):
            return v
        if isinstance(v, dict):
            return Options(v)
        raise ValueError(f"option must be a dict, got {type(v).__name__}")
