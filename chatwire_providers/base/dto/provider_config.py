"""Validated configuration record owned by each adapter instance.

Purpose
-------
``ProviderConfig`` holds the endpoint, credential, supported model identifiers
and default model for one adapter. Values come from the configuration layer
(``chatwire_providers.config``) or explicit constructor arguments and are
validated once, at construction.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation.

Mutation semantics
------------------
The model does not validate on assignment. Callers (tests, credential
rotation) may overwrite ``credential`` directly; doing so bypasses the
constructor checks, so the adapter's ``verify()`` must be called again before
the next request.
"""
from __future__ import annotations

from typing import Any, FrozenSet, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..credentials import UnresolvedCredential


class ProviderConfig(BaseModel):
    """Endpoint, credential and model set for one adapter instance.

    Attributes
    ----------
    endpoint:
        Non-empty URL of the chat endpoint (Gemini: model path prefix).
    credential:
        Non-empty key string or :class:`UnresolvedCredential`. ``None`` is
        coerced to an unresolved marker; an empty string is rejected.
    supported_models:
        Identifiers accepted by ``check``.
    default_model:
        Model used when a request names none; must be supported when the
        supported set is non-empty.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    endpoint: str
    credential: Union[str, UnresolvedCredential] = Field(default_factory=UnresolvedCredential)
    supported_models: FrozenSet[str] = Field(default_factory=frozenset)
    default_model: Optional[str] = None

    @field_validator("endpoint")
    @classmethod
    def _endpoint_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("endpoint must be a non-empty string")
        return value

    @field_validator("credential", mode="before")
    @classmethod
    def _credential_resolved_or_marked(cls, value: Any) -> Any:
        if value is None:
            return UnresolvedCredential()
        if isinstance(value, str) and not value.strip():
            raise ValueError("credential must be a non-empty string or an UnresolvedCredential")
        return value

    @model_validator(mode="after")
    def _default_model_supported(self) -> "ProviderConfig":
        if self.default_model and self.supported_models and self.default_model not in self.supported_models:
            raise ValueError(f"default model {self.default_model!r} is not in the supported model set")
        return self


__all__ = ["ProviderConfig"]
