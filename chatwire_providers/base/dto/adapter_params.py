"""Constructor arguments shared by every adapter, as one validated object."""
from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict


class AdapterParams(BaseModel):
    """Arguments accepted by ``ProviderFactory.create(params=...)``.

    Unset fields (``None``) leave the adapter's configured value in place.
    ``api_key`` stays untyped because it may be a credential reference such
    as an argv list, resolved later by the configuration layer. ``provider``
    is informational; the factory takes the name as its own argument.
    """

    model_config = ConfigDict(extra="forbid")

    provider: Optional[str] = None
    endpoint: Optional[str] = None
    api_key: Any = None
    model: Optional[str] = None
    models: Optional[List[str]] = None


__all__ = ["AdapterParams"]
