"""
Adapter Base Package

Exports the provider adapter contract, its shared components, DTOs,
repositories and the provider factory for use by orchestrators.

Layout:
- Interfaces: the ``ProviderAdapter`` contract and the ``LogSink`` capability
- Models (DTOs): messages, payloads, exit reports, validated configuration
- Components: stream decoder, exit inspector, payload preprocessor,
  credential verifier, model registry, request builder
- Factory / registry: lazy creation of adapters by canonical name
"""

from .adapter_parts import BaseProviderAdapter
from .credentials import Credential, UnresolvedCredential, is_resolved
from .dto import AdapterParams, MessageDTO, PayloadDTO, ProviderConfig
from .errors import ErrorCode, ProviderError, classify_failure
from .factory import ProviderFactory, UnknownProviderError, create_provider
from .inspection import ExitInspector
from .interfaces import LogSink, ProviderAdapter
from .models import ExitReport, Message, Payload, Role
from .payload import PayloadPreprocessor, filter_payload_parameters
from .registry import AdapterRegistry, ModelRegistry
from .repositories.keys import KeyResolution, KeysRepository
from .streaming import ChatStreamEvent, DecodedLine, LineKind, StreamDecoder, StreamSession
from .transport import RequestBuilder
from .verification import CredentialVerifier

__all__ = [
    # Models
    "Role",
    "Message",
    "Payload",
    "ExitReport",
    "Credential",
    "UnresolvedCredential",
    "is_resolved",
    # DTOs
    "AdapterParams",
    "MessageDTO",
    "PayloadDTO",
    "ProviderConfig",
    # Interfaces
    "ProviderAdapter",
    "LogSink",
    # Components
    "StreamDecoder",
    "DecodedLine",
    "LineKind",
    "ExitInspector",
    "PayloadPreprocessor",
    "filter_payload_parameters",
    "CredentialVerifier",
    "ModelRegistry",
    "RequestBuilder",
    "BaseProviderAdapter",
    # Streaming
    "ChatStreamEvent",
    "StreamSession",
    # Errors
    "ErrorCode",
    "ProviderError",
    "classify_failure",
    # Repositories
    "KeysRepository",
    "KeyResolution",
    # Factory
    "ProviderFactory",
    "UnknownProviderError",
    "create_provider",
    "AdapterRegistry",
]
