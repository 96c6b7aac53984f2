"""BaseProviderAdapter: composes the per-request components behind one contract.

Purpose:
- Build a validated :class:`ProviderConfig` from constructor arguments and the
  configuration layer, then wire the stream decoder, exit inspector, payload
  preprocessor, credential verifier, model registry and request builder.
- Expose the :class:`ProviderAdapter` operations by delegation.

Subclasses declare class attributes and override the ``_make_*`` factory
methods for whatever differs on the wire:

- ``PROVIDER`` / ``DISPLAY_NAME``: canonical name and log prefix.
- ``ALLOWED_PARAMETERS``: payload allow-list.
- ``REQUIRES_CREDENTIAL``: False for local backends.
- ``EXIT_STRATEGIES``: exit inspection strategy order.

Mutation semantics:
- ``api_key`` may be overwritten after construction (credential rotation,
  tests). The assignment bypasses construction-time validation; call
  ``verify()`` again before the next request.
"""
from __future__ import annotations

from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Sequence, Tuple

from ...config import get_provider_config
from ..credentials import Credential
from ..dto.provider_config import ProviderConfig
from ..inspection.exit_inspector import JSON_ERROR, STATUS_LINE, ExitInspector
from ..interfaces_parts.log_sink import LogSink
from ..logging import get_logger
from ..models import ExitReport, Payload
from ..payload.preprocessor import PayloadPreprocessor
from ..registry.model_registry import ModelRegistry
from ..streaming.decoded_line import DecodedLine
from ..streaming.decoder import StreamDecoder
from ..transport.request_builder import RequestBuilder
from ..utils.messages import MessageLike, add_system_prompt as _add_system_prompt
from ..verification.verifier import CredentialVerifier


class BaseProviderAdapter:
    """Shared adapter implementation; one subclass per backend."""

    PROVIDER: str = ""
    DISPLAY_NAME: str = ""
    ALLOWED_PARAMETERS: FrozenSet[str] = frozenset()
    REQUIRES_CREDENTIAL: bool = True
    EXIT_STRATEGIES: Tuple[str, ...] = (JSON_ERROR, STATUS_LINE)

    def __init__(
        self,
        endpoint: Optional[str] = None,
        api_key: Any = None,
        *,
        model: Optional[str] = None,
        models: Optional[Sequence[str]] = None,
        logger: Optional[LogSink] = None,
    ) -> None:
        """Initialize the adapter.

        Parameters:
            endpoint: Chat endpoint URL; defaults to the configured endpoint.
            api_key: Credential or credential reference (``"${ENV}"``, argv
                list); ``None`` defers to the configuration layer.
            model: Default model; must be in the supported set when given.
            models: Supported model identifiers overriding the configured set.
            logger: Logging capability; defaults to ``chatwire.<provider>``.

        Raises:
            pydantic.ValidationError: When the merged configuration is invalid
                (empty endpoint, default model outside the supported set).
        """
        cfg = get_provider_config(
            self.PROVIDER,
            {"endpoint": endpoint, "api_key": api_key, "model": model, "models": list(models) if models is not None else None},
        )
        supported = list(cfg.get("models") or [])
        default_model = cfg.get("model")
        if model is None and supported and default_model not in supported:
            # Configured default no longer in an overridden model set.
            default_model = sorted(supported)[0]
        self.config = ProviderConfig(
            endpoint=cfg.get("endpoint") or "",
            credential=cfg.get("api_key"),
            supported_models=frozenset(supported),
            default_model=default_model,
        )
        self._logger: LogSink = logger or get_logger(f"chatwire.{self.PROVIDER}")
        self._active_model: Optional[str] = self.config.default_model

        self._registry = ModelRegistry(self.PROVIDER, self.config.supported_models, self.config.default_model)
        self._decoder = self._make_decoder()
        self._inspector = ExitInspector(self.DISPLAY_NAME, self._logger, self.EXIT_STRATEGIES)
        self._preprocessor = self._make_preprocessor()
        self._verifier = CredentialVerifier(
            self.DISPLAY_NAME,
            lambda: self.config.credential,
            self._logger,
            required=self.REQUIRES_CREDENTIAL,
        )
        self._request_builder = self._make_request_builder()

    # ----- component factories -----
    def _make_decoder(self) -> StreamDecoder:  # pragma: no cover - abstract
        raise NotImplementedError

    def _make_preprocessor(self) -> PayloadPreprocessor:
        return PayloadPreprocessor(self.DISPLAY_NAME, self.ALLOWED_PARAMETERS, self._logger)

    def _make_request_builder(self) -> RequestBuilder:  # pragma: no cover - abstract
        raise NotImplementedError

    # ----- identity and configuration -----
    @property
    def provider_name(self) -> str:
        return self.PROVIDER

    @property
    def display_name(self) -> str:
        return self.DISPLAY_NAME

    @property
    def endpoint(self) -> str:
        return self.config.endpoint

    @property
    def api_key(self) -> Credential:
        return self.config.credential

    @api_key.setter
    def api_key(self, value: Any) -> None:
        # Not validated; verify() must be called again.
        self.config.credential = value

    @property
    def logger(self) -> LogSink:
        return self._logger

    @property
    def active_model(self) -> Optional[str]:
        return self._active_model

    # ----- contract operations -----
    def preprocess_payload(self, payload: Any) -> Dict[str, Any]:
        """Trim message contents and keep only allow-listed parameters.

        Accepts a plain mapping or a :class:`Payload`; always returns a new mapping.
        """
        if isinstance(payload, Payload):
            payload = payload.to_dict()
        return self._preprocessor.preprocess(payload)

    def build_transport_args(self) -> List[str]:
        return self._request_builder.build()

    def curl_params(self) -> List[str]:
        """Alias of :meth:`build_transport_args` for curl-based transports."""
        return self.build_transport_args()

    def verify(self) -> bool:
        return self._verifier.verify()

    def check(self, model: Any) -> bool:
        return self._registry.supports(model)

    def decode(self, line: str) -> Optional[str]:
        return self._decoder.decode(line)

    def decode_line(self, line: str) -> DecodedLine:
        return self._decoder.decode_line(line)

    def classify(self, lines: Sequence[str], *, status: Optional[int] = None) -> ExitReport:
        return self._inspector.inspect(lines, status=status)

    def add_system_prompt(self, messages: Sequence[MessageLike], prompt: str) -> List[Dict[str, Any]]:
        return _add_system_prompt(messages, prompt)

    def set_model(self, model: str) -> None:
        """No-op: the request URL of this provider does not depend on the model."""
        return None

    def get_available_models(self) -> List[str]:
        return self._registry.available()

    def default_model(self) -> Optional[str]:
        return self.config.default_model

    def describe(self) -> Mapping[str, Any]:
        """Credential-free summary for CLI output and diagnostics."""
        return {
            "provider": self.PROVIDER,
            "display_name": self.DISPLAY_NAME,
            "endpoint": self.config.endpoint,
            "default_model": self.config.default_model,
            "models": self.get_available_models(),
            "requires_credential": self.REQUIRES_CREDENTIAL,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(endpoint={self.config.endpoint!r}, model={self._active_model!r})"


__all__ = ["BaseProviderAdapter"]
