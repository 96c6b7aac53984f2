"""Provider configuration: defaults merged with user settings.

``get_provider_config(name)`` is the only entry point adapters use. Each call
layers, later sources winning:

1. the built-in defaults in :mod:`.defaults`;
2. the provider's section of the file named by ``CHATWIRE_CONFIG_FILE``
   (``.json`` files are parsed as JSON, anything else as YAML);
3. ``<PROVIDER>_ENDPOINT``, ``<PROVIDER>_MODEL``, ``<PROVIDER>_MODELS``
   (comma separated) and ``<PROVIDER>_API_KEY`` from the environment;
4. explicit overrides passed by the caller.

The merged ``api_key`` reference is then resolved by ``KeysRepository``, so
the returned dict always holds either a usable secret or an
``UnresolvedCredential``. A config file looks like::

    perplexity:
      model: llama-3-70b-instruct
      api_key: ${PPLX_API_KEY}
    openai:
      api_key: ["pass", "show", "openai"]
    ollama:
      endpoint: http://gpu-box:11434/api/chat
      models: [llama3, qwen2]

A ``.env`` file (``DOTENV_FILE``, default ``./.env``) is read once before the
first lookup.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple
import json
import os

import yaml

from . import defaults as _d
from .env import ENV_MAP, is_placeholder

CONFIG_FILE_ENV = "CHATWIRE_CONFIG_FILE"
DOTENV_FILE_ENV = "DOTENV_FILE"


def _entry(endpoint: str, models: Sequence[str], model: str) -> Dict[str, Any]:
    return {"endpoint": endpoint, "models": list(models), "model": model}


DEFAULTS: Dict[str, Dict[str, Any]] = {
    "perplexity": _entry(_d.PERPLEXITY_DEFAULT_ENDPOINT, _d.PERPLEXITY_MODELS, _d.PERPLEXITY_DEFAULT_MODEL),
    "openai": _entry(_d.OPENAI_DEFAULT_ENDPOINT, _d.OPENAI_MODELS, _d.OPENAI_DEFAULT_MODEL),
    "anthropic": _entry(_d.ANTHROPIC_DEFAULT_ENDPOINT, _d.ANTHROPIC_MODELS, _d.ANTHROPIC_DEFAULT_MODEL),
    "gemini": _entry(_d.GEMINI_DEFAULT_ENDPOINT, _d.GEMINI_MODELS, _d.GEMINI_DEFAULT_MODEL),
    "groq": _entry(_d.GROQ_DEFAULT_ENDPOINT, _d.GROQ_MODELS, _d.GROQ_DEFAULT_MODEL),
    "mistral": _entry(_d.MISTRAL_DEFAULT_ENDPOINT, _d.MISTRAL_MODELS, _d.MISTRAL_DEFAULT_MODEL),
    "ollama": _entry(_d.OLLAMA_DEFAULT_ENDPOINT, _d.OLLAMA_MODELS, _d.OLLAMA_DEFAULT_MODEL),
}

# config field -> environment variable suffix
ENV_FIELD_MAP = {
    "endpoint": "ENDPOINT",
    "model": "MODEL",
    "models": "MODELS",
    "api_key": "API_KEY",  # pragma: allowlist secret
}


_file_cache: Optional[Dict[str, Any]] = None
_dotenv_done = False


def reset_config_cache() -> None:
    """Re-read the config file and ``.env`` on the next lookup."""
    global _file_cache, _dotenv_done
    _file_cache = None
    _dotenv_done = False


def _parse_dotenv_line(line: str) -> Optional[Tuple[str, str]]:
    line = line.strip()
    if not line or line.startswith("#") or "=" not in line:
        return None
    key, _, value = line.partition("=")
    key = key.strip()
    return (key, value.strip().strip("\"'")) if key else None


def _load_dotenv_once() -> None:
    """Export ``KEY=VALUE`` pairs from the dotenv file.

    A variable already in the environment is replaced only when its value is
    a placeholder.
    """
    global _dotenv_done
    if _dotenv_done:
        return
    _dotenv_done = True
    path = Path(os.getenv(DOTENV_FILE_ENV, ".env"))
    if not path.is_file():
        return
    for raw in path.read_text(encoding="utf-8").splitlines():
        pair = _parse_dotenv_line(raw)
        if pair is None:
            continue
        key, value = pair
        if key not in os.environ or is_placeholder(os.environ[key]):
            os.environ[key] = value


def _load_external_config() -> Dict[str, Any]:
    """Parse the config file once; an unreadable file is logged and treated as empty."""
    global _file_cache
    if _file_cache is not None:
        return _file_cache
    _file_cache = {}
    raw_path = os.getenv(CONFIG_FILE_ENV)
    if not raw_path or not Path(raw_path).is_file():
        return _file_cache
    path = Path(raw_path)
    text = path.read_text(encoding="utf-8")
    try:
        data = json.loads(text) if path.suffix.lower() == ".json" else yaml.safe_load(text)
    except (ValueError, yaml.YAMLError) as exc:
        # base imports this package while initializing; import the logger lazily.
        from ..base.logging import get_logger

        get_logger("chatwire.config").warning(f"ignoring unreadable config file {raw_path}: {exc}")
        return _file_cache
    if isinstance(data, dict):
        _file_cache = data
    return _file_cache


def _split_models(value: Any) -> List[str]:
    if isinstance(value, str):
        items: Sequence[Any] = value.split(",")
    elif isinstance(value, (list, tuple, set, frozenset)):
        items = list(value)
    else:
        return []
    return [str(item).strip() for item in items if str(item).strip()]


def _env_overrides(provider: str) -> Dict[str, Any]:
    prefix = provider.upper()
    found: Dict[str, Any] = {}
    for field, suffix in ENV_FIELD_MAP.items():
        value = (os.getenv(f"{prefix}_{suffix}") or "").strip()
        if value:
            found[field] = value
    return found


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Merged settings for ``provider`` with ``api_key`` already resolved."""
    _load_dotenv_once()
    name = (provider or "").lower().strip()
    section = _load_external_config().get(name)

    cfg: Dict[str, Any] = dict(DEFAULTS.get(name, {}))
    if isinstance(section, dict):
        cfg.update(section)
    cfg.update(_env_overrides(name))
    cfg.update({k: v for k, v in (overrides or {}).items() if v is not None})
    if "models" in cfg:
        cfg["models"] = _split_models(cfg["models"])

    # base.repositories imports this package; resolve lazily.
    from ..base.repositories.keys import KeysRepository

    cfg["api_key"] = KeysRepository().get_api_key(name, cfg.get("api_key"))
    return cfg


def get_model(provider: str) -> Optional[str]:
    return get_provider_config(provider).get("model")


def known_providers() -> List[str]:
    """Providers with built-in defaults, sorted."""
    return sorted(DEFAULTS)


__all__ = [
    "get_provider_config",
    "get_model",
    "known_providers",
    "reset_config_cache",
    "DEFAULTS",
    "ENV_MAP",
    "CONFIG_FILE_ENV",
    "DOTENV_FILE_ENV",
]
