"""chatwire_providers.config.defaults
=================================

Central place for small, stable default values used across the package: chat
endpoints, supported model identifiers and default models per provider, and
CLI defaults. Everything here can be overridden through environment variables
or the external configuration file.

Module Purpose
--------------
- Provide a single import location for conservative default constants (no I/O).
- Keep adapters and the CLI free of magic literals.

This module intentionally avoids importing from other packages of the project
to prevent circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- CLI Defaults ----
# Default provider selected by the CLI when none is specified.
PROVIDER_CLI_DEFAULT_PROVIDER = "perplexity"


# ---- Perplexity ----
PERPLEXITY_DEFAULT_ENDPOINT = "https://api.perplexity.ai/chat/completions"
PERPLEXITY_MODELS = (
    "llama-3-sonar-small-32k-chat",
    "llama-3-sonar-small-32k-online",
    "llama-3-sonar-large-32k-chat",
    "llama-3-sonar-large-32k-online",
    "llama-3-8b-instruct",
    "llama-3-70b-instruct",
    "mixtral-8x7b-instruct",
)
PERPLEXITY_DEFAULT_MODEL = "llama-3-sonar-large-32k-online"

# ---- OpenAI ----
OPENAI_DEFAULT_ENDPOINT = "https://api.openai.com/v1/chat/completions"
OPENAI_MODELS = (
    "gpt-4o",
    "gpt-4o-mini",
    "gpt-4-turbo",
    "gpt-4",
    "gpt-3.5-turbo",
)
OPENAI_DEFAULT_MODEL = "gpt-4o"

# ---- Anthropic ----
ANTHROPIC_DEFAULT_ENDPOINT = "https://api.anthropic.com/v1/messages"
ANTHROPIC_MODELS = (
    "claude-3-5-sonnet-20240620",
    "claude-3-opus-20240229",
    "claude-3-sonnet-20240229",
    "claude-3-haiku-20240307",
)
ANTHROPIC_DEFAULT_MODEL = "claude-3-5-sonnet-20240620"
ANTHROPIC_API_VERSION = "2023-06-01"
# The Messages API requires max_tokens on every request.
ANTHROPIC_DEFAULT_MAX_TOKENS = 4096

# ---- Gemini ----
# Model path prefix; the adapter appends "/<model>:streamGenerateContent?alt=sse".
GEMINI_DEFAULT_ENDPOINT = "https://generativelanguage.googleapis.com/v1beta/models"
GEMINI_MODELS = (
    "gemini-1.5-pro",
    "gemini-1.5-flash",
    "gemini-1.0-pro",
)
GEMINI_DEFAULT_MODEL = "gemini-1.5-flash"

# ---- Groq ----
GROQ_DEFAULT_ENDPOINT = "https://api.groq.com/openai/v1/chat/completions"
GROQ_MODELS = (
    "llama3-8b-8192",
    "llama3-70b-8192",
    "mixtral-8x7b-32768",
    "gemma-7b-it",
)
GROQ_DEFAULT_MODEL = "llama3-70b-8192"

# ---- Mistral ----
MISTRAL_DEFAULT_ENDPOINT = "https://api.mistral.ai/v1/chat/completions"
MISTRAL_MODELS = (
    "mistral-large-latest",
    "mistral-medium-latest",
    "mistral-small-latest",
    "open-mistral-7b",
    "open-mixtral-8x7b",
    "codestral-latest",
)
MISTRAL_DEFAULT_MODEL = "mistral-large-latest"

# ---- Ollama (local) ----
OLLAMA_DEFAULT_ENDPOINT = "http://localhost:11434/api/chat"
OLLAMA_MODELS = (
    "llama3",
    "llama3:70b",
    "mistral",
    "mixtral",
    "phi3",
    "gemma",
)
OLLAMA_DEFAULT_MODEL = "llama3"


__all__ = [
    # CLI
    "PROVIDER_CLI_DEFAULT_PROVIDER",
    # Provider defaults
    "PERPLEXITY_DEFAULT_ENDPOINT",
    "PERPLEXITY_MODELS",
    "PERPLEXITY_DEFAULT_MODEL",
    "OPENAI_DEFAULT_ENDPOINT",
    "OPENAI_MODELS",
    "OPENAI_DEFAULT_MODEL",
    "ANTHROPIC_DEFAULT_ENDPOINT",
    "ANTHROPIC_MODELS",
    "ANTHROPIC_DEFAULT_MODEL",
    "ANTHROPIC_API_VERSION",
    "ANTHROPIC_DEFAULT_MAX_TOKENS",
    "GEMINI_DEFAULT_ENDPOINT",
    "GEMINI_MODELS",
    "GEMINI_DEFAULT_MODEL",
    "GROQ_DEFAULT_ENDPOINT",
    "GROQ_MODELS",
    "GROQ_DEFAULT_MODEL",
    "MISTRAL_DEFAULT_ENDPOINT",
    "MISTRAL_MODELS",
    "MISTRAL_DEFAULT_MODEL",
    "OLLAMA_DEFAULT_ENDPOINT",
    "OLLAMA_MODELS",
    "OLLAMA_DEFAULT_MODEL",
]
