"""Request builder: ordered argument list for the transport process.

The argument list is part of the external contract with the transport-launch
collaborator (a ``curl`` process in practice). Its order and header text are
fixed per provider and are a pure function of the configuration: the same
endpoint, credential and model always yield an equal list.

Layouts:
- ``FLAG_PER_HEADER``: ``[url, "-H", h1, "-H", h2, ...]``
- ``SHARED_FLAG``: ``[url, "-H", h1, h2, ...]`` (the layout the Perplexity
  transport collaborator consumes)
"""
from __future__ import annotations

from typing import Callable, List, Optional, Sequence

FLAG_PER_HEADER = "flag_per_header"
SHARED_FLAG = "shared_flag"
HEADER_FLAG = "-H"


class RequestBuilder:
    """Build transport arguments from header templates.

    Parameters:
        endpoint_source: Zero-argument callable returning the endpoint URL.
        credential_source: Zero-argument callable returning the credential.
        header_templates: Header lines; ``{credential}`` is substituted.
        layout: ``FLAG_PER_HEADER`` or ``SHARED_FLAG``.
        url_template: Optional format string for the target URL receiving
            ``endpoint`` and ``model`` (e.g. ``"{endpoint}/{model}:stream"``).
        model_source: Zero-argument callable returning the active model,
            required when ``url_template`` references it.
    """

    def __init__(
        self,
        endpoint_source: Callable[[], str],
        credential_source: Callable[[], object],
        header_templates: Sequence[str] = (),
        *,
        layout: str = FLAG_PER_HEADER,
        url_template: Optional[str] = None,
        model_source: Optional[Callable[[], Optional[str]]] = None,
    ) -> None:
        if layout not in (FLAG_PER_HEADER, SHARED_FLAG):
            raise ValueError(f"unknown header layout: {layout!r}")
        self._endpoint = endpoint_source
        self._credential = credential_source
        self._headers = tuple(header_templates)
        self._layout = layout
        self._url_template = url_template
        self._model = model_source or (lambda: None)

    def target_url(self) -> str:
        endpoint = self._endpoint()
        if not self._url_template:
            return endpoint
        return self._url_template.format(endpoint=endpoint.rstrip("/"), model=self._model() or "")

    def headers(self) -> List[str]:
        credential = self._credential()
        # Unresolved markers render as empty; verify() gates launching.
        value = credential if isinstance(credential, str) else ""
        return [template.format(credential=value) for template in self._headers]

    def build(self) -> List[str]:
        args = [self.target_url()]
        headers = self.headers()
        if not headers:
            return args
        if self._layout == SHARED_FLAG:
            return [*args, HEADER_FLAG, *headers]
        for header in headers:
            args.extend((HEADER_FLAG, header))
        return args


__all__ = ["RequestBuilder", "FLAG_PER_HEADER", "SHARED_FLAG", "HEADER_FLAG"]
