"""Transport argument construction."""

from .request_builder import FLAG_PER_HEADER, HEADER_FLAG, SHARED_FLAG, RequestBuilder

__all__ = ["RequestBuilder", "FLAG_PER_HEADER", "SHARED_FLAG", "HEADER_FLAG"]
