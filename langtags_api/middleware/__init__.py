from __future__ import annotations

from langtags_api.middleware.errors import build_exception_handler
from langtags_api.middleware.request_id import build_request_id_middleware

__all__ = ["build_exception_handler", "build_request_id_middleware"]
