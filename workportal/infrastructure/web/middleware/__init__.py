from .error_handler import ErrorHandlerMiddleware, domain_exception_handler, unwrap_result
from .request_context import RequestContextMiddleware

__all__ = ["ErrorHandlerMiddleware", "RequestContextMiddleware", "domain_exception_handler", "unwrap_result"]
