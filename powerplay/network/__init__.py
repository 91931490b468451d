# Network result and error classification

from .result import NetworkResult, ResultStatus
from .errors import classify_http_status, classify_transport_failure

__all__ = [
    "NetworkResult",
    "ResultStatus",
    "classify_http_status",
    "classify_transport_failure",
]
