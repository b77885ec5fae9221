"""
API middleware for Virement.
"""

from virement.presentation.api.middleware.error_handler import (
    virement_exception_handler,
)
from virement.presentation.api.middleware.metrics_middleware import (
    MetricsMiddleware,
)
from virement.presentation.api.middleware.request_id_middleware import (
    RequestIDMiddleware,
)
from virement.presentation.api.middleware.timeout_middleware import (
    RequestTimeoutMiddleware,
)

__all__ = [
    "MetricsMiddleware",
    "RequestIDMiddleware",
    "RequestTimeoutMiddleware",
    "virement_exception_handler",
]
