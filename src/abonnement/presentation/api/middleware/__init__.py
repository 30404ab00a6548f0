"""
API middleware package.
"""

from abonnement.presentation.api.middleware.error_handler import (
    abonnement_exception_handler,
    request_validation_exception_handler,
)
from abonnement.presentation.api.middleware.metrics_middleware import (
    MetricsMiddleware,
)
from abonnement.presentation.api.middleware.request_id_middleware import (
    RequestIDMiddleware,
)

__all__ = [
    "abonnement_exception_handler",
    "request_validation_exception_handler",
    "MetricsMiddleware",
    "RequestIDMiddleware",
]
