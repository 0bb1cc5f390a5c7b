"""
Alpha Analytics Services

Service layer containing the indicator library, risk metrics and the
analysis engine. Each service has a defined interface (contract) and
implementation.
"""

from alphacore.services.base import BaseService, ServiceError, InvalidInputError

__all__ = ["BaseService", "ServiceError", "InvalidInputError"]
