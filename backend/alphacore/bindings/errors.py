"""
Binding Errors

Error kinds raised at the runtime boundary. The engine itself only raises
InvalidInputError; adapters translate it into these.
"""

from alphacore.services.base import ServiceError


class BindingError(ServiceError):
    """Base exception for boundary adapters."""
    pass


class SerializationError(BindingError):
    """Payload could not be decoded into price points."""
    pass


class AnalysisFailedError(BindingError):
    """The engine rejected the decoded input."""
    pass
