"""
Runtime Bindings

Boundary adapters between host runtimes and the analysis engine.
Binding-specific error kinds live here, outside the engine.
"""

from alphacore.bindings.errors import BindingError, SerializationError, AnalysisFailedError
from alphacore.bindings.json_analyzer import JsonAnalyzer

__all__ = [
    "BindingError",
    "SerializationError",
    "AnalysisFailedError",
    "JsonAnalyzer",
]
