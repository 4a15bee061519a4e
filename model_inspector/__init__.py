from .config import DummyInputConfig
from .errors import InferenceError, InspectorError, ModelLoadError
from .inspector import ModelInspector
from .runtime import ensure_runtime, init_runtime
from .signature import TensorSignature

__all__ = [
    "DummyInputConfig",
    "InferenceError",
    "InspectorError",
    "ModelInspector",
    "ModelLoadError",
    "TensorSignature",
    "ensure_runtime",
    "init_runtime",
]
