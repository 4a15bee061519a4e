import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np
import onnx
import onnxruntime as ort

from .config import DummyInputConfig
from .errors import InferenceError, ModelLoadError
from .runtime import ensure_runtime
from .signature import TensorSignature, find

logger = logging.getLogger(__name__)

BANNER = "=" * 40
PROVIDERS = ["CPUExecutionProvider"]


@dataclass
class ModelMetadata:
    ir_version: int
    producer_name: str
    producer_version: str
    opsets: List[Tuple[str, int]] = field(default_factory=list)

    @classmethod
    def from_proto(cls, model: onnx.ModelProto) -> "ModelMetadata":
        opsets = [(imp.domain or "ai.onnx", imp.version) for imp in model.opset_import]
        return cls(model.ir_version, model.producer_name, model.producer_version, opsets)


def _load_metadata(path: str) -> ModelMetadata:
    # weights are not needed for the header, skip external data files
    model = onnx.load(path, load_external_data=False)
    return ModelMetadata.from_proto(model)


class ModelInspector:
    """
    Owns one onnxruntime session for a model file.

    Use it as a context manager so the session is released on every exit path:

        with ModelInspector("mnist-8.onnx") as inspector:
            inspector.print_details()
            inspector.run_dummy_inference()
    """

    def __init__(self, path: str, config: Optional[DummyInputConfig] = None):
        self.path = str(path)
        self.config = config or DummyInputConfig()
        self._session = None

        if not os.path.isfile(self.path):
            raise ModelLoadError(f"Model not found: {self.path}")

        state = ensure_runtime()
        options = ort.SessionOptions()
        options.graph_optimization_level = ort.GraphOptimizationLevel.ORT_ENABLE_BASIC
        options.logid = state.name

        logger.info("Loading %s", self.path)
        try:
            self.metadata = _load_metadata(self.path)
            session = ort.InferenceSession(self.path, options, providers=PROVIDERS)
        except Exception as exc:
            raise ModelLoadError(f"{self.path}: {exc}") from exc

        self.inputs = [TensorSignature.from_node_arg(a) for a in session.get_inputs()]
        self.outputs = [TensorSignature.from_node_arg(a) for a in session.get_outputs()]
        self._session = session
        logger.info("Loaded %s: %d input(s), %d output(s)", self.path, len(self.inputs), len(self.outputs))

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        if self._session is not None:
            logger.debug("Releasing session for %s", self.path)
        self._session = None

    def _ensure_open(self):
        if self._session is None:
            raise RuntimeError(f"Inspector for {self.path} is closed")

    @property
    def session(self) -> ort.InferenceSession:
        self._ensure_open()
        return self._session

    def print_details(self):
        self._ensure_open()
        print(BANNER)
        print(f"Inspecting Model: {self.path}")
        print(BANNER)

        meta = self.metadata
        print(f"IR version: {meta.ir_version}")
        print(f"Producer: {meta.producer_name} ({meta.producer_version})")
        print("Opset imports:")
        for domain, version in meta.opsets:
            print(f"   domain='{domain}' opset={version}")

        print("-> INPUTS:")
        for sig in self.inputs:
            print("\n".join(sig.describe()))
            print("   ---")

        print("-> OUTPUTS:")
        for sig in self.outputs:
            print("\n".join(sig.describe()))
            print("   ---")
        print(BANNER)

    def _require_slot(self, signatures: List[TensorSignature], name: str, kind: str):
        if find(signatures, name) is None:
            available = ", ".join(repr(s.name) for s in signatures) or "none"
            raise InferenceError(f"Model has no {kind} slot named {name!r} (available: {available})")

    def run_dummy_inference(self) -> np.ndarray:
        session = self.session
        cfg = self.config
        print(BANNER)
        print("Running Inference with Dummy Data...")
        print(BANNER)

        self._require_slot(self.inputs, cfg.input_name, "input")
        self._require_slot(self.outputs, cfg.output_name, "output")

        # the configured slot gets the configured shape, other inputs plain zeros
        feed = {sig.name: sig.zeros() for sig in self.inputs if sig.name != cfg.input_name}
        feed[cfg.input_name] = np.zeros(cfg.input_shape, dtype=np.float32)
        for name, tensor in feed.items():
            logger.info("Feeding zeros %s to %r", list(tensor.shape), name)
        try:
            (output,) = session.run([cfg.output_name], feed)
        except Exception as exc:
            raise InferenceError(f"Execution failed: {exc}") from exc

        if not isinstance(output, np.ndarray):
            raise InferenceError(f"Output {cfg.output_name!r} is not a tensor ({type(output).__name__})")
        print(f"Output Tensor '{cfg.output_name}' (Shape: {list(output.shape)}):")
        print(output.ravel().tolist())
        print(BANNER)
        return output
