from dataclasses import dataclass
from typing import Tuple

# Reference digit classifier (MNIST model from the ONNX model zoo)
DEFAULT_INPUT_NAME = "Input3"
DEFAULT_OUTPUT_NAME = "Plus214_Output_0"
DEFAULT_INPUT_SHAPE = (1, 1, 28, 28)


@dataclass(frozen=True)
class DummyInputConfig:
    """Which slots the dummy pass binds to and what it feeds them."""
    input_name: str = DEFAULT_INPUT_NAME
    output_name: str = DEFAULT_OUTPUT_NAME
    input_shape: Tuple[int, ...] = DEFAULT_INPUT_SHAPE

    def __post_init__(self):
        shape = tuple(int(d) for d in self.input_shape)
        if not shape or any(d <= 0 for d in shape):
            raise ValueError(f"Input shape must be non-empty positive dims, got {list(shape)}")
        object.__setattr__(self, "input_shape", shape)
