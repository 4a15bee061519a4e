from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

import numpy as np

Dim = Union[int, str, None]

ELEMENT_DTYPES = {
    "tensor(float)": np.float32,
    "tensor(float16)": np.float16,
    "tensor(double)": np.float64,
    "tensor(int8)": np.int8,
    "tensor(int32)": np.int32,
    "tensor(int64)": np.int64,
    "tensor(uint8)": np.uint8,
    "tensor(bool)": np.bool_,
}


def render_dim(dim: Dim) -> str:
    """Fixed dims print as numbers, dynamic ones as ``?`` or ``?name``."""
    if isinstance(dim, int):
        return str(dim)
    if dim:
        return f"?{dim}"
    return "?"


@dataclass(frozen=True)
class TensorSignature:
    """Name, shape and element type of one graph input or output."""
    name: str
    shape: Tuple[Dim, ...]
    element_type: str

    @classmethod
    def from_node_arg(cls, arg) -> "TensorSignature":
        # NodeArg.shape is None for non-tensor values (sequences, maps)
        shape = tuple(arg.shape) if arg.shape is not None else ()
        return cls(name=arg.name, shape=shape, element_type=arg.type)

    @property
    def is_dynamic(self) -> bool:
        return any(not isinstance(d, int) for d in self.shape)

    def zeros(self) -> np.ndarray:
        """Zero tensor matching this slot, dynamic dims set to 1."""
        shape = self.shape
        if self.is_dynamic:
            shape = tuple(d if isinstance(d, int) else 1 for d in shape)
        return np.zeros(shape, dtype=ELEMENT_DTYPES.get(self.element_type, np.float32))

    def render_shape(self) -> str:
        return "[" + ", ".join(render_dim(d) for d in self.shape) + "]"

    def describe(self, indent: str = "   ") -> List[str]:
        return [
            f"{indent}Name: {self.name}",
            f"{indent}Shape: {self.render_shape()}",
            f"{indent}Type: {self.element_type}",
        ]


def find(signatures: List[TensorSignature], name: str) -> Optional[TensorSignature]:
    for sig in signatures:
        if sig.name == name:
            return sig
    return None
