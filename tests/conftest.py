import numpy as np
import onnx
import pytest
from onnx import TensorProto, helper, numpy_helper


def _save(model, path):
    # keep the IR version readable by released onnxruntime builds
    model.ir_version = 8
    onnx.save(model, str(path))
    return str(path)


@pytest.fixture
def digit_model(tmp_path):
    """Tiny stand-in for the MNIST classifier: Input3 -> Flatten -> MatMul -> Add."""
    weights = numpy_helper.from_array(np.full((784, 10), 0.01, dtype=np.float32), name="W")
    bias = numpy_helper.from_array(np.arange(10, dtype=np.float32), name="B")
    graph = helper.make_graph(
        [
            helper.make_node("Flatten", ["Input3"], ["flat"], axis=1),
            helper.make_node("MatMul", ["flat", "W"], ["logits"]),
            helper.make_node("Add", ["logits", "B"], ["Plus214_Output_0"]),
        ],
        "digits",
        [helper.make_tensor_value_info("Input3", TensorProto.FLOAT, [1, 1, 28, 28])],
        [helper.make_tensor_value_info("Plus214_Output_0", TensorProto.FLOAT, [1, 10])],
        initializer=[weights, bias],
    )
    model = helper.make_model(graph, producer_name="inspector-tests",
                              opset_imports=[helper.make_opsetid("", 13)])
    return _save(model, tmp_path / "digits.onnx")


@pytest.fixture
def dynamic_model(tmp_path):
    """Two inputs with symbolic batch dims, one Relu output per input."""
    graph = helper.make_graph(
        [
            helper.make_node("Relu", ["data"], ["activated"]),
            helper.make_node("Relu", ["mask"], ["mask_out"]),
        ],
        "dynamic",
        [
            helper.make_tensor_value_info("data", TensorProto.FLOAT, ["N", 4]),
            helper.make_tensor_value_info("mask", TensorProto.FLOAT, [None, 4]),
        ],
        [
            helper.make_tensor_value_info("activated", TensorProto.FLOAT, ["N", 4]),
            helper.make_tensor_value_info("mask_out", TensorProto.FLOAT, [None, 4]),
        ],
    )
    model = helper.make_model(graph, producer_name="inspector-tests",
                              opset_imports=[helper.make_opsetid("", 13)])
    return _save(model, tmp_path / "dynamic.onnx")


@pytest.fixture
def garbage_file(tmp_path):
    path = tmp_path / "not_a_model.onnx"
    path.write_bytes(b"\x00\x01definitely not protobuf\xff" * 32)
    return str(path)


@pytest.fixture
def sequence_model(tmp_path):
    """Digit-model slot names, but the output is a ragged sequence of tensors."""
    split = numpy_helper.from_array(np.array([1, 783], dtype=np.int64), name="split")
    graph = helper.make_graph(
        [
            helper.make_node("Flatten", ["Input3"], ["flat"], axis=1),
            helper.make_node("SplitToSequence", ["flat", "split"], ["Plus214_Output_0"], axis=1),
        ],
        "sequence",
        [helper.make_tensor_value_info("Input3", TensorProto.FLOAT, [1, 1, 28, 28])],
        [helper.make_tensor_sequence_value_info("Plus214_Output_0", TensorProto.FLOAT, None)],
        initializer=[split],
    )
    model = helper.make_model(graph, producer_name="inspector-tests",
                              opset_imports=[helper.make_opsetid("", 13)])
    return _save(model, tmp_path / "sequence.onnx")
