import argparse
import logging
import sys

from .config import DEFAULT_INPUT_NAME, DEFAULT_INPUT_SHAPE, DEFAULT_OUTPUT_NAME, DummyInputConfig
from .errors import InferenceError, ModelLoadError
from .inspector import ModelInspector
from .runtime import init_runtime

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="model-inspector",
        description="Print the input/output signatures of an ONNX model and run one dummy forward pass.",
    )
    parser.add_argument("model", nargs="?", help="Path to ONNX model")
    parser.add_argument("--input-name", default=DEFAULT_INPUT_NAME,
                        help=f"Input slot fed with zeros (default: {DEFAULT_INPUT_NAME})")
    parser.add_argument("--output-name", default=DEFAULT_OUTPUT_NAME,
                        help=f"Output slot to fetch (default: {DEFAULT_OUTPUT_NAME})")
    parser.add_argument("--input-shape", type=int, nargs="+", default=list(DEFAULT_INPUT_SHAPE),
                        help="Dummy input shape e.g., 1 1 28 28")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log loading and runtime details")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.model is None:
        parser.print_usage(sys.stderr)
        return 1

    try:
        config = DummyInputConfig(args.input_name, args.output_name, tuple(args.input_shape))
    except ValueError as e:
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    init_runtime(log_severity=2 if args.verbose else 3)

    try:
        inspector = ModelInspector(args.model, config)
    except ModelLoadError as e:
        print("FATAL ERROR: Failed to load model.", file=sys.stderr)
        print(f"Reason: {e}", file=sys.stderr)
        return 1

    with inspector:
        inspector.print_details()
        try:
            inspector.run_dummy_inference()
        except InferenceError as e:
            # inspection already succeeded, the dummy pass is best effort
            logger.debug("Dummy inference failed", exc_info=True)
            print(f"Inference failed: {e}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
