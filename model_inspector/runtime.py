"""
Process-wide onnxruntime state.

onnxruntime keeps one default logger per process, so the instance name and
log severity are fixed by the first call to ``init_runtime`` and shared by
every session created afterwards.
"""
import logging
from dataclasses import dataclass
from typing import Optional

import onnxruntime as ort

logger = logging.getLogger(__name__)

DEFAULT_NAME = "model-inspector"
# onnxruntime severities: 0 verbose, 1 info, 2 warning, 3 error, 4 fatal
DEFAULT_LOG_SEVERITY = 3


@dataclass(frozen=True)
class RuntimeState:
    name: str
    log_severity: int


_state: Optional[RuntimeState] = None


def init_runtime(name: str = DEFAULT_NAME, log_severity: int = DEFAULT_LOG_SEVERITY) -> RuntimeState:
    """Initialise the runtime once; later calls return the first state."""
    global _state
    if _state is not None:
        if (name, log_severity) != (_state.name, _state.log_severity):
            logger.debug("Runtime already initialised as %r, ignoring new settings", _state.name)
        return _state

    ort.set_default_logger_severity(log_severity)
    _state = RuntimeState(name=name, log_severity=log_severity)
    logger.info("onnxruntime %s initialised as %r (providers: %s)",
                ort.__version__, name, ", ".join(ort.get_available_providers()))
    return _state


def ensure_runtime() -> RuntimeState:
    if _state is None:
        return init_runtime()
    return _state
