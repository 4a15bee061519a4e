class InspectorError(Exception):
    """Base class for everything the inspector reports to the user."""


class ModelLoadError(InspectorError):
    """The model file is missing, unreadable or not a graph the runtime accepts."""


class InferenceError(InspectorError):
    """The dummy forward pass could not be bound or executed."""
