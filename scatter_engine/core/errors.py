# ========================
# file: scatter_engine/core/errors.py
# ========================
class ScatterError(Exception):
    """Base error for the scatter engine."""


class ValidationError(ScatterError):
    """Raised when a sampler configuration fails validation."""


class SamplerStateError(ScatterError):
    """Raised when a sampler operation is called in the wrong lifecycle state."""


class NotFoundError(ScatterError):
    """Raised when a config path cannot be resolved."""
