"""Error taxonomy shared by the Compute (witness) and Check (protocol) phases.

Each error also derives from the builtin raised for the same situation
elsewhere in the codebase, so callers catching ValueError keep working.
"""


class ScalarMulError(Exception):
    """Base class for batched scalar-multiplication errors."""


class ShapeMismatchError(ScalarMulError, ValueError):
    """Input sequences have incompatible lengths."""


class InvalidInputError(ScalarMulError, ValueError):
    """Malformed limb array or field encoding."""


class LimbOverflowError(ScalarMulError, OverflowError):
    """Integer does not fit into the destination limbs."""


class TranscriptError(ScalarMulError, RuntimeError):
    """Transcript used out of order (bind after challenge, unknown label, ...)."""
