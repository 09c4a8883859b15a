"""Witness generation hints (Compute phase).

Hints run outside the constraint system on plain integers. The Check phase
only reaches them through solve_hint, looking them up by name in
HINT_REGISTRY.
"""

from .base import HintFn, solve_hint
from .scalar_mul import (
    COORDS_PER_STEP,
    ScalarMulHintInputs,
    TraceStep,
    hint_scalar_mul_steps,
    parse_hint_inputs,
    scalar_mul_trace,
)

# Registry mapping hint names to hint functions
HINT_REGISTRY: dict[str, HintFn] = {
    'scalar_mul_steps': hint_scalar_mul_steps,
}


def get_hint(name: str) -> HintFn:
    """Get a registered hint by name.

    Raises:
        KeyError: If no hint is registered under name
    """
    if name in HINT_REGISTRY:
        return HINT_REGISTRY[name]
    raise KeyError(f"No hint named '{name}'. "
                   f"Available: {list(HINT_REGISTRY.keys())}")


__all__ = [
    'COORDS_PER_STEP',
    'HINT_REGISTRY',
    'HintFn',
    'ScalarMulHintInputs',
    'TraceStep',
    'get_hint',
    'hint_scalar_mul_steps',
    'parse_hint_inputs',
    'scalar_mul_trace',
    'solve_hint',
]
