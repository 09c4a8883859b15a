"""Witness-oracle boundary shared by all hints."""

from typing import Callable, List, Sequence

# A hint receives the native modulus, its integer inputs and pre-allocated
# output slots, and fills the outputs in place. Hints must be deterministic
# and free of side effects beyond writing the outputs.
HintFn = Callable[[int, Sequence[int], List[int]], None]


def solve_hint(hint: HintFn, modulus: int, inputs: Sequence[int], nb_outputs: int) -> List[int]:
    """Run a hint as an untrusted oracle and return its outputs.

    Args:
        hint: Hint function to invoke
        modulus: Native field modulus of the enclosing circuit
        inputs: Integer inputs in the hint's documented layout
        nb_outputs: Number of output slots to allocate

    Returns:
        The nb_outputs integers written by the hint
    """
    outputs = [0] * nb_outputs
    hint(modulus, list(inputs), outputs)
    return outputs
