"""Multilinear extension evaluation over galois field arrays."""

from typing import Sequence

import galois

from primitives.errors import ShapeMismatchError


def eval_multilinear(at: Sequence[galois.FieldArray], values: galois.FieldArray) -> galois.FieldArray:
    """Evaluate the multilinear extension of values at the point `at`.

    values[i] is the value at the hypercube vertex whose bits, most significant
    first, are the coordinates of `at`; i.e. the first coordinate selects the
    lower or upper half of the table. Tables shorter than 2^len(at) are padded
    with zeros.

    Args:
        at: Evaluation point, one field element per variable
        values: 1-D field array with at most 2^len(at) entries

    Returns:
        The evaluation as a 0-d field array
    """
    field = type(values)
    size = 1 << len(at)
    if len(values) > size:
        raise ShapeMismatchError(f"{len(values)} values do not fit a {len(at)}-variable "
                                 f"multilinear polynomial (at most {size})")

    evals = field.Zeros(size)
    evals[:len(values)] = values

    # Fold one variable per pass: M[j] = M[j] + x * (M[j + half] - M[j])
    for x in at:
        half = len(evals) // 2
        lo, hi = evals[:half], evals[half:]
        evals = lo + (hi - lo) * x
    return evals[0]
