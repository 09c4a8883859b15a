"""Batch verification of scalar multiplications by folding and compression.

For each (P_i, s_i) the untrusted oracle supplies the full double-and-add trace
of s_i * P_i. The Check phase binds every pair to the transcript, folds the six
coordinates of every trace row with powers of alpha, and compresses all folded
rows into a single multilinear evaluation at (beta, beta^2, ..., beta^k).

The resulting ScalarMulClaim is meant for a downstream sumcheck; nothing in
this module checks the group law itself.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

import galois

from primitives.errors import ShapeMismatchError, TranscriptError
from primitives.projective import AffinePoint
from primitives.transcript import Transcript
from protocol.compress import compress_claims, derive_beta
from protocol.config import ScalarMulConfig
from protocol.emulated import EmulatedField
from protocol.fold import alpha_powers, derive_alpha, fold_trace
from protocol.marshal import marshal_point, marshal_scalar
from protocol.trace import ScalarMulTrace, scalar_mul_hint_inputs, solve_scalar_mul_steps

logger = logging.getLogger(__name__)


@dataclass
class ScalarMulClaim:
    """Everything the Check phase derives for one batch."""
    alpha: galois.FieldArray
    beta: galois.FieldArray
    claims: galois.FieldArray
    eval_point: List[galois.FieldArray]
    claim: galois.FieldArray
    trace: ScalarMulTrace


class BatchScalarMul:
    """Check-phase driver for a batch of scalar multiplications on one curve."""

    def __init__(self, config: ScalarMulConfig):
        self.config = config
        self.base = EmulatedField(config.curve.base)
        self.scalar = EmulatedField(config.curve.scalar)

    def new_transcript(self) -> Transcript:
        return Transcript(self.config.challenge_ids, native_modulus=self.config.native.modulus)

    def define(
        self,
        points: Sequence[AffinePoint],
        scalars: Sequence[int],
        transcript: Optional[Transcript] = None,
    ) -> ScalarMulClaim:
        """Import the traces for all pairs and reduce them to a single claim.

        Raises:
            ShapeMismatchError: If points and scalars differ in length or the
                batch is empty, or the claim count is not a power of two;
                raised before the oracle is consulted
            TranscriptError: If the fold challenge was already computed

        Pairs are bound to the transcript only after every pair has been
        encoded and its trace imported.
        """
        if len(points) != len(scalars):
            raise ShapeMismatchError(f"got {len(points)} points but {len(scalars)} scalars")
        if len(points) == 0:
            raise ShapeMismatchError("batch must contain at least one (point, scalar) pair")
        if transcript is None:
            transcript = self.new_transcript()

        cfg = self.config
        nb_claims = len(points) * cfg.nb_scalar_bits
        if nb_claims == 0 or (nb_claims & (nb_claims - 1)) != 0:
            raise ShapeMismatchError(f"{nb_claims} claims do not span a boolean hypercube; "
                                     f"pairs * nb_scalar_bits must be a power of two")
        if transcript.is_computed(cfg.alpha_id):
            raise TranscriptError(f"challenge '{cfg.alpha_id}' already computed, cannot bind the batch")

        # Nothing is bound until every pair is encoded and imported.
        encoded = []
        traces = []
        for i, (point, scalar) in enumerate(zip(points, scalars)):
            encoded.append((marshal_scalar(scalar, cfg.curve.scalar), marshal_point(point, cfg.curve.base)))
            inputs = scalar_mul_hint_inputs(self.base, self.scalar, point, scalar)
            traces.append(solve_scalar_mul_steps(self.base, cfg.nb_scalar_bits, inputs, cfg.native.modulus))
            logger.debug("pair %d: imported %d trace rows", i, cfg.nb_scalar_bits)
        trace = ScalarMulTrace.concatenate(self.base, traces)

        for scalar_bytes, point_bytes in encoded:
            transcript.bind(cfg.alpha_id, scalar_bytes)
            transcript.bind(cfg.alpha_id, point_bytes)

        alpha = derive_alpha(transcript, self.base, cfg.alpha_id)
        claims = fold_trace(self.base, trace, alpha_powers(alpha))
        logger.debug("folded %d rows on %s", len(claims), cfg.curve.name)

        beta = derive_beta(transcript, self.base, cfg.beta_id)
        eval_point, claim = compress_claims(claims, beta)
        logger.debug("compressed %d claims into %d coordinates", len(claims), len(eval_point))

        return ScalarMulClaim(
            alpha=alpha,
            beta=beta,
            claims=claims,
            eval_point=eval_point,
            claim=claim,
            trace=trace,
        )
