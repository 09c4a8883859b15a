"""Protocol - Check phase of batched scalar multiplication."""

from protocol.compress import beta_eval_point, compress_claims, derive_beta, nb_eval_coordinates
from protocol.config import ScalarMulConfig
from protocol.emulated import EmulatedField, to_binary
from protocol.fold import alpha_powers, derive_alpha, derive_challenge, fold_trace
from protocol.marshal import marshal_point, marshal_scalar
from protocol.scalar_mul import BatchScalarMul, ScalarMulClaim
from protocol.trace import ScalarMulTrace, call_hint_scalar_mul_steps, scalar_mul_hint_inputs, solve_scalar_mul_steps

__all__ = [
    # Config
    "ScalarMulConfig",
    # Emulated field
    "EmulatedField",
    "to_binary",
    # Marshaling
    "marshal_point",
    "marshal_scalar",
    # Trace
    "ScalarMulTrace",
    "call_hint_scalar_mul_steps",
    "scalar_mul_hint_inputs",
    "solve_scalar_mul_steps",
    # Folding
    "alpha_powers",
    "derive_alpha",
    "derive_challenge",
    "fold_trace",
    # Compression
    "beta_eval_point",
    "compress_claims",
    "derive_beta",
    "nb_eval_coordinates",
    # Orchestration
    "BatchScalarMul",
    "ScalarMulClaim",
]
