"""Sample validation, factor selection and integer quantization."""

from jdxwriter.scaling.factor import (
    MAX_ENCODED_VALUE,
    MAX_SAFE_INTEGER,
    ExtremeValues,
    InvalidSampleError,
    choose_factor,
    quantize,
    validate_samples,
)

__all__ = [
    "MAX_ENCODED_VALUE",
    "MAX_SAFE_INTEGER",
    "ExtremeValues",
    "InvalidSampleError",
    "choose_factor",
    "quantize",
    "validate_samples",
]
