"""Scale floating point samples to integers before encoding.

JCAMP-DX stores ordinates as integers together with a multiplier
(##YFACTOR=, ##FACTOR=). A factor is chosen so the largest quantized
magnitude stays within MAX_ENCODED_VALUE, then every sample is divided by
it and rounded to the nearest integer.
"""

import logging
import numbers
from collections.abc import Mapping
from dataclasses import dataclass

import numpy as np

logger = logging.getLogger(__name__)

# Largest quantized magnitude when a factor has to be derived (six digits)
MAX_ENCODED_VALUE = 999_999
# Largest integer that survives a float round trip exactly
MAX_SAFE_INTEGER = 2**53 - 1


class InvalidSampleError(ValueError):
    """Raised when a sample sequence holds a non-numeric or non-finite entry."""


@dataclass(frozen=True)
class ExtremeValues:
    """First, last, minimum and maximum of a sample sequence."""

    first: float
    last: float
    min: float
    max: float

    @classmethod
    def from_samples(cls, samples) -> "ExtremeValues":
        """Compute the extremes of a non-empty sample sequence."""
        array = validate_samples(samples)
        if not array.size:
            raise ValueError("Cannot compute extreme values of an empty sequence")
        return cls(
            first=float(array[0]),
            last=float(array[-1]),
            min=float(array.min()),
            max=float(array.max()),
        )


def validate_samples(samples) -> np.ndarray:
    """Check that every sample is a finite real number.

    Args:
        samples: One-dimensional sequence or array of numbers

    Returns:
        A new float array holding the samples

    Raises:
        InvalidSampleError: On a non-numeric, nested or non-finite entry
    """
    if isinstance(samples, np.ndarray):
        if samples.ndim != 1:
            raise InvalidSampleError(
                f"Samples must be one-dimensional, got shape {samples.shape}"
            )
        if not (
            np.issubdtype(samples.dtype, np.integer)
            or np.issubdtype(samples.dtype, np.floating)
        ):
            raise InvalidSampleError(f"Samples must be real numbers, got dtype {samples.dtype}")
        array = samples.astype(float)
    else:
        samples = list(samples)
        for index, value in enumerate(samples):
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise InvalidSampleError(f"Sample {index} is not a number: {value!r}")
        array = np.asarray(samples, dtype=float)

    not_finite = np.flatnonzero(~np.isfinite(array))
    if not_finite.size:
        index = int(not_finite[0])
        raise InvalidSampleError(f"Sample {index} is not finite: {array[index]}")
    return array


def _min_max(extremes) -> tuple[float, float]:
    if isinstance(extremes, Mapping):
        return float(extremes["min"]), float(extremes["max"])
    return float(extremes.min), float(extremes.max)


def choose_factor(
    samples,
    extremes: ExtremeValues | Mapping | None = None,
    factor: float | None = None,
    max_value: float = MAX_ENCODED_VALUE,
) -> float:
    """Choose the divisor applied to samples before rounding.

    Args:
        samples: Sample sequence
        extremes: Precomputed extremes (ExtremeValues or a mapping with
            "min" and "max"); computed from samples when omitted
        factor: Caller-suggested factor, returned as is
        max_value: Largest quantized magnitude allowed

    Returns:
        1.0 when the samples are integers within max_value, otherwise the
        factor that maps the extreme magnitude onto max_value
    """
    if factor is not None:
        if not np.isfinite(factor) or factor <= 0:
            raise ValueError(f"Factor must be a positive finite number, got {factor}")
        return factor

    array = validate_samples(samples)
    if not array.size:
        return 1.0

    if extremes is None:
        extremes = ExtremeValues.from_samples(array)
    minimum, maximum = _min_max(extremes)
    abs_max = max(abs(minimum), abs(maximum))

    if abs_max == 0 or (abs_max <= max_value and np.all(array == np.round(array))):
        return 1.0

    chosen = abs_max / max_value
    if chosen == 0:
        # Subnormal extremes; every subnormal is an exact multiple of the smallest one
        chosen = float(np.nextafter(0.0, 1.0))
    logger.debug(f"Chose factor {chosen:g} for extreme magnitude {abs_max:g}")
    return chosen


def quantize(samples, factor: float = 1.0) -> np.ndarray:
    """Divide samples by ``factor`` and round to the nearest integer.

    Ties are rounded away from zero (2.5 -> 3, -2.5 -> -3). The input is
    never modified.

    Args:
        samples: Sample sequence
        factor: Divisor, usually from choose_factor

    Returns:
        New int64 array of quantized values

    Raises:
        InvalidSampleError: If a sample is not a finite number
        ValueError: If a quantized magnitude exceeds MAX_SAFE_INTEGER
    """
    if not factor > 0:
        raise ValueError(f"Factor must be positive, got {factor}")
    array = validate_samples(samples)
    if factor != 1:
        array = array / factor
    # array - truncated is exact, unlike adding 0.5 near 2**52
    truncated = np.trunc(array)
    rounded = truncated + np.where(np.abs(array - truncated) >= 0.5, np.sign(array), 0)

    if rounded.size and np.abs(rounded).max() > MAX_SAFE_INTEGER:
        raise ValueError(
            f"Quantized magnitude {np.abs(rounded).max():g} exceeds {MAX_SAFE_INTEGER}; "
            "use a larger factor"
        )
    return rounded.astype(np.int64)
