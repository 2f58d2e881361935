"""Measurement series and their encoded data blocks.

A series is either a peak table / XY curve (``PeakSeries``) or a spectrum
with real and optional imaginary parts (``SpectrumSeries``). Encoding a
series chooses a factor for every dependent channel, quantizes it and runs
the vector encoder, returning the text blocks that go after ##XYDATA= or
##DATA TABLE= together with the factors used.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

import numpy as np

from jdxwriter.config import EncoderSettings
from jdxwriter.encoding.vector_encoder import encode
from jdxwriter.scaling.factor import ExtremeValues, choose_factor, quantize

logger = logging.getLogger(__name__)


@dataclass
class PeakSeries:
    """X/Y measurement.

    Attributes:
        x: Abscissa values, evenly spaced
        y: Ordinate values
    """

    x: np.ndarray
    y: np.ndarray

    def __post_init__(self):
        self.x = np.asarray(self.x)
        self.y = np.asarray(self.y)

        if len(self.x) != len(self.y):
            raise ValueError(
                f"Arrays must have same length: x={len(self.x)}, y={len(self.y)}"
            )

    def dependent(self) -> dict[str, np.ndarray]:
        """Dependent channels by key."""
        return {"y": self.y}


@dataclass
class SpectrumSeries:
    """X/Real/Imaginary measurement, e.g. an NMR spectrum or FID.

    Attributes:
        x: Abscissa values, evenly spaced
        r: Real part
        i: Imaginary part, if recorded
    """

    x: np.ndarray
    r: np.ndarray
    i: np.ndarray | None = None

    def __post_init__(self):
        self.x = np.asarray(self.x)
        self.r = np.asarray(self.r)
        if self.i is not None:
            self.i = np.asarray(self.i)

        lengths = [len(self.x), len(self.r)]
        if self.i is not None:
            lengths.append(len(self.i))
        if len(set(lengths)) != 1:
            raise ValueError(
                f"Arrays must have same length: "
                f"x={len(self.x)}, r={len(self.r)}"
                + (f", i={len(self.i)}" if self.i is not None else "")
            )

    def dependent(self) -> dict[str, np.ndarray]:
        """Dependent channels by key."""
        channels = {"r": self.r}
        if self.i is not None:
            channels["i"] = self.i
        return channels


Series = PeakSeries | SpectrumSeries

SYMBOLS = {"y": "Y", "r": "R", "i": "I"}


@dataclass
class EncodedChannel:
    """One encoded dependent channel.

    Attributes:
        symbol: JCAMP-DX symbol (Y, R or I)
        factor: Divisor applied before rounding
        extremes: First, last, min and max of the unscaled data
        text: Encoded data lines
    """

    symbol: str
    factor: float
    extremes: ExtremeValues
    text: str

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "symbol": self.symbol,
            "factor": self.factor,
            "first": self.extremes.first,
            "last": self.extremes.last,
            "min": self.extremes.min,
            "max": self.extremes.max,
            "text": self.text,
        }


@dataclass
class EncodedSeries:
    """Encoded data blocks of a series.

    Attributes:
        first_x: First abscissa value
        last_x: Last abscissa value
        delta_x: Constant abscissa increment, (last_x - first_x) / (n - 1)
        n_points: Number of points per channel
        factors: Factor used for every channel, including "x"
        channels: Encoded dependent channels by key
    """

    first_x: float
    last_x: float
    delta_x: float
    n_points: int
    factors: dict[str, float] = field(default_factory=dict)
    channels: dict[str, EncodedChannel] = field(default_factory=dict)


def encode_series(
    series: Series,
    settings: EncoderSettings | None = None,
    factors: Mapping[str, float] | None = None,
) -> EncodedSeries:
    """Scale and encode every dependent channel of a series.

    Args:
        series: PeakSeries or SpectrumSeries
        settings: Encoding and scaling settings (defaults if omitted)
        factors: Factors to use as is, by channel key ("x", "y", "r", "i").
            Channels without an entry get one from choose_factor.

    Returns:
        EncodedSeries holding the factors used and the encoded channels
    """
    if not isinstance(series, (PeakSeries, SpectrumSeries)):
        raise TypeError(f"Expected PeakSeries or SpectrumSeries, got {type(series).__name__}")
    if settings is None:
        settings = EncoderSettings()
    factors = dict(factors or {})

    n_points = len(series.x)
    if n_points == 0:
        raise ValueError("Cannot encode an empty series")

    x = ExtremeValues.from_samples(series.x)
    delta_x = (x.last - x.first) / (n_points - 1) if n_points > 1 else 0.0
    x_factor = choose_factor(series.x, factor=factors.get("x", 1.0))

    used = {"x": x_factor}
    channels = {}
    for key, data in series.dependent().items():
        extremes = ExtremeValues.from_samples(data)
        factor = choose_factor(
            data, extremes, factor=factors.get(key), max_value=settings.max_value
        )
        text = encode(
            quantize(data, factor),
            x.first / x_factor,
            delta_x / x_factor,
            settings.encoding,
        )
        used[key] = factor
        channels[key] = EncodedChannel(
            symbol=SYMBOLS[key], factor=factor, extremes=extremes, text=text
        )
        logger.debug(
            f"Encoded channel {key} ({n_points} points, factor {factor:g}, "
            f"{settings.encoding}) into {len(text.splitlines())} lines"
        )

    return EncodedSeries(
        first_x=x.first,
        last_x=x.last,
        delta_x=delta_x,
        n_points=n_points,
        factors=used,
        channels=channels,
    )
