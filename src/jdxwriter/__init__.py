"""jdxwriter: JCAMP-DX data table encoding for spectroscopic measurements.

Scales measurement variables to integers and writes them in the FIX, SQZ,
DIF, DIFDUP, CSV or PAC compression forms of the JCAMP-DX standard.
"""

__version__ = "0.1.0"

# Convenient imports
from jdxwriter.config import EncoderSettings
from jdxwriter.encoding import Encoding, encode
from jdxwriter.scaling import (
    ExtremeValues,
    InvalidSampleError,
    choose_factor,
    quantize,
)
from jdxwriter.series import (
    EncodedChannel,
    EncodedSeries,
    PeakSeries,
    SpectrumSeries,
    encode_series,
)

__all__ = [
    "__version__",
    "EncoderSettings",
    "Encoding",
    "encode",
    "ExtremeValues",
    "InvalidSampleError",
    "choose_factor",
    "quantize",
    # Series
    "EncodedChannel",
    "EncodedSeries",
    "PeakSeries",
    "SpectrumSeries",
    "encode_series",
]
