"""Encoder settings."""

import os
from collections.abc import Mapping

from pydantic import BaseModel, Field

from jdxwriter.encoding.vector_encoder import Encoding
from jdxwriter.scaling.factor import MAX_ENCODED_VALUE


class EncoderSettings(BaseModel):
    """Settings applied when encoding whole series."""

    encoding: str = Field(
        default=Encoding.DIF.value,
        description="Compression form (FIX, SQZ, DIF, DIFDUP, CSV, PAC); unknown names mean DIF",
    )
    max_value: float = Field(
        default=MAX_ENCODED_VALUE,
        gt=0,
        description="Largest quantized magnitude when a factor is derived",
    )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "EncoderSettings":
        """Build settings from JDXWRITER_ENCODING and JDXWRITER_MAX_VALUE.

        Args:
            environ: Mapping to read instead of os.environ

        Returns:
            Settings, with defaults for unset variables
        """
        if environ is None:
            environ = os.environ

        values = {}
        if "JDXWRITER_ENCODING" in environ:
            values["encoding"] = environ["JDXWRITER_ENCODING"]
        if "JDXWRITER_MAX_VALUE" in environ:
            values["max_value"] = environ["JDXWRITER_MAX_VALUE"]
        return cls(**values)
