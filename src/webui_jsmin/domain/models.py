from __future__ import annotations

"""
Minification Domain Data Models.

Defines the result object handed back from a completed run to the
library callers and the CLI.
"""

from dataclasses import dataclass

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class MinifyResult:
    """
    Statistics of a completed minification run.

    Attributes:
        bytes_in: Raw bytes consumed from the input stream.
        bytes_out: Bytes written to the output sink.
    """
    bytes_in: int
    bytes_out: int

    @property
    def reduction(self) -> float:
        """Percentage of the input removed by minification."""
        if self.bytes_in <= 0:
            return 0.0
        return 100 - (self.bytes_out * 100 / self.bytes_in)
