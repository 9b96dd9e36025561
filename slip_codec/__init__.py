"""
SLIP Codec - Serial Line Internet Protocol framing

Encodes byte buffers into self-delimited SLIP frames and decodes them back,
with strict conformance validation.
"""

__version__ = "0.1.0"
__author__ = "SLIP Codec Contributors"

from slip_codec.slip import (
    END,
    ESC,
    ESC_END,
    ESC_ESC,
    DecodeResult,
    Packet,
    ProtocolError,
    SlipError,
    decode,
    encode,
    is_valid,
    try_decode,
)

__all__ = [
    "END",
    "ESC",
    "ESC_END",
    "ESC_ESC",
    "DecodeResult",
    "Packet",
    "ProtocolError",
    "SlipError",
    "decode",
    "encode",
    "is_valid",
    "try_decode",
    "__version__",
]
