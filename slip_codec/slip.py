"""
SLIP (Serial Line Internet Protocol) encoder/decoder.

Implements RFC 1055 byte-stuffing framing with strict conformance checks.
END=0xC0, ESC=0xDB, ESC_END=0xDC, ESC_ESC=0xDD.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

logger = logging.getLogger(__name__)

# SLIP special characters
END = 0xC0
ESC = 0xDB
ESC_END = 0xDC
ESC_ESC = 0xDD


class SlipError(Exception):
    """Base exception for SLIP errors."""

    pass


class ProtocolError(SlipError):
    """Frame does not conform to SLIP framing rules."""

    def __init__(self, message: str = "SLIP protocol violation"):
        super().__init__(message)


def encode(data: bytes) -> bytes:
    """
    Encode data using SLIP framing.

    Args:
        data: Raw data to encode.

    Returns:
        SLIP-encoded data with END delimiters.
    """
    encoded = bytearray([END])  # Start with END

    for byte in data:
        if byte == END:
            encoded.extend([ESC, ESC_END])
        elif byte == ESC:
            encoded.extend([ESC, ESC_ESC])
        else:
            encoded.append(byte)

    encoded.append(END)  # End with END
    return bytes(encoded)


def _interior_bounds(data: bytes) -> tuple[int, int]:
    """
    Locate the frame interior, skipping one boundary END at each end.

    Only offset 0 and offset len-1 are considered boundaries.

    Returns:
        (start, stop) slice indices of the interior.
    """
    start = 0
    stop = len(data)
    if stop > 0 and data[0] == END:
        start = 1
    if stop - 1 >= start and data[stop - 1] == END:
        stop -= 1
    return start, stop


def is_valid(data: bytes) -> bool:
    """
    Check whether data is a well-formed SLIP frame.

    Leading and trailing END delimiters are optional. Inside them, END must
    not appear and every ESC must be followed by ESC_END or ESC_ESC.

    Args:
        data: Candidate frame.

    Returns:
        True if the frame conforms to SLIP framing.
    """
    if len(data) < 2:
        return False

    start, stop = _interior_bounds(data)

    index = start
    while index < stop:
        byte = data[index]
        if byte == END:
            logger.debug(f"Interior END at offset {index}")
            return False
        if byte == ESC:
            if index == stop - 1:
                logger.debug(f"Dangling ESC at offset {index}")
                return False
            if data[index + 1] not in (ESC_END, ESC_ESC):
                logger.debug(
                    f"Invalid escape 0x{data[index + 1]:02X} at offset {index + 1}"
                )
                return False
            index += 2
            continue
        index += 1

    return True


def _unstuff(data: bytes) -> bytes:
    """
    Drop one byte at each end and reverse the escape substitution.

    An ESC that does not start a known escape sequence is kept as a literal
    byte and the following byte is processed on its own.
    """
    interior = data[1:-1]
    decoded = bytearray()

    index = 0
    last = len(interior) - 1
    while index < len(interior):
        byte = interior[index]
        if byte == ESC and index != last:
            next_byte = interior[index + 1]
            if next_byte == ESC_END:
                decoded.append(END)
                index += 2
                continue
            if next_byte == ESC_ESC:
                decoded.append(ESC)
                index += 2
                continue
        decoded.append(byte)
        index += 1

    return bytes(decoded)


def decode(data: bytes, *, ignore_protocol_errors: bool) -> bytes:
    """
    Decode a single SLIP frame.

    Args:
        data: SLIP-encoded frame, including its END delimiters.
        ignore_protocol_errors: Skip conformance checks and decode best-effort.

    Returns:
        Decoded payload (without SLIP framing).

    Raises:
        ProtocolError: If strict decoding is requested and the frame is invalid.
    """
    if not ignore_protocol_errors and not is_valid(data):
        logger.debug(f"Rejected frame: {bytes(data).hex()}")
        raise ProtocolError()

    payload = _unstuff(data)
    logger.debug(f"RX frame: {bytes(data).hex()} -> {payload.hex()}")
    return payload


@dataclass(frozen=True)
class DecodeResult:
    """
    Outcome of decoding a frame.

    Attributes:
        payload: Decoded payload, or None if decoding failed.
        error: Protocol error, or None if decoding succeeded.
    """

    payload: Optional[bytes] = None
    error: Optional[ProtocolError] = None

    def __post_init__(self) -> None:
        if (self.payload is None) == (self.error is None):
            raise ValueError("DecodeResult needs exactly one of payload or error")

    @property
    def ok(self) -> bool:
        """Check if decoding succeeded."""
        return self.error is None


def try_decode(data: bytes, *, ignore_protocol_errors: bool) -> DecodeResult:
    """
    Decode a single SLIP frame without raising.

    Args:
        data: SLIP-encoded frame.
        ignore_protocol_errors: Skip conformance checks and decode best-effort.

    Returns:
        DecodeResult holding either the payload or the protocol error.
    """
    try:
        payload = decode(data, ignore_protocol_errors=ignore_protocol_errors)
    except ProtocolError as e:
        return DecodeResult(error=e)
    return DecodeResult(payload=payload)


@dataclass(frozen=True)
class Packet:
    """
    Immutable SLIP buffer, ready to be encoded or decoded.

    Attributes:
        data: Raw byte buffer.
        ignore_protocol_errors: True to decode without conformance checks.
            Keyword-only with no default; callers choose strictness.
    """

    data: bytes
    ignore_protocol_errors: bool = field(kw_only=True)

    def __post_init__(self) -> None:
        # Copy mutable buffers so the packet never changes under us
        object.__setattr__(self, "data", bytes(self.data))

    @property
    def encoded(self) -> bytes:
        """SLIP frame carrying data as its payload."""
        return encode(self.data)

    @property
    def is_valid(self) -> bool:
        """Check if data is a well-formed SLIP frame."""
        return is_valid(self.data)

    def decoded(self) -> bytes:
        """
        Decode data as a SLIP frame.

        Raises:
            ProtocolError: If strict and the frame is invalid.
        """
        return decode(self.data, ignore_protocol_errors=self.ignore_protocol_errors)

    def decode_result(self) -> DecodeResult:
        """Decode data as a SLIP frame, returning a DecodeResult."""
        return try_decode(self.data, ignore_protocol_errors=self.ignore_protocol_errors)

    def __repr__(self) -> str:
        return (
            f"Packet(data={self.data.hex(' ') if self.data else '(empty)'}, "
            f"ignore_protocol_errors={self.ignore_protocol_errors})"
        )
