"""
Functions for decoding fixed-width numbers from a buffer of bytes.

All functions here are pure: they only read the buffer, never modify or hold on to it, and keep no state between
calls. A buffer that is too short is not an exceptional situation; it is reported through the returned `DecodeResult`.
Any bytes past the width of the requested number are ignored, so a field can be decoded directly from the start of a
larger record.
"""

import logging
import struct

from typing import Union, Sequence

from atmfjstc.lib.endianness.byte_order import ByteOrder
from atmfjstc.lib.endianness.kinds import NumberKind
from atmfjstc.lib.endianness.errors import ShortBufferError
from atmfjstc.lib.endianness.result import DecodeResult


LOG = logging.getLogger(__name__)


BytesLike = Union[bytes, bytearray, memoryview, Sequence[int]]


def decode_number(data: BytesLike, kind: NumberKind, order: ByteOrder) -> DecodeResult[Union[int, float]]:
    """
    Decodes a number of any supported kind from the start of a buffer.

    Args:
        data: The buffer. Can be any C-contiguous object supporting the buffer protocol (`bytes`, `bytearray`,
            `memoryview`, `array.array` etc.), or a plain sequence of ints in the range 0..255. Buffers with wider
            items are read as the raw bytes of their memory. Only the first `kind.n_bytes` bytes are used.
        kind: The format of the number (e.g. `NumberKind.I32`)
        order: The byte order the number is stored in

    Returns:
        A `DecodeResult` containing either the number (an `int` or `float` as appropriate for the kind), or a
        `ShortBufferError` if the buffer has fewer than `kind.n_bytes` bytes.

    Raises:
        TypeError: If `order` is not a `ByteOrder`, or `data` is a non-contiguous buffer.
        ValueError: If `data` is a sequence containing values that are not bytes.
    """

    data = _as_byte_buffer(data)

    if len(data) < kind.n_bytes:
        LOG.debug("Short buffer: %s needs %d bytes, got %d", kind, kind.n_bytes, len(data))
        return DecodeResult.failure(ShortBufferError(kind, len(data)))

    if not isinstance(order, ByteOrder):
        raise TypeError(f"Byte order must be a ByteOrder, got '{type(order).__name__}'")

    bits = _assemble_unsigned(data, kind.n_bytes, order)

    if kind.is_float:
        return DecodeResult.success(_BIT_CASTS[kind](bits))
    if kind.signed:
        return DecodeResult.success(_as_twos_complement(bits, kind.bits))

    return DecodeResult.success(bits)


def decode_u16(data: BytesLike, order: ByteOrder) -> DecodeResult[int]:
    """
    Decodes an unsigned 16-bit integer. Requires at least 2 bytes.
    """
    return decode_number(data, NumberKind.U16, order)


def decode_i16(data: BytesLike, order: ByteOrder) -> DecodeResult[int]:
    """
    Decodes a signed (two's complement) 16-bit integer. Requires at least 2 bytes.

    Note that the bytes are interpreted as a bit pattern, e.g. ``[0x80, 0x00]`` in big-endian is -32768, not 32768.
    """
    return decode_number(data, NumberKind.I16, order)


def decode_u32(data: BytesLike, order: ByteOrder) -> DecodeResult[int]:
    return decode_number(data, NumberKind.U32, order)


def decode_i32(data: BytesLike, order: ByteOrder) -> DecodeResult[int]:
    return decode_number(data, NumberKind.I32, order)


def decode_u64(data: BytesLike, order: ByteOrder) -> DecodeResult[int]:
    return decode_number(data, NumberKind.U64, order)


def decode_i64(data: BytesLike, order: ByteOrder) -> DecodeResult[int]:
    return decode_number(data, NumberKind.I64, order)


def decode_f32(data: BytesLike, order: ByteOrder) -> DecodeResult[float]:
    """
    Decodes an IEEE-754 single precision float. Requires at least 4 bytes.

    The value is returned as a Python `float` (i.e. a double), which can represent every single precision value
    exactly. Infinities, NaNs and subnormals are returned as the bit pattern dictates, without any validation.
    """
    return decode_number(data, NumberKind.F32, order)


def decode_f64(data: BytesLike, order: ByteOrder) -> DecodeResult[float]:
    """
    Decodes an IEEE-754 double precision float. Requires at least 8 bytes.
    """
    return decode_number(data, NumberKind.F64, order)


def _as_byte_buffer(data: BytesLike) -> Union[bytes, bytearray, memoryview, Sequence[int]]:
    if isinstance(data, (bytes, bytearray)):
        return data

    try:
        view = memoryview(data)
    except TypeError:
        # Plain sequence of ints, e.g. a list
        return data

    if not view.c_contiguous:
        raise TypeError("Buffer must be C-contiguous")

    return view.cast('B')


def _assemble_unsigned(data: BytesLike, n_bytes: int, order: ByteOrder) -> int:
    # bytes() rejects any sequence element outside 0..255
    return int.from_bytes(bytes(data[:n_bytes]), byteorder=order.value, signed=False)


def _as_twos_complement(value: int, n_bits: int) -> int:
    if value & (1 << (n_bits - 1)):
        return value - (1 << n_bits)

    return value


def _bits_to_f32(bits: int) -> float:
    """
    Relabels a 32-bit pattern as an IEEE-754 binary32 float, returned as the Python `float` (binary64) with the same
    value.

    The binary64 pattern is assembled field by field, with no float arithmetic involved. NaNs (signalling ones
    included) keep their payload unchanged in the top 23 bits of the binary64 mantissa.
    """
    sign = bits >> 31
    exponent = (bits >> 23) & 0xff
    mantissa = bits & 0x7fffff

    if exponent == 0xff:
        exponent = 0x7ff
    elif exponent != 0:
        exponent += 1023 - 127
    elif mantissa != 0:
        # Subnormal in binary32, but normal in binary64
        exponent = 1023 - 126
        while not mantissa & 0x800000:
            mantissa <<= 1
            exponent -= 1
        mantissa &= 0x7fffff

    return _bits_to_f64((sign << 63) | (exponent << 52) | (mantissa << 29))


def _bits_to_f64(bits: int) -> float:
    """
    Relabels a 64-bit pattern as an IEEE-754 binary64 float. This is a pure bit cast, not a numeric conversion.
    """
    return struct.unpack('<d', bits.to_bytes(8, byteorder='little'))[0]


_BIT_CASTS = {
    NumberKind.F32: _bits_to_f32,
    NumberKind.F64: _bits_to_f64,
}
