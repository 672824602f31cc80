"""
Functions for reading fixed-width numbers from a buffer of bytes, in either big-endian or little-endian order.

Unlike `struct.unpack`, the functions in this package never raise an exception when the buffer is too short. Instead,
they return a `DecodeResult` that must be explicitly checked, which makes them suitable as building blocks for
protocol and file format parsers that need to recover from truncated input (e.g. by waiting for more data).

Reading signed 16-bit integers::

    data = bytes([0, 128, 128, 0])

    decode_i16(data[0:2], ByteOrder.LITTLE_ENDIAN).unwrap()  # -32768
    decode_i16(data[2:4], ByteOrder.BIG_ENDIAN).unwrap()  # -32768

Handling a short buffer::

    result = decode_i32(data[:3], ByteOrder.LITTLE_ENDIAN)
    if result.is_error:
        print(result.error)  # Buffer too short to decode i32: expected 4 bytes, but only 3 were found

Reading a single precision float::

    decode_f32([194, 255, 0, 0], ByteOrder.BIG_ENDIAN).unwrap()  # -127.5

Note that there is no stream or cursor functionality here. For reading sequentially from files, see the
`atmfjstc-binary-utils` package.
"""

from atmfjstc.lib.endianness.byte_order import ByteOrder
from atmfjstc.lib.endianness.kinds import NumberKind
from atmfjstc.lib.endianness.errors import DecodeError, ShortBufferError
from atmfjstc.lib.endianness.result import DecodeResult
from atmfjstc.lib.endianness.decode import decode_number, decode_u16, decode_i16, decode_u32, decode_i32, \
    decode_u64, decode_i64, decode_f32, decode_f64


__version__ = '1.0.0'


__all__ = [
    'ByteOrder', 'NumberKind', 'DecodeError', 'ShortBufferError', 'DecodeResult',
    'decode_number', 'decode_u16', 'decode_i16', 'decode_u32', 'decode_i32', 'decode_u64', 'decode_i64',
    'decode_f32', 'decode_f64',
]
