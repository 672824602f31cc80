import sys

from enum import Enum
from typing import Union


class ByteOrder(Enum):
    """
    The order in which the bytes of a multi-byte number are stored.

    The member values are the same strings accepted by `int.from_bytes` and friends, so `order.value` can be passed
    straight to them.
    """

    LITTLE_ENDIAN = 'little'
    """Least significant byte first (Intel byte order)"""

    BIG_ENDIAN = 'big'
    """Most significant byte first (Motorola byte order)"""

    @classmethod
    def native(cls) -> 'ByteOrder':
        """
        Returns the byte order of the machine we are running on.
        """
        return cls(sys.byteorder)

    @classmethod
    def parse(cls, value: Union['ByteOrder', str]) -> 'ByteOrder':
        """
        Obtains a `ByteOrder` from a more free-form specification, such as one read from a config file.

        Args:
            value: Either a `ByteOrder` (returned as-is), or one of the strings ``little``, ``big``, ``le``, ``be``,
                ``<``, ``>``. Case and surrounding whitespace are ignored.

        Returns:
            The corresponding `ByteOrder` member.

        Raises:
            ValueError: If the string is not a recognized byte order.
            TypeError: If the value is neither a string nor a `ByteOrder`.
        """
        if isinstance(value, ByteOrder):
            return value
        if not isinstance(value, str):
            raise TypeError(f"Expected a ByteOrder or str, got '{type(value).__name__}'")

        key = value.strip().lower()
        if key not in _BYTE_ORDER_ALIASES:
            raise ValueError(f"Unrecognized byte order: {value!r}")

        return cls(_BYTE_ORDER_ALIASES[key])

    def opposite(self) -> 'ByteOrder':
        return ByteOrder.BIG_ENDIAN if self == ByteOrder.LITTLE_ENDIAN else ByteOrder.LITTLE_ENDIAN

    def struct_prefix(self) -> str:
        """
        Returns the `struct` module format prefix (``<`` or ``>``) for this byte order.
        """
        return '<' if self == ByteOrder.LITTLE_ENDIAN else '>'


_BYTE_ORDER_ALIASES = {
    'little': 'little',
    'le': 'little',
    '<': 'little',
    'big': 'big',
    'be': 'big',
    '>': 'big',
}
