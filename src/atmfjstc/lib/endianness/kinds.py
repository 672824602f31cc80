"""
The fixed-width numeric types that can be decoded.
"""

from enum import Enum


class NumberKind(Enum):
    """
    A fixed-width number format: signedness (or float-ness) and width.

    The value of each member is a tuple ``(name, n_bytes, signed, is_float)``. Use the properties to access the parts.
    """

    U16 = ('u16', 2, False, False)
    I16 = ('i16', 2, True, False)
    U32 = ('u32', 4, False, False)
    I32 = ('i32', 4, True, False)
    U64 = ('u64', 8, False, False)
    I64 = ('i64', 8, True, False)
    F32 = ('f32', 4, False, True)
    F64 = ('f64', 8, False, True)

    @property
    def short_name(self) -> str:
        return self.value[0]

    @property
    def n_bytes(self) -> int:
        return self.value[1]

    @property
    def bits(self) -> int:
        return self.value[1] * 8

    @property
    def signed(self) -> bool:
        """
        True for the two's complement integer kinds. Always False for floats, which carry their own sign bit.
        """
        return self.value[2]

    @property
    def is_float(self) -> bool:
        return self.value[3]

    @classmethod
    def from_name(cls, name: str) -> 'NumberKind':
        """
        Looks up a kind by name, e.g. ``u16``, ``uint16``, ``int32``, ``float`` or ``double``. Case is ignored.

        Raises:
            ValueError: If the name is not recognized.
            TypeError: If the name is not a string.
        """
        if not isinstance(name, str):
            raise TypeError(f"Expected a str, got '{type(name).__name__}'")

        key = name.strip().lower()
        key = _KIND_ALIASES.get(key, key)

        for kind in cls:
            if kind.short_name == key:
                return kind

        raise ValueError(f"Unrecognized number kind: {name!r}")

    def __str__(self) -> str:
        return self.short_name


_KIND_ALIASES = {
    'uint16': 'u16',
    'int16': 'i16',
    'uint32': 'u32',
    'int32': 'i32',
    'uint64': 'u64',
    'int64': 'i64',
    'float32': 'f32',
    'float': 'f32',
    'single': 'f32',
    'float64': 'f64',
    'double': 'f64',
}
