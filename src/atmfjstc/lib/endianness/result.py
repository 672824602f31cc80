from dataclasses import dataclass
from typing import Generic, TypeVar, Optional, Callable, Union

from atmfjstc.lib.endianness.errors import ShortBufferError


T = TypeVar('T')
U = TypeVar('U')


@dataclass(frozen=True)
class DecodeResult(Generic[T]):
    """
    The outcome of a decode operation: either a value, or the error explaining why no value could be produced.

    Exactly one of `value` and `error` is meaningful. A result is successful if and only if `error` is None, so any
    value (including 0 or NaN) is a legitimate success value.

    Typical use::

        result = decode_u32(data, ByteOrder.BIG_ENDIAN)
        if result.is_error:
            ...  # wait for more data, report, etc.
        else:
            use(result.value)

    or, if a short buffer should simply be fatal, ``decode_u32(data, ByteOrder.BIG_ENDIAN).unwrap()``.
    """

    value: Optional[T] = None
    error: Optional[ShortBufferError] = None

    def __post_init__(self):
        if (self.error is not None) and (self.value is not None):
            raise ValueError("A DecodeResult cannot have both a value and an error")

    @staticmethod
    def success(value: T) -> 'DecodeResult[T]':
        return DecodeResult(value=value)

    @staticmethod
    def failure(error: ShortBufferError) -> 'DecodeResult':
        return DecodeResult(error=error)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def unwrap(self) -> T:
        """
        Returns the decoded value.

        Raises:
            ShortBufferError: If the result is a failure.
        """
        if self.error is not None:
            raise self.error

        return self.value

    def unwrap_or(self, default: U) -> Union[T, U]:
        return default if self.error is not None else self.value

    def map(self, func: Callable[[T], U]) -> 'DecodeResult[U]':
        """
        Transforms the value of a successful result with `func`. Failures are returned unchanged.
        """
        if self.error is not None:
            return self

        return DecodeResult(value=func(self.value))
