from atmfjstc.lib.endianness.kinds import NumberKind


class DecodeError(Exception):
    """
    Base class for errors reported by the decoding functions.

    Note that these are never raised by the decoders themselves. They are delivered inside a `DecodeResult`, and only
    raised if the caller explicitly asks for it via `DecodeResult.unwrap()`.
    """


class ShortBufferError(DecodeError):
    """
    The buffer does not contain enough bytes for the requested number kind. Supplying a longer buffer is the only
    remedy.
    """

    kind: NumberKind
    expected_length: int
    actual_length: int

    def __init__(self, kind: NumberKind, actual_length: int):
        self.kind = kind
        self.expected_length = kind.n_bytes
        self.actual_length = actual_length

        super().__init__(
            f"Buffer too short to decode {kind}: expected {kind.n_bytes} bytes, but only {actual_length} were found"
        )
