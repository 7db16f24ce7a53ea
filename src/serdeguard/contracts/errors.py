"""Exception types for codec and contract failures.

Codec errors mean "the check could not be completed". They are never a
verdict on the object under test: contracts catch them, skip the candidate
and move on. Confirmed violations are values (ContractViolation), not
exceptions.
"""

from typing import Any


class CodecError(Exception):
    """Base class for serialization failures inside a codec.

    Attributes:
        codec: Name of the codec that failed (e.g., "json")
        type_name: Qualified name of the type being processed
    """

    def __init__(self, codec: str, type_name: str, reason: str) -> None:
        self.codec = codec
        self.type_name = type_name
        self.reason = reason
        super().__init__(f"{codec} codec failed for {type_name}: {reason}")


class EncodeError(CodecError):
    """Raised when an object cannot be encoded (unsupported value, cycle)."""


class DecodeError(CodecError):
    """Raised when encoded text cannot be rebuilt into the requested type."""


class EqualityError(Exception):
    """Raised when the original object's __eq__ itself raises.

    Treated like a codec failure: the candidate cannot be judged.
    """

    def __init__(self, subject: Any, cause: BaseException) -> None:
        self.type_name = qualified_name(type(subject))
        super().__init__(f"__eq__ of {self.type_name} raised {type(cause).__name__}: {cause}")


def qualified_name(cls: type) -> str:
    """Return module-qualified class name (e.g. 'decimal.Decimal')."""
    return f"{cls.__module__}.{cls.__qualname__}"
