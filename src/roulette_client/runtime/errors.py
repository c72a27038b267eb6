"""
Roulette Codec Error Model

This module provides the error handling framework for the roulette client
codec. Schema errors are programmer/configuration faults; codec errors are
raised whenever input bytes are truncated, corrupted or adversarial.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """Codec error codes."""

    # Success
    OK = 0

    # General errors (1-99)
    UNKNOWN = 1

    # Schema errors (100-199)
    UNKNOWN_RECORD_TYPE = 100
    DUPLICATE_RECORD_TYPE = 101
    FIELD_MISMATCH = 102
    REGISTRY_FROZEN = 103

    # Codec errors (200-299)
    BUFFER_UNDERRUN = 200
    INVALID_ADDRESS = 201
    LENGTH_OVERFLOW = 202
    VALUE_OUT_OF_RANGE = 203
    INVALID_BOOL = 204
    TRAILING_BYTES = 205
    UNKNOWN_DISCRIMINANT = 206


class RouletteCodecError(Exception):
    """
    Base class for all codec errors.

    Carries a code plus a details mapping (record type, field path, byte
    offset) that layers fill in as the error propagates upward.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize a codec error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    @property
    def record_type(self) -> Optional[str]:
        return self.details.get("record_type")

    @property
    def field(self) -> Optional[str]:
        return self.details.get("field")

    @property
    def offset(self) -> Optional[int]:
        return self.details.get("offset")

    def add_field_context(self, segment: str) -> "RouletteCodecError":
        """
        Prepend a field path segment.

        Segments starting with "[" are vector indices and are joined without
        a dot, so nested failures read like ``guesses[1].amount``.
        """
        current = self.details.get("field")
        if current is None:
            self.details["field"] = segment
        elif current.startswith("["):
            self.details["field"] = f"{segment}{current}"
        else:
            self.details["field"] = f"{segment}.{current}"
        return self

    def set_record_type(self, record_type: Any) -> "RouletteCodecError":
        """Record the outermost record type; called at every struct level."""
        self.details["record_type"] = str(getattr(record_type, "value", record_type))
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result


class SchemaError(RouletteCodecError):
    """Schema and registry configuration errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN_RECORD_TYPE,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class UnknownRecordTypeError(SchemaError):
    """Record type identifier is not registered."""

    def __init__(self, message: str = "Unknown record type",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.UNKNOWN_RECORD_TYPE, details, cause)


class DuplicateRecordTypeError(SchemaError):
    """Record type identifier registered twice."""

    def __init__(self, message: str = "Duplicate record type",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.DUPLICATE_RECORD_TYPE, details, cause)


class FieldMismatchError(SchemaError):
    """Field values do not match the declared field list."""

    def __init__(self, message: str = "Field mismatch",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.FIELD_MISMATCH, details, cause)


class RegistryFrozenError(SchemaError):
    """Registration attempted after the registry was frozen."""

    def __init__(self, message: str = "Registry is frozen",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.REGISTRY_FROZEN, details, cause)


class CodecError(RouletteCodecError):
    """Binary encoding/decoding errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.BUFFER_UNDERRUN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class BufferUnderrunError(CodecError):
    """Buffer ended before a value could be read."""

    def __init__(self, message: str = "Buffer underrun",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.BUFFER_UNDERRUN, details, cause)


class InvalidAddressError(CodecError):
    """Address text is not base58 or does not decode to 32 bytes."""

    def __init__(self, message: str = "Invalid address",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_ADDRESS, details, cause)


class LengthOverflowError(CodecError):
    """Declared vector length exceeds the addressable bound."""

    def __init__(self, message: str = "Length overflow",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.LENGTH_OVERFLOW, details, cause)


class ValueOutOfRangeError(CodecError):
    """Integer does not fit the declared width."""

    def __init__(self, message: str = "Value out of range",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.VALUE_OUT_OF_RANGE, details, cause)


class InvalidBoolError(CodecError):
    """Bool byte is neither 0 nor 1."""

    def __init__(self, message: str = "Invalid bool",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_BOOL, details, cause)


class TrailingBytesError(CodecError):
    """Unconsumed bytes remain after a strict decode."""

    def __init__(self, message: str = "Trailing bytes",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.TRAILING_BYTES, details, cause)


class UnknownDiscriminantError(CodecError):
    """Leading instruction byte does not name a known instruction."""

    def __init__(self, message: str = "Unknown instruction discriminant",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.UNKNOWN_DISCRIMINANT, details, cause)


__all__ = [
    "ErrorCode",
    "RouletteCodecError",
    "SchemaError",
    "UnknownRecordTypeError",
    "DuplicateRecordTypeError",
    "FieldMismatchError",
    "RegistryFrozenError",
    "CodecError",
    "BufferUnderrunError",
    "InvalidAddressError",
    "LengthOverflowError",
    "ValueOutOfRangeError",
    "InvalidBoolError",
    "TrailingBytesError",
    "UnknownDiscriminantError",
]
