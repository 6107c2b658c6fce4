"""Typed failures raised by the gateway."""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    CONFIGURATION_ERROR = "configuration_error"
    UNKNOWN_MODEL = "unknown_model"
    PROVIDER_ERROR = "provider_error"
    PARSE_ERROR = "parse_error"


class GatewayError(Exception):
    """
    Base class for every failure surfaced to gateway callers.

    The kind is always set so callers can branch on it without
    inspecting the exception class.
    """

    kind: ErrorKind = ErrorKind.PROVIDER_ERROR

    def __init__(self, message: str, model_id: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.model_id = model_id

    def with_model(self, model_id: str) -> "GatewayError":
        """Tag the error with the requested model id if it has none yet."""
        if self.model_id is None:
            self.model_id = model_id
        return self

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "model_id": self.model_id,
            "message": self.message,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(kind={self.kind.value!r}, model_id={self.model_id!r}, message={self.message!r})"


class ConfigurationError(GatewayError):
    """Missing credential or invalid configuration. Raised at startup."""

    kind = ErrorKind.CONFIGURATION_ERROR


class UnknownModelError(GatewayError):
    kind = ErrorKind.UNKNOWN_MODEL


class ProviderError(GatewayError):
    """The provider call itself failed; the original message is kept verbatim."""

    kind = ErrorKind.PROVIDER_ERROR


class ParseError(GatewayError):
    """The provider answered but the text is not valid JSON."""

    kind = ErrorKind.PARSE_ERROR

    def __init__(self, message: str, model_id: Optional[str] = None, raw_text: str = ""):
        super().__init__(message, model_id)
        self.raw_text = raw_text


class ModelNotFoundError(LookupError):
    """Raised by the catalog when a model id is not registered."""

    def __init__(self, model_id: str):
        super().__init__(f"Model not found: {model_id}")
        self.model_id = model_id


class CatalogError(ValueError):
    """Raised when catalog data violates its invariants."""
