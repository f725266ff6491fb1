"""Shared exceptions for the verdict package."""

from __future__ import annotations


class VerdictError(Exception):
    """Base class for all errors raised by verdict."""


class ReportParseError(VerdictError):
    """Exception raised when a report document cannot be loaded.

    Raised for documents that are not well-formed XML and for documents
    whose root element does not belong to the declared results format.
    Only the offending file is abandoned; other files keep loading.
    """

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot parse test results from {source}: {reason}")


class ConfigurationError(VerdictError):
    """Exception raised when the engine is used without a required setup step."""


class SignatureBuilderNotConfigured(ConfigurationError):
    """Exception raised when an example is queried with no signature builder.

    Install one with ``set_example_signature_builder`` or pass it to
    ``get_example_result`` directly.
    """

    def __init__(self) -> None:
        super().__init__(
            "No example signature builder is installed. "
            "Example results cannot be located without one; call "
            "set_example_signature_builder() or pass signature_builder=..."
        )
