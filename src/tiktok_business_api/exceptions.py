"""Structured exception classes for the TikTok Business API client."""

import json
from typing import Any, Dict, Optional


class TikTokBusinessError(Exception):
    """Base exception for all TikTok Business API client errors.

    This exception serves as the parent class for every error raised by
    the client, providing a consistent interface for error handling
    across resource modules.

    :param message: Human-readable error message
    :param error_type: Optional error type for programmatic handling
    :param details: Optional dictionary containing additional error context
    """

    def __init__(
        self,
        message: str,
        error_type: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """Initialize the exception with message, error type, and details."""
        super().__init__(message)
        self.message = message
        self.error_type = error_type or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format.

        :return: Dictionary containing error type, message, and details
        """
        return {
            "error": self.error_type,
            "message": self.message,
            "details": self.details,
        }

    def to_json(self) -> str:
        """Convert exception to JSON string.

        :return: JSON-encoded string representation of the exception
        """
        return json.dumps(self.to_dict())


class ConfigurationError(TikTokBusinessError):
    """Raised when required configuration is missing or invalid.

    :param message: Description of the configuration error
    :param setting: Optional name of the problematic setting
    """

    def __init__(self, message: str, setting: Optional[str] = None):
        """Initialize configuration error with message and optional setting."""
        details = {}
        if setting:
            details["setting"] = setting
        super().__init__(
            message=message, error_type="CONFIGURATION_ERROR", details=details
        )


class ValidationError(TikTokBusinessError):
    """Raised when request arguments fail local validation.

    Validation happens before any network call is made, so a request
    that raises this error never reaches the API.

    :param message: Description of the validation error
    :param field: Optional name of the field that failed validation
    :param value: Optional value that caused the validation failure
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
    ):
        """Initialize validation error with message and optional field/value."""
        details = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)
        super().__init__(
            message=message, error_type="VALIDATION_ERROR", details=details
        )
        self.field = field


class RequestEncodingError(TikTokBusinessError):
    """Raised when a request body or query parameter cannot be JSON encoded.

    :param message: Description of the encoding failure
    :param key: Optional query parameter or body name being encoded
    """

    def __init__(self, message: str, key: Optional[str] = None):
        """Initialize encoding error with message and optional key."""
        details = {}
        if key:
            details["key"] = key
        super().__init__(
            message=message, error_type="REQUEST_ENCODING_ERROR", details=details
        )
        self.key = key


class TransportError(TikTokBusinessError):
    """Raised when the HTTP exchange itself fails.

    Covers connection failures, protocol errors and anything else httpx
    reports before a response body could be read.

    :param message: Description of the transport failure
    :param original_error: Optional underlying httpx exception
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        """Initialize transport error with message and optional cause."""
        details = {}
        if original_error:
            details["original_error"] = str(original_error)
            details["error_type"] = type(original_error).__name__
        super().__init__(
            message=message, error_type="TRANSPORT_ERROR", details=details
        )
        self.original_error = original_error


class TimeoutError(TransportError):
    """Raised when a request exceeds the configured timeout."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        """Initialize timeout error with message and optional cause."""
        super().__init__(message=message, original_error=original_error)
        self.error_type = "TIMEOUT_ERROR"


class ResponseDecodeError(TikTokBusinessError):
    """Raised when a response envelope or its data payload cannot be decoded.

    :param message: Description of the decode failure
    :param status_code: Optional HTTP status code of the response
    :param response_body: Optional raw response body (truncated)
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_body: Optional[str] = None,
    ):
        """Initialize decode error with message and optional response details."""
        details: Dict[str, Any] = {}
        if status_code:
            details["status_code"] = status_code
        if response_body:
            details["response_body"] = response_body[:500]
        super().__init__(
            message=message, error_type="RESPONSE_DECODE_ERROR", details=details
        )
        self.status_code = status_code
        self.response_body = response_body


class DownloadError(TikTokBusinessError):
    """Raised when a media download does not complete.

    :param message: Description of the download failure
    :param url: Optional URL that was being downloaded
    :param status_code: Optional HTTP status code returned by the host
    """

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        """Initialize download error with message and optional context."""
        details: Dict[str, Any] = {}
        if url:
            details["url"] = url
        if status_code:
            details["status_code"] = status_code
        super().__init__(
            message=message, error_type="DOWNLOAD_ERROR", details=details
        )
        self.status_code = status_code


class APIError(TikTokBusinessError):
    """Raised when the API answers with a non-zero envelope code.

    The ``code`` attribute is the vendor's integer error code so callers
    can branch on it directly.

    :param code: Envelope error code returned by the API
    :param message: Envelope message returned by the API
    :param request_id: Optional request identifier returned by the API
    """

    def __init__(self, code: int, message: str, request_id: Optional[str] = None):
        """Initialize API error with envelope code, message and request id."""
        details: Dict[str, Any] = {"code": code}
        if request_id:
            details["request_id"] = request_id
        super().__init__(message=message, error_type="API_ERROR", details=details)
        self.code = code
        self.request_id = request_id or ""

    def __str__(self) -> str:
        return self.message
