"""
Custom exception hierarchy for kmlmodel.

Every failure in the value model is raised synchronously at construction
time. The value errors also derive from ``ValueError`` so that pydantic
reports them as field validation errors when they occur inside a composite.
"""

from typing import Any, Dict, List, Optional


class KmlModelException(Exception):
    """
    Base exception for all kmlmodel errors.

    Attributes:
        error_code: String identifier for the error type
        message: User-friendly error message
        details: Technical details (offending value, violated constraint)
        suggestions: Optional list of resolution suggestions
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize KmlModelException.

        Args:
            message: User-friendly error message
            error_code: String identifier for the error type
            details: Technical details for logging
            suggestions: List of suggestions for resolution
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.suggestions = suggestions or []

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary for diagnostics.

        Returns:
            Dictionary representation of the error
        """
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "suggestions": self.suggestions,
        }

    def __str__(self) -> str:
        """String representation of the exception."""
        return f"{self.error_code}: {self.message}"

    def __repr__(self) -> str:
        """Detailed string representation for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"error_code='{self.error_code}', "
            f"message='{self.message}')"
        )


class AngleRangeError(KmlModelException, ValueError):
    """
    Raised when a bounded angle is constructed outside its interval.

    The details carry the offending value, the angle kind and both bounds.
    """

    def __init__(
        self,
        value: float,
        kind: str,
        minimum: float,
        maximum: float,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize AngleRangeError.

        Args:
            value: The rejected value
            kind: Name of the angle kind (e.g. 'angle90')
            minimum: Inclusive lower bound of the kind
            maximum: Inclusive upper bound of the kind
            suggestions: List of suggestions for fixing the value
        """
        super().__init__(
            message=f"{kind} value {value!r} is outside [{minimum}, {maximum}]",
            error_code="RANGE_ERROR",
            details={
                "value": value,
                "kind": kind,
                "minimum": minimum,
                "maximum": maximum,
            },
            suggestions=suggestions or [f"Use a value between {minimum} and {maximum}"],
        )
        self.value = value
        self.kind = kind
        self.minimum = minimum
        self.maximum = maximum


class ColorFormatError(KmlModelException, ValueError):
    """
    Raised when a color string is not eight hexadecimal digits.
    """

    def __init__(self, value: Any, pattern: str):
        """
        Initialize ColorFormatError.

        Args:
            value: The rejected input
            pattern: Regular expression the input had to match
        """
        super().__init__(
            message=f"Color {value!r} does not match {pattern}",
            error_code="FORMAT_ERROR",
            details={"value": value, "pattern": pattern},
            suggestions=["Colors are written as eight hex digits in aabbggrr order"],
        )
        self.value = value
        self.pattern = pattern


class CoordinateParseError(KmlModelException, ValueError):
    """
    Raised when coordinate text cannot be parsed.

    Used for tuples with fewer than two or more than three fields and for
    non-numeric fields.
    """

    def __init__(
        self,
        message: str,
        text: Any,
        token: Optional[str] = None,
    ):
        """
        Initialize CoordinateParseError.

        Args:
            message: User-friendly error message
            text: The coordinate text being parsed
            token: The offending token, if a single one is to blame
        """
        details: Dict[str, Any] = {"text": text}
        if token is not None:
            details["token"] = token

        super().__init__(
            message=message,
            error_code="PARSE_ERROR",
            details=details,
            suggestions=[
                "Coordinates are written as lon,lat or lon,lat,alt",
                "Separate coordinate tuples with whitespace, not commas",
            ],
        )
        self.text = text
        self.token = token


class ValueParseError(KmlModelException, ValueError):
    """
    Raised when a scalar text token is not a number.
    """

    def __init__(self, text: Any, expected: str = "number"):
        """
        Initialize ValueParseError.

        Args:
            text: The rejected text token
            expected: Description of the expected value
        """
        super().__init__(
            message=f"Cannot read {text!r} as a {expected}",
            error_code="PARSE_ERROR",
            details={"text": text, "expected": expected},
        )
        self.text = text


class ConfigurationError(KmlModelException):
    """
    Raised when package settings are invalid.
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize ConfigurationError.

        Args:
            message: User-friendly error message
            config_key: Configuration key that is invalid
            details: Technical details about the configuration error
        """
        error_details = details or {}
        if config_key:
            error_details["config_key"] = config_key

        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            details=error_details,
            suggestions=[
                "Check KMLMODEL_* environment variables are set correctly",
                "Verify .env file syntax",
            ],
        )
