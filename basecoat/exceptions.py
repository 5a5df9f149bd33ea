"""Custom exceptions for Basecoat with proper HTTP status codes."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error responses."""

    # Generic errors
    BASECOAT_ERROR = "BASECOAT_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # View errors
    VIEW_ERROR = "VIEW_ERROR"
    TEMPLATE_NOT_FOUND = "TEMPLATE_NOT_FOUND"
    LAYOUT_NOT_FOUND = "LAYOUT_NOT_FOUND"
    DATA_TYPE_MISMATCH = "DATA_TYPE_MISMATCH"

    # Routing errors
    ROUTING_ERROR = "ROUTING_ERROR"
    ROUTE_NOT_FOUND = "ROUTE_NOT_FOUND"

    # Configuration errors
    CONFIG_ERROR = "CONFIG_ERROR"


class BasecoatException(Exception):
    """Base exception for Basecoat errors with HTTP status code support.

    All custom exceptions should inherit from this class to ensure
    consistent error handling across the application.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.BASECOAT_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize Basecoat exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class ViewException(BasecoatException):
    """Template rendering errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VIEW_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)


class TemplateNotFoundException(ViewException):
    """Template file could not be resolved."""

    def __init__(self, template: str, details: dict[str, Any] | None = None):
        super().__init__(
            f"Template not found: {template}",
            code=ErrorCode.TEMPLATE_NOT_FOUND,
            status_code=404,
            details={"template": template, **(details or {})},
        )


class LayoutNotFoundException(ViewException):
    """Layout name is not registered."""

    def __init__(self, layout: str | None, details: dict[str, Any] | None = None):
        super().__init__(
            f"Layout not registered: {layout}",
            code=ErrorCode.LAYOUT_NOT_FOUND,
            status_code=500,
            details={"layout": layout, **(details or {})},
        )


class DataTypeMismatchException(ViewException):
    """Data item cannot be appended to."""

    def __init__(self, name: str, existing: Any, content: Any):
        super().__init__(
            f"Cannot append {type(content).__name__} to {type(existing).__name__} data item '{name}'",
            code=ErrorCode.DATA_TYPE_MISMATCH,
            status_code=500,
            details={
                "name": name,
                "existing_type": type(existing).__name__,
                "content_type": type(content).__name__,
            },
        )


class RoutingException(BasecoatException):
    """Route dispatch errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.ROUTING_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)


class RouteNotFoundException(RoutingException):
    """Requested route is not in the route table."""

    def __init__(self, route: str):
        super().__init__(
            f"Route not found: {route}",
            code=ErrorCode.ROUTE_NOT_FOUND,
            status_code=404,
            details={"route": route},
        )


class ConfigurationException(BasecoatException):
    """Configuration errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIG_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)
