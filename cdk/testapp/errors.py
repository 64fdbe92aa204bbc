"""
Error types for the TestApp deployment tooling.

Provides structured errors with error codes for configuration problems
found before synthesis and for incomplete stack outputs after a deploy.
"""

from typing import Any, Dict, Optional


class ErrorCode:
    """Standard error codes for the deployment tooling."""

    INVALID_CONFIG = "INVALID_CONFIG"
    STACK_NOT_FOUND = "STACK_NOT_FOUND"
    MISSING_OUTPUTS = "MISSING_OUTPUTS"


class AppError(Exception):
    """
    Application error with error code and message.

    Carries optional details that are merged into the dict form.
    """

    def __init__(self, error_code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.error_code = error_code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging or JSON output."""
        return {
            "errorCode": self.error_code,
            "message": self.message,
            **self.details,
        }


class ConfigError(AppError):
    """Deployment configuration cannot be used to build the stack."""

    def __init__(self, message: str, **details: Any):
        super().__init__(ErrorCode.INVALID_CONFIG, message, details)


class StackNotFoundError(AppError):
    """CloudFormation has no stack with the requested name."""

    def __init__(self, stack_name: str):
        super().__init__(
            ErrorCode.STACK_NOT_FOUND,
            f"Stack not found: {stack_name}",
            {"stackName": stack_name},
        )


class MissingOutputsError(AppError):
    """A deployed stack is missing some of its expected outputs."""

    def __init__(self, stack_name: str, missing: list[str]):
        self.missing = missing
        super().__init__(
            ErrorCode.MISSING_OUTPUTS,
            f"Stack {stack_name} is missing outputs: {', '.join(missing)}",
            {"stackName": stack_name, "missing": missing},
        )
