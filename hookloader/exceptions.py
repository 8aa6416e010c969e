"""
Custom Exception Classes for hookloader

The registrar never validates binding contents. These exceptions cover a
missing host collaborator and callback targets the in-memory host cannot
dispatch.
"""

from typing import Any


class HookLoaderError(Exception):
    """Base exception class for all hookloader exceptions"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


# ============================================================================
# Registrar Exceptions
# ============================================================================


class HostNotConfiguredError(HookLoaderError):
    """Raised when runner() is called with no host to register into"""

    def __init__(self, message: str = "No hook host configured for this registrar"):
        super().__init__(message=message)


# ============================================================================
# Dispatch Exceptions
# ============================================================================


class CallbackResolutionError(HookLoaderError):
    """Raised when a (component, method name) target has no such method"""

    def __init__(self, hook_name: str, callback_name: str):
        message = f"Callback '{callback_name}' for hook '{hook_name}' could not be resolved"
        super().__init__(
            message=message,
            details={"hook_name": hook_name, "callback_name": callback_name},
        )


class InvalidCallbackError(HookLoaderError):
    """Raised when a hook target is neither callable nor a (component, name) pair"""

    def __init__(self, hook_name: str, message: str | None = None):
        super().__init__(
            message=message or f"Invalid callback target registered for hook '{hook_name}'",
            details={"hook_name": hook_name},
        )
