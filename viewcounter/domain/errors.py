"""Error taxonomy for the view counter.

Every error carries the HTTP status the API layer renders it with, so the
transport never has to know which exception means what.
"""


class ViewCounterError(Exception):
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ViewCounterError):
    """Request rejected before any counter is touched."""

    status_code = 400


class MissingTenantError(ValidationError):
    def __init__(self, message: str = "Missing Host header"):
        super().__init__(message)


class InvalidPathError(ValidationError):
    def __init__(self, path: str):
        super().__init__(
            f"Invalid resource path {path!r}. "
            "Please provide a specific path (e.g., /article/1)."
        )
        self.path = path


class MalformedBatchError(ValidationError):
    def __init__(self, reason: str):
        super().__init__(f"Invalid request body: {reason}")


class MethodNotSupportedError(ViewCounterError):
    status_code = 405

    def __init__(self, method: str):
        super().__init__(f"Method {method} not supported")
        self.method = method


class StorageError(ViewCounterError):
    """The persistence collaborator failed; the operation is not confirmed."""

    status_code = 500
