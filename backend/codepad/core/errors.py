class ExecutionError(Exception):
    """Base class for failures while driving a remote execution."""


class ConfigurationError(ExecutionError):
    """Credential or endpoint missing; raised before any network call."""


class TransportError(ExecutionError):
    """The request never got a response (DNS, connect, read timeout...)."""


class RemoteRejectionError(ExecutionError):
    """The judging service answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str = ""):
        self.status_code = status_code
        self.message = message
        text = f"HTTP error! status: {status_code}"
        if message:
            text += f" - {message}"
        super().__init__(text)


class ProtocolError(ExecutionError):
    """A success response whose body is not what the service documents."""


class ExecutionTimeout(ExecutionError):
    """Polling budget exhausted while the job was still queued or processing.

    The job may still complete server-side; no partial result is attached.
    """

    def __init__(self, token: str, attempts: int, waited_seconds: float):
        self.token = token
        self.attempts = attempts
        self.waited_seconds = waited_seconds
        super().__init__(
            f"no terminal status for {token} after {attempts} polls "
            f"({waited_seconds:g}s)"
        )
