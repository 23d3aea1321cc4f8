"""Errors raised by ECS task operations."""


class EcsTaskError(RuntimeError):
    """A remote ECS call failed and the operation was abandoned.

    The underlying botocore exception is available as ``__cause__``.
    """

    def __init__(self, operation: str, message: str) -> None:
        """Record the failed operation alongside the message."""
        super().__init__(message)
        self.operation = operation
