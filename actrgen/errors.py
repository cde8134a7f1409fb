"""
actrgen error taxonomy

Every failure raised by the generator or the runner derives from ActrGenError.
I/O failures while writing the generated script are plain OSError and are
propagated unchanged.
"""


class ActrGenError(Exception):
    """Base class for actrgen errors."""


class ConfigurationError(ActrGenError):
    """The model or the framework is not configured well enough to proceed."""


class BufferNotFoundError(ActrGenError):
    """A caller referenced a buffer the model does not declare."""

    def __init__(self, buffer_name: str, model_name: str, action: str = "initialize"):
        self.buffer_name = buffer_name
        self.model_name = model_name
        super().__init__(
            f"cannot {action} buffer '{buffer_name}' - not found in model '{model_name}'"
        )


class ChunkParseError(ActrGenError):
    """Chunk text could not be turned into a pattern."""


class UnsupportedStatementError(ActrGenError):
    """A statement has no form the target runtime can express."""


class PreflightError(ActrGenError):
    """The interpreter or the runtime package is unavailable."""


class ExecutionError(ActrGenError):
    """The generated script exited with a non-zero status.

    The message is the captured output, verbatim.
    """

    def __init__(self, output: str, returncode: int = 1):
        self.output = output
        self.returncode = returncode
        super().__init__(output)

    def __str__(self) -> str:
        return self.output
