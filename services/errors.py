"""
Error kinds raised while searching for a working strategy
"""
from typing import List, Optional
import shlex


class FixMyGentoError(Exception):
    """Base class for all fixmygento errors"""


class ExternalCommandError(FixMyGentoError):
    """A maintenance command exited non-zero or could not be started"""

    def __init__(self, operation: str, command: List[str], output: str = "",
                 returncode: Optional[int] = None, cause: Optional[str] = None):
        self.operation = operation
        self.command = command
        self.output = output
        self.returncode = returncode
        self.cause = cause
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        command_str = shlex.join(self.command)
        if self.cause:
            return f"'{self.operation}' failed to start ({command_str}): {self.cause}"
        return f"'{self.operation}' exited with status {self.returncode} ({command_str})"


class LoggingError(FixMyGentoError):
    """An attempt record could not be persisted"""


class TotalExhaustionError(FixMyGentoError):
    """Every cataloged strategy failed"""

    def __init__(self, attempts: int, last_error: Optional[ExternalCommandError] = None):
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(f"All {attempts} strategies failed")
