"""
Command execution service
Runs external processes synchronously and captures combined output
"""
import subprocess
from typing import List, Optional
from pydantic import BaseModel


# =============================================================================
# **DATA STRUCTURES** - Execution results
# =============================================================================

class ExecutionResult(BaseModel):
    """Execution result data structure"""
    returncode: int
    output: str = ""
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.returncode == 0 and self.error is None

    @classmethod
    def from_subprocess_result(cls, result: subprocess.CompletedProcess) -> 'ExecutionResult':
        """Create ExecutionResult from subprocess.CompletedProcess"""
        return cls(
            returncode=result.returncode,
            output=result.stdout or ""
        )

    @classmethod
    def start_failure(cls, exception: Exception) -> 'ExecutionResult':
        """Create result for a process that never started"""
        return cls(
            returncode=-1,
            error=str(exception)
        )


# =============================================================================
# **COMMAND EXECUTION CONCERN** - Process execution and management
# =============================================================================

class CommandExecutionService:
    """Command execution - ONLY handles process execution and result management"""

    def __init__(self, working_directory: Optional[str] = None):
        self.working_directory = working_directory

    def execute_locally(self, command: List[str]) -> ExecutionResult:
        """Run command to completion with stderr merged into stdout

        No timeout is applied: a hung command blocks until it exits.
        """
        try:
            result = subprocess.run(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                cwd=self.working_directory
            )
            return ExecutionResult.from_subprocess_result(result)

        except OSError as e:
            return ExecutionResult.start_failure(e)
