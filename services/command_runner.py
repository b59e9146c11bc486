"""
Maintenance command runner
Executes one bin/magento operation inside the application container
"""
import logging
from models.strategy import Operation
from services.container_command_builder import ContainerCommandBuilder
from services.execution import CommandExecutionService
from services.errors import ExternalCommandError

logger = logging.getLogger(__name__)


class CommandRunner:
    """Runs a single maintenance operation and reports its captured output"""

    def __init__(self, command_builder: ContainerCommandBuilder = None,
                 executor: CommandExecutionService = None):
        self.command_builder = command_builder or ContainerCommandBuilder()
        self.executor = executor or CommandExecutionService()

    def run(self, operation: Operation) -> str:
        """Run operation, returning its combined output

        Raises ExternalCommandError on non-zero exit or when the process
        cannot be started. Output is echoed in both cases.
        """
        command = self.command_builder.build_exec_command(operation.value)

        logger.info("Running: %s", self.command_builder.render(command))

        result = self.executor.execute_locally(command)

        if result.output:
            print(result.output, end='', flush=True)

        if not result.success:
            raise ExternalCommandError(
                operation=operation.value,
                command=command,
                output=result.output,
                returncode=result.returncode,
                cause=result.error
            )

        return result.output
