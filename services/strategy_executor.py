"""
Strategy executor
Runs the operations of a strategy in order, abandoning it at the first failure
"""
from models.strategy import Strategy
from services.command_runner import CommandRunner


class StrategyExecutor:
    """Service for executing one strategy as an all-or-nothing pipeline"""

    def __init__(self, runner: CommandRunner):
        self.runner = runner

    def run(self, strategy: Strategy) -> None:
        """Run every operation of the strategy; first ExternalCommandError propagates"""
        for operation in strategy.operations:
            self.runner.run(operation)
