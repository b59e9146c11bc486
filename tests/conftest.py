"""Shared fixtures: a scripted command runner standing in for docker-compose."""
from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Optional, Tuple

import pytest

from models.strategy import Operation, Strategy
from services.attempt_logger import AttemptLogger
from services.errors import ExternalCommandError
from services.strategy_executor import StrategyExecutor


class ScriptedRunner:
    """Records every invocation; `fails` decides per (strategy, operation) whether to fail."""

    def __init__(self, fails: Callable[[Optional[Strategy], Operation], bool]):
        self.fails = fails
        self.current: Optional[Strategy] = None
        self.calls: List[Tuple[Optional[Strategy], Operation]] = []

    def run(self, operation: Operation) -> str:
        self.calls.append((self.current, operation))
        if self.fails(self.current, operation):
            raise ExternalCommandError(
                operation=operation.value,
                command=["docker-compose", "exec", "-T", "fpm", "bin/magento", operation.value],
                output=f"{operation.value} exploded\n",
                returncode=1,
            )
        return f"{operation.value} done\n"

    def operations_for(self, strategy: Strategy) -> List[Operation]:
        return [operation for current, operation in self.calls if current == strategy]


class TrackingExecutor(StrategyExecutor):
    """Tells the scripted runner which strategy it is running."""

    def __init__(self, runner: ScriptedRunner):
        super().__init__(runner)
        self.started: List[Strategy] = []

    def run(self, strategy: Strategy) -> None:
        self.started.append(strategy)
        self.runner.current = strategy
        super().run(strategy)


@pytest.fixture
def attempt_logger(tmp_path: Path) -> AttemptLogger:
    return AttemptLogger(tmp_path / "fixmygento.log", Path("/srv/shop"))


def make_runner(fails: Callable[[Optional[Strategy], Operation], bool]) -> ScriptedRunner:
    return ScriptedRunner(fails)
