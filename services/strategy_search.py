"""
Strategy search driver
Tries cataloged strategies in priority order until one completes without error
"""
import logging
from enum import Enum
from typing import Optional, Sequence
from pydantic import BaseModel
from models.catalog import STRATEGY_CATALOG
from models.strategy import Strategy
from services.attempt_logger import AttemptLogger
from services.errors import ExternalCommandError, LoggingError, TotalExhaustionError
from services.strategy_executor import StrategyExecutor

logger = logging.getLogger(__name__)


class SearchState(Enum):
    """Driver states; SUCCEEDED and EXHAUSTED are terminal"""
    TRYING = "trying"
    SUCCEEDED = "succeeded"
    EXHAUSTED = "exhausted"


class SearchResult(BaseModel):
    """The strategy that worked and how many attempts it took"""
    strategy: Strategy
    index: int
    attempts: int


class StrategySearch:
    """Runs strategies strictly in catalog order; first success wins

    Every attempt is recorded before the next transition. A record that
    cannot be written only produces a warning.
    """

    def __init__(self, executor: StrategyExecutor, attempt_logger: AttemptLogger,
                 catalog: Sequence[Strategy] = STRATEGY_CATALOG):
        self.executor = executor
        self.attempt_logger = attempt_logger
        self.catalog = tuple(catalog)
        self.state = SearchState.TRYING
        self.current_index = 0

    def run(self) -> SearchResult:
        """Search for a working strategy, raising TotalExhaustionError if none works"""
        total = len(self.catalog)
        last_error: Optional[ExternalCommandError] = None

        for index, strategy in enumerate(self.catalog):
            self.state = SearchState.TRYING
            self.current_index = index

            logger.info('Attempting strategy %d/%d: "%s"...', index + 1, total, strategy.name())

            error = None
            try:
                self.executor.run(strategy)
            except ExternalCommandError as e:
                error = e

            self._record_attempt(strategy, error is None)

            if error is not None:
                logger.error("Error: %s", error)
                logger.info("Failure ❌")
                last_error = error
                continue

            logger.info("Success! ✅")
            self.state = SearchState.SUCCEEDED
            return SearchResult(strategy=strategy, index=index, attempts=index + 1)

        self.state = SearchState.EXHAUSTED
        raise TotalExhaustionError(attempts=total, last_error=last_error)

    def _record_attempt(self, strategy: Strategy, success: bool):
        try:
            self.attempt_logger.log_attempt(strategy.name(), success)
        except LoggingError as e:
            logger.warning("Warning: Failed to log result: %s", e)
