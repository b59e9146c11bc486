"""
Attempt record data structures
One record per strategy execution, persisted as a single log line
"""
import re
from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict


LOG_LINE_PATTERN = re.compile(
    r'^\[(?P<timestamp>[^\]]+)\] (?P<outcome>success|failure)! (?P<strategy_name>.*?) @ (?P<working_directory>.*)$'
)


class AttemptOutcome(Enum):
    """Outcome of one strategy attempt"""
    SUCCESS = "success"
    FAILURE = "failure"

    @classmethod
    def from_success(cls, success: bool) -> 'AttemptOutcome':
        return cls.SUCCESS if success else cls.FAILURE


def format_rfc3339(timestamp: datetime) -> str:
    """RFC3339 with second precision, UTC rendered as Z"""
    rendered = timestamp.isoformat(timespec='seconds')
    if rendered.endswith('+00:00'):
        rendered = rendered[:-len('+00:00')] + 'Z'
    return rendered


def parse_rfc3339(value: str) -> datetime:
    if value.endswith('Z'):
        value = value[:-1] + '+00:00'
    return datetime.fromisoformat(value)


class AttemptRecord(BaseModel):
    """Write-once record of a strategy attempt"""
    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    strategy_name: str
    outcome: AttemptOutcome
    working_directory: str

    @property
    def success(self) -> bool:
        return self.outcome == AttemptOutcome.SUCCESS

    def to_log_line(self) -> str:
        """Render as `[<timestamp>] <outcome>! <strategy> @ <working directory>`"""
        return (
            f"[{format_rfc3339(self.timestamp)}] {self.outcome.value}! "
            f"{self.strategy_name} @ {self.working_directory}"
        )

    @classmethod
    def from_log_line(cls, line: str) -> Optional['AttemptRecord']:
        """Parse a log line back into a record, None if it is not one"""
        match = LOG_LINE_PATTERN.match(line.rstrip('\n'))
        if not match:
            return None
        try:
            timestamp = parse_rfc3339(match.group('timestamp'))
        except ValueError:
            return None
        return cls(
            timestamp=timestamp,
            strategy_name=match.group('strategy_name'),
            outcome=AttemptOutcome(match.group('outcome')),
            working_directory=match.group('working_directory')
        )
