"""
Attempt logging service
Appends one line per strategy attempt to a durable, append-only log file
"""
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional
from models.attempt import AttemptOutcome, AttemptRecord
from services.errors import LoggingError


def local_now() -> datetime:
    return datetime.now().astimezone()


class AttemptLogger:
    """Persists attempt records; all locations are given at construction"""

    def __init__(self, log_file: Path, working_directory: Path,
                 clock: Callable[[], datetime] = local_now):
        self.log_file = Path(log_file)
        self.working_directory = Path(working_directory)
        self.clock = clock

    def log_attempt(self, strategy_name: str, success: bool) -> AttemptRecord:
        """Append an attempt record, raising LoggingError if it cannot be written"""
        record = AttemptRecord(
            timestamp=self.clock(),
            strategy_name=strategy_name,
            outcome=AttemptOutcome.from_success(success),
            working_directory=str(self.working_directory)
        )

        try:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise LoggingError(f'Failed to create log directory "{self.log_file.parent}": {e}') from e

        try:
            with self.log_file.open('a') as f:
                f.write(record.to_log_line() + '\n')
        except OSError as e:
            raise LoggingError(f'Failed to append to logfile "{self.log_file}": {e}') from e

        return record

    def read_attempts(self, limit: Optional[int] = None) -> List[AttemptRecord]:
        """Most recent attempt records, oldest first; unparseable lines are skipped"""
        if not self.log_file.exists():
            return []

        try:
            lines = self.log_file.read_text().splitlines()
        except OSError as e:
            raise LoggingError(f'Failed to read logfile "{self.log_file}": {e}') from e

        records = [record for record in map(AttemptRecord.from_log_line, lines) if record]
        if limit is not None:
            records = records[-limit:] if limit > 0 else []
        return records
