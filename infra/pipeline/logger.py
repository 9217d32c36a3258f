"""
Stage logging for makhtut.

Each stage appends JSON lines to {log_dir}/{stage}.jsonl. The file is only
opened on the first record, so a run that has nothing to report leaves no
empty log behind. With console output enabled, the same records are echoed
to stderr in a short human form.
"""

import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional


# Context fields copied from the log record into the JSON payload, in order.
RECORD_FIELDS = (
    'book_id',
    'stage',
    'page',
    'segments',
    'batches',
    'tokens',
    'corrections',
    'duration_seconds',
    'error',
)

# Counters shown after the message on the console.
CONSOLE_COUNTERS = ('segments', 'batches', 'corrections')


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.now().astimezone().isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
        }
        entry.update(
            (field, getattr(record, field))
            for field in RECORD_FIELDS
            if hasattr(record, field)
        )
        return json.dumps(entry, ensure_ascii=False)


class ConsoleFormatter(logging.Formatter):
    """`12:04:31 ⚠️ [footnote-references] [page 7] message (corrections=2)`"""

    MARKS = {
        'WARNING': '⚠️',
        'ERROR': '❌',
        'CRITICAL': '❌',
    }

    def format(self, record: logging.LogRecord) -> str:
        parts = [datetime.now().strftime('%H:%M:%S')]

        mark = self.MARKS.get(record.levelname)
        if mark:
            parts.append(mark)
        if hasattr(record, 'stage'):
            parts.append(f"[{record.stage}]")
        if hasattr(record, 'page'):
            parts.append(f"[page {record.page}]")

        parts.append(record.getMessage())

        counters = [
            f"{name}={getattr(record, name)}"
            for name in CONSOLE_COUNTERS
            if hasattr(record, name)
        ]
        if hasattr(record, 'duration_seconds'):
            counters.append(f"{record.duration_seconds:.2f}s")
        if counters:
            parts.append(f"({', '.join(counters)})")

        return ' '.join(parts)


class PipelineLogger:
    """Structured logger for one stage run over one input file."""

    def __init__(
        self,
        book_id: str,
        stage: str,
        log_dir: Path,
        console_output: bool = False,
        json_output: bool = True,
        level: str = "INFO",
        filename: Optional[str] = None,
    ):
        self.book_id = book_id
        self.stage = stage
        self.log_dir = Path(log_dir)
        self.console_output = console_output
        self.json_output = json_output
        self.level = logging.getLevelName(level.upper())
        self.filename = filename or f"{stage}.jsonl"

        self.log_file: Optional[Path] = None
        self._logger: Optional[logging.Logger] = None

    def _open(self) -> logging.Logger:
        if self._logger is not None:
            return self._logger

        logger = logging.getLogger(f"makhtut.{self.book_id}.{self.stage}.{id(self)}")
        logger.setLevel(self.level)
        logger.propagate = False

        if self.console_output:
            console = logging.StreamHandler(sys.stderr)
            console.setFormatter(ConsoleFormatter())
            logger.addHandler(console)

        if self.json_output:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            self.log_file = self.log_dir / self.filename
            # FileHandler flushes after every record
            jsonl = logging.FileHandler(self.log_file, mode='a', encoding='utf-8')
            jsonl.setFormatter(JSONFormatter())
            logger.addHandler(jsonl)

        self._logger = logger
        return logger

    def _log(self, level: int, message: str, **fields):
        if level < self.level:
            return
        self._open().log(
            level,
            message,
            extra={'book_id': self.book_id, 'stage': self.stage, **fields},
        )

    def debug(self, message: str, **fields):
        self._log(logging.DEBUG, message, **fields)

    def info(self, message: str, **fields):
        self._log(logging.INFO, message, **fields)

    def warning(self, message: str, **fields):
        self._log(logging.WARNING, message, **fields)

    def start_stage(self, **fields):
        self.info(f"Starting {self.stage}", **fields)

    def complete_stage(self, duration_seconds: float, **fields):
        self.info(f"Completed {self.stage}", duration_seconds=duration_seconds, **fields)

    def close(self):
        if self._logger is None:
            return
        for handler in list(self._logger.handlers):
            handler.close()
            self._logger.removeHandler(handler)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
