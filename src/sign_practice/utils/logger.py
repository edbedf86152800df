"""
Logging utilities for the sign practice system.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Dict, Any
from datetime import datetime
import json


class Logger:
    """Logging front-end with console, file and JSON outputs."""

    def __init__(
        self,
        name: str = "sign_practice",
        log_dir: str = "logs",
        level: str = "INFO",
        console_output: bool = True,
        file_output: bool = False,
        json_output: bool = False
    ):
        """
        Initialize the logger.

        Library modules log to children of ``name`` (``sign_practice.*``), so
        configuring the package logger here routes their records as well.

        Args:
            name: Logger name
            log_dir: Directory for log files
            level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            console_output: Enable console output
            file_output: Enable file output
            json_output: Enable JSON formatted output
        """
        self.name = name
        self.log_dir = Path(log_dir)

        # Create logger
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper()))

        # Clear existing handlers
        self.logger.handlers.clear()

        # Create formatters
        self.console_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        self.file_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        # Console handler; stdout is reserved for command output
        if console_output:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(self.console_formatter)
            self.logger.addHandler(console_handler)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        if file_output or json_output:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        # File handler
        if file_output:
            log_file = self.log_dir / f"{name}_{timestamp}.log"
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(self.file_formatter)
            self.logger.addHandler(file_handler)

        # JSON handler for structured logging
        if json_output:
            json_file = self.log_dir / f"{name}_{timestamp}.json"
            self.json_handler = JsonFileHandler(json_file)
            self.logger.addHandler(self.json_handler)

    @classmethod
    def from_config(cls, config: Any, name: str = "sign_practice") -> "Logger":
        """Build a logger from the ``logging`` section of a configuration."""
        section = config.get('logging', {}) if config is not None else {}
        return cls(
            name=name,
            log_dir=section.get('log_dir', 'logs'),
            level=section.get('level', 'INFO'),
            console_output=section.get('console_output', True),
            file_output=section.get('file_output', False),
            json_output=section.get('json_output', False),
        )

    def debug(self, message: str, **kwargs) -> None:
        """Log debug message."""
        self.logger.debug(message, extra=kwargs)

    def info(self, message: str, **kwargs) -> None:
        """Log info message."""
        self.logger.info(message, extra=kwargs)

    def warning(self, message: str, **kwargs) -> None:
        """Log warning message."""
        self.logger.warning(message, extra=kwargs)

    def error(self, message: str, **kwargs) -> None:
        """Log error message."""
        self.logger.error(message, extra=kwargs)

    def log_config(self, config: Dict[str, Any]) -> None:
        """Log configuration parameters."""
        self.debug("Configuration loaded", config=config)

    def log_review(self, sign_id: str, success: bool, item: Dict[str, Any]) -> None:
        """Log a recorded review outcome."""
        self.info(
            f"Review {sign_id}: {'correct' if success else 'again'}, "
            f"next in {item['intervalDays']} day(s) on {item['due']} "
            f"(ease={item['ease']:.2f}, streak={item['streak']})"
        )

    def log_recognition(self, target: str, result: Optional[Dict[str, Any]], num_hands: int) -> None:
        """Log a recognition verdict."""
        if result:
            self.info(f"Recognized {result['label']} (confidence={result['confidence']:.2f}, hands={num_hands})")
        else:
            self.info(f"No match for {target} (hands={num_hands})")


class JsonFileHandler(logging.Handler):
    """Custom handler for JSON formatted logs."""

    def __init__(self, filename: Path):
        super().__init__()
        self.filename = filename

    def emit(self, record):
        """Emit a log record in JSON format."""
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno
        }

        # Add extra fields
        for key, value in record.__dict__.items():
            if key not in log_entry and key not in _RECORD_ATTRIBUTES:
                log_entry[key] = value

        # Write to file
        with open(self.filename, 'a') as f:
            f.write(json.dumps(log_entry, default=str) + '\n')


# Standard LogRecord attributes, excluded from the JSON extras
_RECORD_ATTRIBUTES = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}
