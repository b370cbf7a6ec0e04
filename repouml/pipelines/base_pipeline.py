"""
Shared pipeline bookkeeping.

A pipeline run collects human-readable messages and named metrics and
reports them, with its outputs and timing, as a PipelineResult.
"""

import time
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

logger = logging.getLogger(__name__)

WARNING_PREFIX = "WARNING: "
ERROR_PREFIX = "ERROR: "


@dataclass
class PipelineResult:
    """
    Outcome of one pipeline run.

    Messages are in the order they were recorded; warnings and errors
    carry the WARNING_PREFIX and ERROR_PREFIX markers.
    """

    success: bool = False

    # Seconds between the start of the run and the creation of the result
    execution_time: float = 0.0

    # e.g. plantuml_code, diagram_url, plantuml_file
    outputs: dict[str, Any] = field(default_factory=dict)

    # e.g. class_count, relationship_count
    metrics: dict[str, Any] = field(default_factory=dict)

    messages: list[str] = field(default_factory=list)

    @property
    def errors(self) -> list[str]:
        return [m for m in self.messages if m.startswith(ERROR_PREFIX)]


class Pipeline(ABC):
    """
    Base class for pipelines.

    Subclasses implement setup() and execute(); execute() is expected to
    call _start_execution() first and to finish with create_result().
    """

    def __init__(self, name: str):
        """
        Args:
            name: Display name used in log lines
        """
        self.name = name
        self.messages: list[str] = []
        self.metrics: dict[str, Any] = {}
        self.start_time: Optional[float] = None
        self.end_time: Optional[float] = None

    @abstractmethod
    def setup(self, **kwargs) -> bool:
        """Prepare the inputs of a run; False stops the run."""

    @abstractmethod
    def execute(self, **kwargs) -> PipelineResult:
        """Run the pipeline and report the outcome."""

    def _start_execution(self) -> None:
        """Clear the records of any earlier run and start the clock."""
        self.messages = []
        self.metrics = {}
        self.end_time = None
        self.start_time = time.time()
        logger.info("%s pipeline started", self.name)

    def _end_execution(self) -> float:
        """Stop the clock and return the elapsed seconds."""
        self.end_time = time.time()
        elapsed = self.end_time - self.start_time
        logger.info("%s pipeline finished in %.2f seconds", self.name, elapsed)
        return elapsed

    def has_errors(self) -> bool:
        return any(m.startswith(ERROR_PREFIX) for m in self.messages)

    def add_message(self, message: str) -> None:
        self.messages.append(message)
        logger.info(message)

    def add_warning(self, message: str) -> None:
        self.messages.append(WARNING_PREFIX + message)
        logger.warning(message)

    def add_error(self, message: str) -> None:
        self.messages.append(ERROR_PREFIX + message)
        logger.error(message)

    def add_metric(self, name: str, value: Any) -> None:
        self.metrics[name] = value
        logger.debug("%s = %s", name, value)

    def create_result(
        self, success: bool, outputs: Optional[dict[str, Any]] = None
    ) -> PipelineResult:
        """
        Snapshot the current run into a PipelineResult.

        Stops the clock if it is still running. A result created
        without a started run reports an execution time of zero.
        """
        elapsed = 0.0
        if self.start_time is not None:
            if self.end_time is None:
                self._end_execution()
            elapsed = self.end_time - self.start_time

        return PipelineResult(
            success=success,
            execution_time=elapsed,
            outputs=dict(outputs or {}),
            metrics=dict(self.metrics),
            messages=list(self.messages),
        )
