"""
Detection Pipeline - Main Orchestrator.

The DetectionPipeline coordinates a full detection run:

    1. ingest               people file -> PersonStore
    2. sort_by_identifier   store ordered for binary search
    3. propagate            meetings file applied in order
    4. sort_by_probability  store ordered for reporting
    5. report               tiers classified, output file written

The two sorts are not interchangeable: propagation resolves people by
identifier, reporting walks probabilities from the top.
"""

from __future__ import annotations

import logging
import time
import uuid
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Protocol, TypeVar, Union

from spreader_detector import __version__
from spreader_detector.adapters.line_reader import open_lines
from spreader_detector.adapters.metrics_collector import InMemoryMetricsCollector
from spreader_detector.config.models import DetectorConfig
from spreader_detector.domain.entities import DetectionResult
from spreader_detector.domain.errors import ResourceExhaustedError
from spreader_detector.ordering.comparators import SortOrder
from spreader_detector.propagation.engine import PropagationEngine, PropagationSummary
from spreader_detector.reporting.classifier import TierClassifier
from spreader_detector.reporting.report_writer import ReportWriter
from spreader_detector.store.record_store import PersonStore, load_people

logger = logging.getLogger(__name__)

T = TypeVar("T")

PathLike = Union[str, Path]


class MetricsCollectorProtocol(Protocol):
    """Protocol for metrics collectors."""

    def record_timing(
        self, name: str, duration_seconds: float, tags: Optional[Dict] = None
    ) -> None:
        ...

    def record_count(
        self, name: str, value: int, tags: Optional[Dict] = None
    ) -> None:
        ...

    def get_metrics(self) -> Dict[str, Any]:
        ...


class DetectionPipeline:
    """Main orchestrator for the detection workflow."""

    def __init__(
        self,
        config: Optional[DetectorConfig] = None,
        metrics_collector: Optional[MetricsCollectorProtocol] = None,
    ) -> None:
        """
        Initialize pipeline with all dependencies.

        Args:
            config: Detector configuration (defaults to built-in values)
            metrics_collector: For stage timings and counts
        """
        self.config = config or DetectorConfig()
        self.metrics_collector = metrics_collector or InMemoryMetricsCollector()
        self.report_writer = ReportWriter(
            self.config.output,
            TierClassifier(self.config.classification),
        )

    def run(
        self,
        people_path: PathLike,
        meetings_path: PathLike,
        output_path: Optional[PathLike] = None,
    ) -> DetectionResult:
        """
        Execute the detection workflow.

        Args:
            people_path: People file, one ``<name> <id> <age>`` per line
            meetings_path: Meetings file, origin id then one meeting per line
            output_path: Output file (defaults to the configured name)

        Returns:
            DetectionResult with per-person reports, metrics and metadata

        Raises:
            InputFileError: If an input file cannot be opened or read
            MalformedRecordError: If a line does not parse
            UnknownIdentifierError: If a meeting names an unknown person
            InvalidMeetingError: If a meeting has non-positive distance or
                duration, or yields a non-finite probability
            ResourceExhaustedError: If memory runs out at any stage
            OutputFileError: If the output file cannot be written
        """
        try:
            return self._execute(people_path, meetings_path, output_path)
        except MemoryError as exc:
            raise ResourceExhaustedError(
                "out of memory during detection run"
            ) from exc

    def _execute(
        self,
        people_path: PathLike,
        meetings_path: PathLike,
        output_path: Optional[PathLike],
    ) -> DetectionResult:
        """Run every stage and assemble the result."""
        start_time = time.perf_counter()
        run_id = str(uuid.uuid4())
        logger.debug(f"Detection run {run_id} started")

        store = self._timed("ingest", lambda: self._ingest(people_path))
        try:
            self._timed(
                "sort_by_identifier", lambda: store.sort_by(SortOrder.IDENTIFIER)
            )
            summary = self._timed(
                "propagate", lambda: self._propagate(store, meetings_path)
            )
            self._timed(
                "sort_by_probability", lambda: store.sort_by(SortOrder.PROBABILITY)
            )
            reports = self.report_writer.build_reports(store)
            written = self._timed(
                "report", lambda: self.report_writer.write(reports, output_path)
            )
        finally:
            store.clear()

        result = DetectionResult(
            origin_id=summary.origin_id,
            meetings_processed=summary.meetings_processed,
            reports=reports,
            output_path=str(written),
        )
        for tier, count in result.count_by_tier().items():
            self.metrics_collector.record_count(
                "people_by_tier", count, {"tier": tier.value}
            )

        total_duration = time.perf_counter() - start_time
        self.metrics_collector.record_timing("detection_total_seconds", total_duration)

        result.metrics = self.metrics_collector.get_metrics()
        result.metadata = self._build_metadata(run_id, total_duration)
        logger.info(
            f"Detection run {run_id[:8]} classified {len(reports)} people "
            f"in {total_duration:.3f}s"
        )
        return result

    def _ingest(self, people_path: PathLike) -> PersonStore:
        """Load the people file into a new store."""
        with open_lines(people_path) as lines:
            store = load_people(lines)

        self.metrics_collector.record_count("people_total", len(store))
        at_risk = sum(1 for p in store if p.age >= self.config.model.risk_age)
        logger.info(
            f"{at_risk} of {len(store)} people are at or above risk age "
            f"{self.config.model.risk_age:g}"
        )
        return store

    def _propagate(
        self, store: PersonStore, meetings_path: PathLike
    ) -> PropagationSummary:
        """Apply the meetings file to the identifier-sorted store."""
        engine = PropagationEngine(store, self.config.model)
        with open_lines(meetings_path) as lines:
            summary = engine.run(lines)

        self.metrics_collector.record_count(
            "meetings_total", summary.meetings_processed
        )
        if summary.above_one_count:
            self.metrics_collector.record_count(
                "probabilities_above_one", summary.above_one_count
            )
        return summary

    def _timed(self, stage: str, func: Callable[[], T]) -> T:
        """Run one stage and record its duration."""
        stage_start = time.perf_counter()
        logger.debug(f"Starting stage {stage}")
        result = func()
        duration = time.perf_counter() - stage_start
        self.metrics_collector.record_timing(
            "stage_duration_seconds", duration, {"stage": stage}
        )
        logger.debug(f"Completed stage {stage} ({duration:.3f}s)")
        return result

    def _build_metadata(self, run_id: str, duration: float) -> dict:
        """Build result metadata."""
        return {
            "run_id": run_id,
            "timestamp": datetime.now().isoformat(),
            "duration_seconds": duration,
            "version": __version__,
        }
