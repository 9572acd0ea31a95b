"""
Report Writer - Renders and Writes the Analysis Output.

Walks a store sorted by ascending probability from the end, so the output
lists the highest probability first. Each line is rendered from the
template of the person's tier.

Design Notes:
    - All lines are rendered before the output file is opened
    - The file is written in one pass inside a context manager
    - Any OSError while opening, writing or closing is an OutputFileError
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from spreader_detector.config.models import OutputConfig
from spreader_detector.domain.entities import PersonReport, Tier
from spreader_detector.domain.errors import OutputFileError, StoreOrderError
from spreader_detector.ordering.comparators import SortOrder
from spreader_detector.reporting.classifier import TierClassifier
from spreader_detector.store.record_store import PersonStore

logger = logging.getLogger(__name__)


class ReportWriter:
    """Builds per-person reports and writes the output file."""

    def __init__(
        self,
        config: Optional[OutputConfig] = None,
        classifier: Optional[TierClassifier] = None,
    ) -> None:
        """
        Initialize report writer.

        Args:
            config: Output file name and message templates
            classifier: Tier classifier (defaults to standard thresholds)
        """
        self.config = config or OutputConfig()
        self.classifier = classifier or TierClassifier()
        self._templates: Dict[Tier, str] = {
            Tier.HOSPITALIZATION: self.config.hospitalization_message,
            Tier.QUARANTINE: self.config.quarantine_message,
            Tier.CLEAN: self.config.clean_message,
        }

    def build_reports(self, store: PersonStore) -> List[PersonReport]:
        """
        Classify every person, highest probability first.

        Raises:
            StoreOrderError: If the store is not sorted by probability
        """
        if store.order is not SortOrder.PROBABILITY:
            raise StoreOrderError(
                f"reporting requires probability order, store is in "
                f"{store.order.value} order"
            )
        return [
            PersonReport(
                name=person.name,
                id=person.id,
                probability=person.probability,
                tier=self.classifier.classify(person.probability),
            )
            for person in reversed(store)
        ]

    def render_line(self, report: PersonReport) -> str:
        """Render one report with its tier's template."""
        return self._templates[report.tier].format(name=report.name, id=report.id)

    def render(self, reports: List[PersonReport]) -> str:
        """Render all reports, one line each."""
        return "".join(f"{self.render_line(report)}\n" for report in reports)

    def write(
        self,
        reports: List[PersonReport],
        path: Optional[Union[str, Path]] = None,
    ) -> Path:
        """
        Write rendered reports to ``path`` (defaults to the configured file).

        Returns:
            Path of the written file

        Raises:
            OutputFileError: If the file cannot be opened, written or closed
        """
        output_path = Path(path) if path is not None else Path(self.config.output_file)
        content = self.render(reports)

        try:
            with open(output_path, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as exc:
            raise OutputFileError(str(output_path), f"cannot be written: {exc}") from exc

        logger.info(f"Wrote {len(reports)} report lines to {output_path}")
        return output_path
