"""
Propagation Engine - Sequential Probability Propagation.

Walks the meetings file in order. The first line names the origin person,
whose probability becomes 1.0; every following line is a meeting that
OVERWRITES the infected person's probability with
``infector.probability * transmission_factor``. The most recent meeting
for a given infected person wins; nothing is accumulated.

Design Notes:
    - Requires the store to be sorted by identifier (binary search lookup)
    - Unknown identifiers raise UnknownIdentifierError
    - Non-finite factors or probabilities raise InvalidMeetingError
    - Probabilities above 1.0 are kept and logged as warnings
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from spreader_detector.adapters.line_reader import NumberedLine
from spreader_detector.config.models import TransmissionModelConfig
from spreader_detector.domain.entities import Meeting, Person
from spreader_detector.domain.errors import InvalidMeetingError, UnknownIdentifierError
from spreader_detector.domain.fields import parse_identifier, parse_number, split_fields
from spreader_detector.propagation.transmission import transmission_factor
from spreader_detector.store.record_store import PersonStore

logger = logging.getLogger(__name__)

ORIGIN_PROBABILITY = 1.0
MEETING_FIELDS = 4


@dataclass
class PropagationSummary:
    """Outcome of a propagation pass."""

    origin_id: Optional[int] = None
    meetings_processed: int = 0
    above_one_count: int = 0


def parse_origin_line(line: str, line_number: int = 1) -> int:
    """Parse the single-identifier origin line."""
    (raw_id,) = split_fields(line, 1, "sick person id", line_number)
    return parse_identifier(raw_id, "origin id", line_number, line)


def parse_meeting_line(line: str, line_number: int = 0) -> Meeting:
    """
    Parse one ``<infectorId> <infectedId> <distance> <duration>`` line.

    Raises:
        MalformedRecordError: On a missing, extra or non-numeric field
    """
    raw_infector, raw_infected, raw_distance, raw_duration = split_fields(
        line, MEETING_FIELDS, "infector infected distance duration", line_number
    )
    return Meeting(
        infector_id=parse_identifier(raw_infector, "infector id", line_number, line),
        infected_id=parse_identifier(raw_infected, "infected id", line_number, line),
        distance=parse_number(raw_distance, "distance", line_number, line),
        duration=parse_number(raw_duration, "duration", line_number, line),
        line_number=line_number,
    )


class PropagationEngine:
    """Applies meetings to a PersonStore sorted by identifier."""

    def __init__(
        self,
        store: PersonStore,
        config: Optional[TransmissionModelConfig] = None,
    ) -> None:
        """
        Initialize propagation engine.

        Args:
            store: Record store, must be in identifier order before run()
            config: Transmission model constants
        """
        self.store = store
        self.config = config or TransmissionModelConfig()

    def run(self, lines: Iterable[NumberedLine]) -> PropagationSummary:
        """
        Propagate infection probabilities through the meetings stream.

        Args:
            lines: Numbered, non-blank lines of the meetings file

        Returns:
            PropagationSummary with origin and meeting count

        Raises:
            MalformedRecordError: If a line does not parse
            UnknownIdentifierError: If a line names an unknown person
            InvalidMeetingError: If a meeting has non-positive distance or
                duration, or yields a non-finite probability
            StoreOrderError: If the store is not sorted by identifier
        """
        summary = PropagationSummary()
        stream: Iterator[NumberedLine] = iter(lines)

        first = next(stream, None)
        if first is None:
            logger.info("Meetings file is empty, no propagation performed")
            return summary

        line_number, line = first
        origin_id = parse_origin_line(line, line_number)
        self._resolve(origin_id, line_number).probability = ORIGIN_PROBABILITY
        summary.origin_id = origin_id
        logger.debug(f"Origin person {origin_id} set to probability 1.0")

        for line_number, line in stream:
            meeting = parse_meeting_line(line, line_number)
            infected = self.apply(meeting)
            summary.meetings_processed += 1
            if infected.probability > 1.0:
                summary.above_one_count += 1
                logger.warning(
                    f"line {line_number}: probability of person {infected.id} "
                    f"is {infected.probability:.6f}, above 1.0"
                )

        logger.info(
            f"Propagated {summary.meetings_processed} meetings from origin {origin_id}"
        )
        return summary

    def apply(self, meeting: Meeting) -> Person:
        """
        Apply one meeting and return the updated infected person.

        The infected person's previous probability is overwritten.

        Raises:
            InvalidMeetingError: If the new probability is not finite
        """
        infector = self._resolve(meeting.infector_id, meeting.line_number)
        infected = self._resolve(meeting.infected_id, meeting.line_number)
        factor = transmission_factor(
            meeting.distance,
            meeting.duration,
            min_distance=self.config.min_distance,
            max_time=self.config.max_time,
            line_number=meeting.line_number,
        )
        probability = infector.probability * factor
        if not math.isfinite(probability):
            raise InvalidMeetingError(
                f"probability of person {infected.id} overflows "
                f"({infector.probability} * {factor})",
                meeting.line_number,
            )
        infected.probability = probability
        return infected

    def _resolve(self, identifier: int, line_number: int) -> Person:
        """Look up a person by identifier."""
        index = self.store.index_of(identifier)
        if index is None:
            raise UnknownIdentifierError(identifier, line_number)
        return self.store[index]
