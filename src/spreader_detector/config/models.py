"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator


class TransmissionModelConfig(BaseModel):
    """Constants of the transmission factor formula."""

    min_distance: float = Field(default=1.0, gt=0)
    max_time: float = Field(default=30.0, gt=0)
    risk_age: float = Field(default=65.0, ge=0)


class ClassificationConfig(BaseModel):
    """Tier thresholds. Both thresholds are inclusive within epsilon."""

    hospitalization_threshold: float = Field(default=0.3)
    quarantine_threshold: float = Field(default=0.1)
    epsilon: float = Field(default=1e-9, gt=0)

    @model_validator(mode="after")
    def _check_threshold_order(self) -> "ClassificationConfig":
        if self.quarantine_threshold > self.hospitalization_threshold:
            raise ValueError(
                "quarantine_threshold must not exceed hospitalization_threshold"
            )
        return self


class OutputConfig(BaseModel):
    """Output file name and per-tier message templates."""

    output_file: str = Field(default="SpreaderDetectorAnalysis.out", min_length=1)
    hospitalization_message: str = "Hospitalization Required: {name} {id}."
    quarantine_message: str = "14-days-Quarantine Required: {name} {id}."
    clean_message: str = "No serious chance for infection: {name} {id}."

    @field_validator("hospitalization_message", "quarantine_message", "clean_message")
    @classmethod
    def _check_placeholders(cls, value: str) -> str:
        for placeholder in ("{name}", "{id}"):
            if placeholder not in value:
                raise ValueError(f"message template must contain {placeholder}")
        # Only name and id are supplied when rendering
        try:
            value.format(name="Name", id=0)
        except (KeyError, IndexError, ValueError, TypeError, AttributeError) as exc:
            raise ValueError(
                f"message template cannot be rendered: {exc!r}"
            ) from exc
        return value


class ErrorMessagesConfig(BaseModel):
    """User-facing messages printed to stderr for each error category."""

    usage: str = "USAGE: spreader-detector <Path to People.in> <Path to Meetings.in>"
    input_file: str = "Error in input files."
    output_file: str = "Error in output file."
    standard_library: str = "Standard library error."

    def for_category(self, category: str) -> str:
        """Message for an error category; unmapped categories are input errors."""
        if category == "usage":
            return self.usage
        if category == "output_file":
            return self.output_file
        if category in ("resource", "store_order"):
            return self.standard_library
        return self.input_file


class DetectorConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    model: TransmissionModelConfig = Field(default_factory=TransmissionModelConfig)
    classification: ClassificationConfig = Field(
        default_factory=ClassificationConfig,
    )
    output: OutputConfig = Field(default_factory=OutputConfig)
    messages: ErrorMessagesConfig = Field(default_factory=ErrorMessagesConfig)
