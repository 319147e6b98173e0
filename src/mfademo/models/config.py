"""Configuration models for the aligner and the output writer."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

PHONE_INVENTORY = [
    "AH", "EH", "IH", "OW", "UW",
    "B", "D", "K", "L", "M", "N", "R", "S", "T", "TH", "W",
]


class AlignerConfig(BaseModel):
    """Configuration for the mock aligner."""

    word_duration_min: float = Field(default=0.3, gt=0.0)
    word_duration_max: float = Field(default=0.7, gt=0.0)
    phones_per_char: float = Field(default=0.6, gt=0.0)
    min_phones: int = Field(default=2, ge=1)
    phone_inventory: list[str] = Field(
        default_factory=lambda: list(PHONE_INVENTORY), min_length=1
    )
    seed: int | None = None

    @model_validator(mode="after")
    def _check_duration_range(self) -> AlignerConfig:
        if self.word_duration_min >= self.word_duration_max:
            raise ValueError(
                f"word_duration_min ({self.word_duration_min}) must be less than "
                f"word_duration_max ({self.word_duration_max})"
            )
        return self


class OutputConfig(BaseModel):
    """Which files to write, and where."""

    textgrid: bool = True
    report: bool = True
    output_dir: str | None = None  # relative to the batch file


class Config(BaseModel):
    """All session configuration."""

    aligner: AlignerConfig = Field(default_factory=AlignerConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    processing_delay_seconds: float = Field(default=0.0, ge=0.0, le=10.0)
