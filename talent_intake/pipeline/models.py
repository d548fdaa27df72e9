from dataclasses import dataclass
from typing import Generic, TypeVar

from talent_intake.normalization.models import StructuredRecord

T = TypeVar("T")


@dataclass(frozen=True)
class IngestedDocument:
    """Value of a successful document ingestion."""

    record_id: str
    record: StructuredRecord


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    ok = True


@dataclass(frozen=True)
class Failed:
    """A pipeline stage failed. ``message`` is safe to show to the caller."""

    kind: str
    message: str
    stage: str

    ok = False


PipelineResult = Success[T] | Failed
