from abc import ABC, abstractmethod
from dataclasses import dataclass

from talent_intake.acquisition.models import AcquiredContent
from talent_intake.database.models import UploadedFile
from talent_intake.extraction.models import ExtractedText, RawDocument
from talent_intake.normalization.models import JobAnalysis, StructuredRecord


@dataclass(slots=True)
class PipelineContext:
    """State handed from step to step within one ingestion request."""

    owner_id: str = ""
    file_id: str = ""
    job_url: str | None = None
    job_text: str | None = None
    uploaded_file: UploadedFile | None = None
    raw_document: RawDocument | None = None
    extracted: ExtractedText | None = None
    acquired: AcquiredContent | None = None
    record: StructuredRecord | None = None
    record_id: str | None = None
    job_analysis: JobAnalysis | None = None


class PipelineStep(ABC):
    @abstractmethod
    async def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
