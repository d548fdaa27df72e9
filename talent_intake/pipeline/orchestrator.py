from pathlib import Path
from typing import Any

from talent_intake.acquisition.factory import ContentResolverFactory
from talent_intake.config.settings import Settings
from talent_intake.database.repositories.structured_records_repository import (
    StructuredRecordsRepository,
)
from talent_intake.database.repositories.uploaded_files_repository import UploadedFilesRepository
from talent_intake.exceptions import IngestionError, ValidationError
from talent_intake.extraction.extractor import build_extractor
from talent_intake.logging.logger import Log
from talent_intake.normalization.client_base import BaseNormalizationClient
from talent_intake.normalization.factory import NormalizerFactory
from talent_intake.normalization.models import JobAnalysis
from talent_intake.pipeline.models import Failed, IngestedDocument, PipelineResult, Success
from talent_intake.pipeline.pipeline import PipelineContext, PipelineStep
from talent_intake.pipeline.steps import (
    AcquireContentStep,
    AnalyzeJobStep,
    AuthorizeFileStep,
    ExtractTextStep,
    LoadFileStep,
    NormalizeStep,
    PersistRecordStep,
)
from talent_intake.storage.base import BaseStorage
from talent_intake.storage.local_storage import LocalStorage


class IngestionOrchestrator:
    """Runs the document and job-posting pipelines.

    Document: authorize -> load -> extract -> normalize -> persist.
    Job posting: acquire (or accept pasted text) -> analyze.

    Steps run strictly in sequence. The first ``IngestionError`` stops the
    pipeline and becomes a ``Failed`` result; nothing after the failing step
    runs, so no record is persisted. Cancellation and unexpected exceptions
    propagate to the caller.
    """

    def __init__(
        self,
        document_steps: list[PipelineStep],
        job_steps: list[PipelineStep],
        client: BaseNormalizationClient | None = None,
    ) -> None:
        self._document_steps = document_steps
        self._job_steps = job_steps
        self._client = client

    async def aclose(self) -> None:
        """Close the shared model client, if this orchestrator owns one."""
        if self._client is not None:
            await self._client.close()

    async def ingest_document(
        self, owner_id: str, file_id: str
    ) -> PipelineResult[IngestedDocument]:
        Log.info("Ingesting document", owner_id=owner_id, file_id=file_id)
        if not owner_id:
            return self._failed(ValidationError("User not authenticated"))
        if not file_id:
            return self._failed(ValidationError("File ID is required"))

        context = PipelineContext(owner_id=str(owner_id), file_id=str(file_id))
        try:
            context = await self._run(self._document_steps, context)
        except IngestionError as exc:
            return self._failed(exc, file_id=file_id)

        if context.record is None or context.record_id is None:
            raise RuntimeError("Document pipeline finished without a persisted record")
        return Success(IngestedDocument(record_id=context.record_id, record=context.record))

    async def ingest_job_posting(
        self, url: str | None = None, text: str | None = None
    ) -> PipelineResult[JobAnalysis]:
        has_url = bool(url and url.strip())
        has_text = bool(text and text.strip())
        Log.info("Ingesting job posting", has_url=has_url, has_text=has_text)
        if not has_url and not has_text:
            return self._failed(ValidationError("Either job URL or job text is required"))
        if has_url and has_text:
            return self._failed(ValidationError("Provide either job URL or job text, not both"))

        context = PipelineContext(
            job_url=url if has_url else None,
            job_text=text if has_text else None,
        )
        try:
            context = await self._run(self._job_steps, context)
        except IngestionError as exc:
            return self._failed(exc, url=url)

        if context.job_analysis is None:
            raise RuntimeError("Job pipeline finished without an analysis")
        return Success(context.job_analysis)

    @staticmethod
    async def _run(steps: list[PipelineStep], context: PipelineContext) -> PipelineContext:
        for step in steps:
            context = await step.run(context)
        return context

    @staticmethod
    def _failed(exc: IngestionError, **fields: Any) -> Failed:
        Log.error(
            "Ingestion failed",
            kind=exc.kind,
            stage=exc.stage,
            error=exc.message,
            **fields,
        )
        return Failed(kind=exc.kind, message=exc.message, stage=exc.stage)


def build_orchestrator(
    settings: Settings,
    storage: BaseStorage | None = None,
    files_repo: UploadedFilesRepository | None = None,
    records_repo: StructuredRecordsRepository | None = None,
) -> IngestionOrchestrator:
    """Build an orchestrator with every stage configured from settings."""
    storage = storage or LocalStorage(Path(settings.storage_root))
    files_repo = files_repo or UploadedFilesRepository()
    records_repo = records_repo or StructuredRecordsRepository()
    client = NormalizerFactory.create_client(settings)
    document_steps: list[PipelineStep] = [
        AuthorizeFileStep(files_repo),
        LoadFileStep(storage, max_document_bytes=settings.max_document_bytes),
        ExtractTextStep(build_extractor(settings)),
        NormalizeStep(NormalizerFactory.create(settings, client=client)),
        PersistRecordStep(records_repo),
    ]
    job_steps: list[PipelineStep] = [
        AcquireContentStep(ContentResolverFactory.create(settings)),
        AnalyzeJobStep(NormalizerFactory.create_job_analyzer(settings, client=client)),
    ]
    return IngestionOrchestrator(
        document_steps=document_steps,
        job_steps=job_steps,
        client=client,
    )
