import asyncio

import psycopg

from talent_intake.acquisition.resolver import ContentResolver
from talent_intake.database.repositories.structured_records_repository import (
    StructuredRecordsRepository,
)
from talent_intake.database.repositories.uploaded_files_repository import UploadedFilesRepository
from talent_intake.exceptions import AcquisitionError, PersistenceError, ValidationError
from talent_intake.extraction.extractor import DocumentTextExtractor
from talent_intake.extraction.models import RawDocument
from talent_intake.logging.logger import Log
from talent_intake.normalization.base import BaseNormalizer
from talent_intake.normalization.job_analyzer import JobAnalyzer
from talent_intake.pipeline.pipeline import PipelineContext, PipelineStep
from talent_intake.storage.base import BaseStorage
from talent_intake.storage.exceptions import StorageError

MAX_DOCUMENT_BYTES = 10 * 1024 * 1024
ALLOWED_MIME_TYPES = frozenset({
    "application/pdf",
    "text/plain",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
})


class AuthorizeFileStep(PipelineStep):
    """Looks up the file and checks it belongs to the requesting owner."""

    def __init__(self, files_repo: UploadedFilesRepository) -> None:
        self._files_repo = files_repo

    async def run(self, context: PipelineContext) -> PipelineContext:
        try:
            uploaded = await asyncio.to_thread(self._files_repo.find_by_id, context.file_id)
        except psycopg.Error as exc:
            Log.error("File metadata lookup failed", file_id=context.file_id, error=exc)
            raise PersistenceError("File metadata could not be read") from exc
        if uploaded is None:
            raise ValidationError("File not found")
        if uploaded.owner_id != context.owner_id:
            Log.warning(
                "File access denied",
                file_id=context.file_id,
                owner_id=context.owner_id,
            )
            raise ValidationError("Access denied")
        context.uploaded_file = uploaded
        return context


class LoadFileStep(PipelineStep):
    """Reads the stored blob after checking its declared type and size.

    The size is checked against the metadata before reading and against the
    bytes actually read, since the metadata may be stale.
    """

    def __init__(
        self,
        storage: BaseStorage,
        max_document_bytes: int = MAX_DOCUMENT_BYTES,
    ) -> None:
        self._storage = storage
        self._max_document_bytes = max_document_bytes

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.uploaded_file is None:
            raise ValueError("PipelineContext.uploaded_file must be set before loading")
        uploaded = context.uploaded_file
        if uploaded.mime_type and uploaded.mime_type not in ALLOWED_MIME_TYPES:
            raise ValidationError(
                "Invalid file type. Only PDF, DOC, DOCX, and TXT files are allowed."
            )
        self._check_size(uploaded.size_bytes)

        try:
            data = await asyncio.to_thread(self._storage.get, uploaded.bucket, uploaded.path)
        except StorageError as exc:
            Log.error("Storage read failed", file_id=uploaded.id, error=exc)
            raise AcquisitionError("Stored document could not be read") from exc

        document = RawDocument(data=data, filename=uploaded.filename, mime_type=uploaded.mime_type)
        self._check_size(document.size_bytes)
        context.raw_document = document
        Log.info(
            "Loaded document",
            file_id=uploaded.id,
            bytes=document.size_bytes,
            mime_type=document.mime_type,
        )
        return context

    def _check_size(self, size_bytes: int) -> None:
        if size_bytes > self._max_document_bytes:
            raise ValidationError(
                f"File is too large ({size_bytes} bytes, "
                f"maximum {self._max_document_bytes})"
            )


class ExtractTextStep(PipelineStep):
    def __init__(self, extractor: DocumentTextExtractor) -> None:
        self._extractor = extractor

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.raw_document is None:
            raise ValueError("PipelineContext.raw_document must be set before extraction")
        document = context.raw_document
        context.extracted = await asyncio.to_thread(
            self._extractor.extract, document.data, document.filename
        )
        return context


class NormalizeStep(PipelineStep):
    def __init__(self, normalizer: BaseNormalizer) -> None:
        self._normalizer = normalizer

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.extracted is None:
            raise ValueError("PipelineContext.extracted must be set before normalization")
        context.record = await self._normalizer.normalize(context.extracted.text)
        return context


class PersistRecordStep(PipelineStep):
    def __init__(self, records_repo: StructuredRecordsRepository) -> None:
        self._records_repo = records_repo

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.record is None:
            raise ValueError("PipelineContext.record must be set before persist")
        try:
            context.record_id = await asyncio.to_thread(
                self._records_repo.save_structured_record,
                context.owner_id,
                context.file_id,
                context.record,
            )
        except psycopg.Error as exc:
            Log.error("Structured record save failed", file_id=context.file_id, error=exc)
            raise PersistenceError("Structured record could not be saved") from exc
        Log.info(
            "Structured record saved",
            record_id=context.record_id,
            file_id=context.file_id,
            structured=context.record.structured,
        )
        return context


class AcquireContentStep(PipelineStep):
    def __init__(self, resolver: ContentResolver) -> None:
        self._resolver = resolver

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.job_url is not None:
            context.acquired = await self._resolver.acquire(context.job_url)
        else:
            context.acquired = self._resolver.accept_text(context.job_text or "")
        return context


class AnalyzeJobStep(PipelineStep):
    def __init__(self, analyzer: JobAnalyzer) -> None:
        self._analyzer = analyzer

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.acquired is None:
            raise ValueError("PipelineContext.acquired must be set before analysis")
        context.job_analysis = await self._analyzer.analyze(context.acquired)
        return context
