"""JSON-ready payloads for the HTTP layer that invokes the pipeline."""

from typing import Any

from talent_intake.normalization.models import JobAnalysis
from talent_intake.pipeline.models import Failed, IngestedDocument, PipelineResult


def document_response(result: PipelineResult[IngestedDocument]) -> dict[str, Any]:
    if isinstance(result, Failed):
        return failure_response(result)
    return {
        "success": True,
        "structuredRecordId": result.value.record_id,
        "structured": result.value.record.structured,
        "record": result.value.record.to_dict(),
    }


def job_posting_response(result: PipelineResult[JobAnalysis]) -> dict[str, Any]:
    if isinstance(result, Failed):
        return failure_response(result)
    return {
        "success": True,
        "analysisText": result.value.analysis_text,
        "truncatedPreview": result.value.content_preview,
        "source": result.value.source_strategy,
        "analyzed": result.value.analyzed,
    }


def failure_response(result: Failed) -> dict[str, Any]:
    return {
        "success": False,
        "error": {
            "kind": result.kind,
            "stage": result.stage,
            "message": result.message,
        },
    }
