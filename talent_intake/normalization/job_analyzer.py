from pathlib import Path

from talent_intake.acquisition.models import AcquiredContent
from talent_intake.logging.logger import Log
from talent_intake.normalization.client_base import BaseNormalizationClient
from talent_intake.normalization.exceptions import NormalizationError
from talent_intake.normalization.models import JobAnalysis
from talent_intake.normalization.prompt_loader import load_prompt
from talent_intake.utils.text import preview


class JobAnalyzer:
    """Asks the model for a free-text analysis of a job posting.

    A failed model call yields ``analyzed=False`` with empty analysis text;
    the acquired content is still returned to the caller through the preview.
    """

    def __init__(
        self,
        *,
        client: BaseNormalizationClient,
        model: str,
        temperature: float = 0.1,
        max_output_tokens: int = 1500,
        prompt_template_path: Path | None = None,
        system_prompt_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._max_output_tokens = max_output_tokens
        self._prompt_template = load_prompt("job_analysis_prompt.txt", prompt_template_path)
        self._system_prompt = load_prompt("job_analysis_system_prompt.txt", system_prompt_path)

    async def analyze(self, content: AcquiredContent) -> JobAnalysis:
        content_preview = preview(content.text)
        try:
            analysis = await self._client.create_chat_completion(
                model=self._model,
                temperature=self._temperature,
                system_prompt=self._system_prompt,
                user_prompt=self._prompt_template.format(job_text=content.text),
                max_output_tokens=self._max_output_tokens,
            )
        except NormalizationError as exc:
            Log.warning("Job analysis unavailable", reason=exc)
            return JobAnalysis(
                analysis_text="",
                content_preview=content_preview,
                source_strategy=content.strategy,
                analyzed=False,
            )

        Log.info("Job analysis complete", chars=len(analysis), strategy=content.strategy)
        return JobAnalysis(
            analysis_text=analysis.strip(),
            content_preview=content_preview,
            source_strategy=content.strategy,
        )
