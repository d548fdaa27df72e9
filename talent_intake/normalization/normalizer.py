"""AI-powered resume normalizer."""

import json
from pathlib import Path

from talent_intake.logging.logger import Log
from talent_intake.normalization.base import BaseNormalizer
from talent_intake.normalization.client_base import BaseNormalizationClient
from talent_intake.normalization.exceptions import NormalizationError
from talent_intake.normalization.models import StructuredRecord
from talent_intake.normalization.prompt_loader import load_json_schema, load_prompt
from talent_intake.normalization.validator import validate_and_build


def parse_json_object(raw: str) -> dict[str, object]:
    """Parse a model response as a JSON object, tolerating a markdown code fence.

    Raises:
        NormalizationError: invalid JSON or not an object.
    """
    cleaned = raw.strip()
    if cleaned.startswith("```"):
        lines = cleaned.splitlines()
        if lines and lines[0].startswith("```"):
            lines = lines[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        cleaned = "\n".join(lines)

    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise NormalizationError(f"Invalid JSON response: {exc}") from exc

    if not isinstance(parsed, dict):
        raise NormalizationError("JSON response must be an object")
    return parsed


class Normalizer(BaseNormalizer):
    """Turns resume text into a StructuredRecord using an AI provider.

    Provider, parse and validation failures are absorbed: the caller receives
    a degraded record carrying the original text.
    """

    def __init__(
        self,
        *,
        client: BaseNormalizationClient,
        model: str,
        temperature: float = 0.1,
        max_output_tokens: int = 4000,
        prompt_template_path: Path | None = None,
        system_prompt_path: Path | None = None,
        json_schema_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._max_output_tokens = max_output_tokens
        self._prompt_template = load_prompt("normalization_prompt.txt", prompt_template_path)
        schema_str = load_json_schema(json_schema_path)
        self._json_schema_dict = json.loads(schema_str)
        self._system_prompt = load_prompt(
            "normalization_system_prompt.txt", system_prompt_path
        ).format(json_schema=schema_str)

    async def normalize(self, text: str) -> StructuredRecord:
        try:
            record = await self._structure(text)
        except NormalizationError as exc:
            Log.warning("Normalization degraded to raw text", reason=exc)
            return StructuredRecord.degraded(text)

        Log.info(
            "Normalization complete",
            experience=len(record.experience),
            education=len(record.education),
            skills=len(record.skills),
        )
        return record

    async def _structure(self, text: str) -> StructuredRecord:
        prompt = self._prompt_template.format(document_text=text)
        Log.debug(f"Normalization prompt:\n{prompt}")

        raw_response = await self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
            max_output_tokens=self._max_output_tokens,
            json_schema=self._json_schema_dict,
        )
        Log.debug(f"AI raw response:\n{raw_response}")

        return validate_and_build(parse_json_object(raw_response), extracted_text=text)
