"""Offline client adapter.

Returns a fixed, schema-valid record for structured requests and a short
canned analysis for free-text requests. No network calls; used for local
development and tests.
"""

import json
from typing import ClassVar

from talent_intake.normalization.client_base import BaseNormalizationClient


class ExampleClientAdapter(BaseNormalizationClient):
    DEFAULT_RECORD: ClassVar[dict[str, object]] = {
        "contact": {"name": "Example Candidate"},
        "experience": [],
        "education": [],
        "skills": [],
    }
    DEFAULT_ANALYSIS: ClassVar[str] = "Example analysis: no provider configured."

    async def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        max_output_tokens: int,
        json_schema: dict[str, object] | None = None,
    ) -> str:
        _ = model, temperature, system_prompt, user_prompt, max_output_tokens
        if json_schema is None:
            return self.DEFAULT_ANALYSIS
        return json.dumps(self.DEFAULT_RECORD)
