import json
from pathlib import Path

import pytest

from talent_intake.normalization.exceptions import NormalizationError
from talent_intake.normalization.prompt_loader import load_json_schema, load_prompt


class TestLoadPrompt:
    @pytest.mark.parametrize(
        ("name", "placeholder"),
        [
            ("normalization_prompt.txt", "{document_text}"),
            ("normalization_system_prompt.txt", "{json_schema}"),
            ("job_analysis_prompt.txt", "{job_text}"),
        ],
    )
    def test_bundled_prompts_have_placeholders(self, name: str, placeholder: str) -> None:
        assert placeholder in load_prompt(name)

    def test_custom_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "prompt.txt"
        custom.write_text("Custom {document_text}", encoding="utf-8")
        assert load_prompt("ignored.txt", custom) == "Custom {document_text}"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(NormalizationError, match="missing.txt"):
            load_prompt("missing.txt", tmp_path / "missing.txt")


class TestLoadJsonSchema:
    def test_bundled_schema_is_strict_object(self) -> None:
        schema = json.loads(load_json_schema())
        assert schema["type"] == "object"
        assert schema["additionalProperties"] is False
        assert schema["properties"]["experience"]["items"]["required"] == ["title"]
