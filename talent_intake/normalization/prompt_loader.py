from pathlib import Path

from talent_intake.normalization.exceptions import NormalizationError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt(name: str, path: Path | None = None) -> str:
    """Load a bundled prompt file, or ``path`` when given.

    Raises:
        NormalizationError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / name
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise NormalizationError(f"Failed to load prompt '{path.name}': {exc}") from exc


def load_json_schema(path: Path | None = None) -> str:
    """Load the structured record JSON schema.

    Raises:
        NormalizationError: if the file cannot be read.
    """
    return load_prompt("structured_record_schema.json", path)
