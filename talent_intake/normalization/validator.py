"""Strict conversion of parsed model JSON into a StructuredRecord.

Any deviation from the schema (unknown keys, wrong types, missing required
entry fields) rejects the whole payload; fields are never salvaged one by one.
"""

from typing import Any

from talent_intake.normalization.exceptions import NormalizationValidationError
from talent_intake.normalization.models import (
    ContactInfo,
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
    StructuredRecord,
)

_TOP_LEVEL_FIELDS = frozenset({
    "contact",
    "summary",
    "experience",
    "education",
    "skills",
    "certifications",
    "languages",
    "projects",
})
_CONTACT_FIELDS = ("name", "email", "phone", "location", "linkedin")
_EXPERIENCE_FIELDS = ("title", "company", "duration", "location", "description")
_EDUCATION_FIELDS = ("institution", "degree", "year", "gpa")
_PROJECT_FIELDS = ("name", "description", "technologies", "url")
_MAX_ENTRIES = 100


def validate_and_build(data: dict[str, Any], extracted_text: str) -> StructuredRecord:
    """Validate parsed JSON and build a fully structured record.

    Raises:
        NormalizationValidationError: on any schema deviation.
    """
    unknown = set(data) - _TOP_LEVEL_FIELDS
    if unknown:
        raise NormalizationValidationError(
            f"Unknown top-level field(s): {', '.join(sorted(unknown))}"
        )

    return StructuredRecord(
        extracted_text=extracted_text,
        structured=True,
        contact=_build_contact(data.get("contact")),
        summary=_optional_str(data.get("summary"), "summary"),
        experience=tuple(
            _build_experience(item, i)
            for i, item in enumerate(_list(data.get("experience"), "experience"))
        ),
        education=tuple(
            _build_education(item, i)
            for i, item in enumerate(_list(data.get("education"), "education"))
        ),
        skills=_unique_strings(data.get("skills"), "skills"),
        certifications=_unique_strings(data.get("certifications"), "certifications"),
        languages=_unique_strings(data.get("languages"), "languages"),
        projects=tuple(
            _build_project(item, i)
            for i, item in enumerate(_list(data.get("projects"), "projects"))
        ),
    )


def _build_contact(raw: Any) -> ContactInfo:
    if raw is None:
        return ContactInfo()
    fields = _object(raw, "contact", _CONTACT_FIELDS)
    return ContactInfo(**{
        name: _optional_str(fields.get(name), f"contact.{name}") for name in _CONTACT_FIELDS
    })


def _build_experience(raw: Any, index: int) -> ExperienceEntry:
    where = f"experience[{index}]"
    fields = _object(raw, where, _EXPERIENCE_FIELDS)
    return ExperienceEntry(
        title=_required_str(fields.get("title"), f"{where}.title"),
        company=_optional_str(fields.get("company"), f"{where}.company"),
        duration=_optional_str(fields.get("duration"), f"{where}.duration"),
        location=_optional_str(fields.get("location"), f"{where}.location"),
        description=_optional_str(fields.get("description"), f"{where}.description"),
    )


def _build_education(raw: Any, index: int) -> EducationEntry:
    where = f"education[{index}]"
    fields = _object(raw, where, _EDUCATION_FIELDS)
    return EducationEntry(
        institution=_required_str(fields.get("institution"), f"{where}.institution"),
        degree=_optional_str(fields.get("degree"), f"{where}.degree"),
        year=_optional_str(fields.get("year"), f"{where}.year"),
        gpa=_optional_str(fields.get("gpa"), f"{where}.gpa"),
    )


def _build_project(raw: Any, index: int) -> ProjectEntry:
    where = f"projects[{index}]"
    fields = _object(raw, where, _PROJECT_FIELDS)
    return ProjectEntry(
        name=_required_str(fields.get("name"), f"{where}.name"),
        description=_optional_str(fields.get("description"), f"{where}.description"),
        technologies=_unique_strings(fields.get("technologies"), f"{where}.technologies"),
        url=_optional_str(fields.get("url"), f"{where}.url"),
    )


def _object(raw: Any, where: str, allowed: tuple[str, ...]) -> dict[str, Any]:
    if not isinstance(raw, dict):
        raise NormalizationValidationError(f"'{where}' must be an object")
    unknown = set(raw) - set(allowed)
    if unknown:
        raise NormalizationValidationError(
            f"'{where}' has unknown field(s): {', '.join(sorted(unknown))}"
        )
    return raw


def _list(raw: Any, where: str) -> list[Any]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise NormalizationValidationError(f"'{where}' must be a list")
    if len(raw) > _MAX_ENTRIES:
        raise NormalizationValidationError(
            f"Too many entries in '{where}': {len(raw)} (max {_MAX_ENTRIES})"
        )
    return raw


def _required_str(raw: Any, where: str) -> str:
    if not isinstance(raw, str) or not raw.strip():
        raise NormalizationValidationError(f"'{where}' must be a non-empty string")
    return raw.strip()


def _optional_str(raw: Any, where: str) -> str | None:
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise NormalizationValidationError(f"'{where}' must be a string or null")
    return raw.strip() or None


def _unique_strings(raw: Any, where: str) -> tuple[str, ...]:
    seen: set[str] = set()
    values: list[str] = []
    for item in _list(raw, where):
        if not isinstance(item, str):
            raise NormalizationValidationError(f"'{where}' must contain only strings")
        value = item.strip()
        if value and value.casefold() not in seen:
            seen.add(value.casefold())
            values.append(value)
    return tuple(values)
