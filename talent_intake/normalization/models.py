from dataclasses import asdict, dataclass, field

SCHEMA_VERSION = "1"


@dataclass(frozen=True)
class ContactInfo:
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    linkedin: str | None = None


@dataclass(frozen=True)
class ExperienceEntry:
    title: str
    company: str | None = None
    duration: str | None = None
    location: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class EducationEntry:
    institution: str
    degree: str | None = None
    year: str | None = None
    gpa: str | None = None


@dataclass(frozen=True)
class ProjectEntry:
    name: str
    description: str | None = None
    technologies: tuple[str, ...] = ()
    url: str | None = None


@dataclass(frozen=True)
class StructuredRecord:
    """Normalized candidate document.

    ``structured`` is False for a degraded record: the model output could not
    be used, so only ``extracted_text`` is populated and every section is empty.
    """

    extracted_text: str
    structured: bool = True
    contact: ContactInfo = field(default_factory=ContactInfo)
    summary: str | None = None
    experience: tuple[ExperienceEntry, ...] = ()
    education: tuple[EducationEntry, ...] = ()
    skills: tuple[str, ...] = ()
    certifications: tuple[str, ...] = ()
    languages: tuple[str, ...] = ()
    projects: tuple[ProjectEntry, ...] = ()
    schema_version: str = SCHEMA_VERSION

    @classmethod
    def degraded(cls, extracted_text: str) -> "StructuredRecord":
        return cls(extracted_text=extracted_text, structured=False)

    @property
    def is_degraded(self) -> bool:
        return not self.structured

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True)
class JobAnalysis:
    """Model-written analysis of a job posting."""

    analysis_text: str
    content_preview: str
    source_strategy: str
    analyzed: bool = True
