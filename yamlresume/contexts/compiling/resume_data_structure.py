"""
Resume Data Structure

Typed résumé domain model built from the parsed YAML mapping found under the
top-level `resume` key.

Every optional scalar is Optional[str] and every optional collection defaults
to an empty list, so builders never need null checks. Missing required fields
of info and of experience, education and project entries raise StructuralError
with the dotted path of the field. Incomplete entries of the other collections
(skills, languages, awards, certifications, publications, references, social
networks) are dropped instead.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Callable, Dict, List, Optional, TypeVar

from yamlresume.contexts.compiling.exceptions import StructuralError
from yamlresume.utils.formatting import safe

T = TypeVar("T")


def _to_text(value: Any) -> Optional[str]:
    """Coerce a YAML scalar to a display string (dates become ISO strings)."""
    if value is None:
        return None
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def _mapping(value: Any, path: str) -> Dict[str, Any]:
    if value is None:
        raise StructuralError(path)
    if not isinstance(value, dict):
        raise StructuralError(path, f"must be a mapping, got {type(value).__name__}")
    return value


def _required(data: Dict[str, Any], key: str, path: str) -> str:
    value = _to_text(data.get(key))
    if value is None:
        raise StructuralError(f"{path}.{key}")
    return value


def _optional(data: Dict[str, Any], key: str) -> Optional[str]:
    return _to_text(data.get(key))


def _strings(data: Dict[str, Any], key: str) -> List[str]:
    return [_to_text(item) for item in safe(data.get(key)) if item is not None]


def _records(
    data: Dict[str, Any], key: str, path: str, factory: Callable[[Dict[str, Any], str], T]
) -> List[T]:
    records = []
    for index, item in enumerate(safe(data.get(key))):
        item_path = f"{path}.{key}[{index}]"
        records.append(factory(_mapping(item, item_path), item_path))
    return records


def _lenient_records(
    data: Dict[str, Any], key: str, path: str, factory: Callable[[Dict[str, Any], str], T]
) -> List[T]:
    """Like _records, but entries that are not mappings or lack required fields are dropped."""
    records = []
    for index, item in enumerate(safe(data.get(key))):
        if not isinstance(item, dict):
            continue
        try:
            records.append(factory(item, f"{path}.{key}[{index}]"))
        except StructuralError:
            continue
    return records


@dataclass
class PersonalInfo:
    """
    Header information. All values are free-form display strings.

    Attributes:
        name: Full name
        title: Professional title shown under the name
        mobile, email, website, address, gender: Optional contact details
    """

    name: str
    title: str
    mobile: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    address: Optional[str] = None
    gender: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str) -> "PersonalInfo":
        return cls(
            name=_required(data, "name", path),
            title=_required(data, "title", path),
            mobile=_optional(data, "mobile"),
            email=_optional(data, "email"),
            website=_optional(data, "website"),
            address=_optional(data, "address"),
            gender=_optional(data, "gender"),
        )


@dataclass
class SocialNetwork:
    platform: str
    username: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str) -> "SocialNetwork":
        return cls(
            platform=_required(data, "platform", path),
            username=_required(data, "username", path),
        )


@dataclass
class Experience:
    """Work experience entry. highlights are rendered as bullets in order."""

    company: str
    position: str
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    highlights: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str) -> "Experience":
        return cls(
            company=_required(data, "company", path),
            position=_required(data, "position", path),
            start_date=_optional(data, "start_date"),
            end_date=_optional(data, "end_date"),
            highlights=_strings(data, "highlights"),
        )


@dataclass
class Education:
    institution: str
    degree: str
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    highlights: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str) -> "Education":
        return cls(
            institution=_required(data, "institution", path),
            degree=_required(data, "degree", path),
            start_date=_optional(data, "start_date"),
            end_date=_optional(data, "end_date"),
            highlights=_strings(data, "highlights"),
        )


@dataclass
class Project:
    name: str
    description: str
    link: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str) -> "Project":
        return cls(
            name=_required(data, "name", path),
            description=_required(data, "description", path),
            link=_optional(data, "link"),
        )


@dataclass
class SkillGroup:
    name: str
    keywords: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str) -> "SkillGroup":
        return cls(name=_required(data, "name", path), keywords=_strings(data, "keywords"))


@dataclass
class Language:
    name: str
    proficiency: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str) -> "Language":
        return cls(name=_required(data, "name", path), proficiency=_optional(data, "proficiency"))


@dataclass
class Award:
    title: str
    issuer: Optional[str] = None
    date: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str) -> "Award":
        return cls(
            title=_required(data, "title", path),
            issuer=_optional(data, "issuer"),
            date=_optional(data, "date"),
            description=_optional(data, "description"),
        )


@dataclass
class Certification:
    name: str
    issuer: Optional[str] = None
    date: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str) -> "Certification":
        return cls(
            name=_required(data, "name", path),
            issuer=_optional(data, "issuer"),
            date=_optional(data, "date"),
        )


@dataclass
class Publication:
    title: str
    publisher: Optional[str] = None
    date: Optional[str] = None
    link: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str) -> "Publication":
        return cls(
            title=_required(data, "title", path),
            publisher=_optional(data, "publisher"),
            date=_optional(data, "date"),
            link=_optional(data, "link"),
        )


@dataclass
class Reference:
    name: str
    position: Optional[str] = None
    contact: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str) -> "Reference":
        return cls(
            name=_required(data, "name", path),
            position=_optional(data, "position"),
            contact=_optional(data, "contact"),
        )


@dataclass
class ResumeSections:
    """
    Independently optional, ordered section sequences.

    Source order is preserved and is the render order.
    """

    experiences: List[Experience] = field(default_factory=list)
    education: List[Education] = field(default_factory=list)
    projects: List[Project] = field(default_factory=list)
    skills: List[SkillGroup] = field(default_factory=list)
    languages: List[Language] = field(default_factory=list)
    awards: List[Award] = field(default_factory=list)
    certifications: List[Certification] = field(default_factory=list)
    publications: List[Publication] = field(default_factory=list)
    references: List[Reference] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: str) -> "ResumeSections":
        return cls(
            experiences=_records(data, "experiences", path, Experience.from_dict),
            education=_records(data, "education", path, Education.from_dict),
            projects=_records(data, "projects", path, Project.from_dict),
            skills=_lenient_records(data, "skills", path, SkillGroup.from_dict),
            languages=_lenient_records(data, "languages", path, Language.from_dict),
            awards=_lenient_records(data, "awards", path, Award.from_dict),
            certifications=_lenient_records(data, "certifications", path, Certification.from_dict),
            publications=_lenient_records(data, "publications", path, Publication.from_dict),
            references=_lenient_records(data, "references", path, Reference.from_dict),
        )


@dataclass
class ResumeData:
    """
    Root of the résumé domain model.

    Attributes:
        info: Personal header information (required)
        sections: Section sequences (required, each sequence may be empty)
        theme: Requested theme name, unvalidated (None if absent)
        ats_keywords: Keywords to emphasize; empty disables highlighting
        social_networks: Social profiles (not rendered)
        personal_statement: Free-text summary shown under the header
    """

    info: PersonalInfo
    sections: ResumeSections
    theme: Optional[str] = None
    ats_keywords: List[str] = field(default_factory=list)
    social_networks: List[SocialNetwork] = field(default_factory=list)
    personal_statement: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any, path: str = "resume") -> "ResumeData":
        """
        Build the domain model from the mapping under the `resume` key.

        Raises:
            StructuralError: If info, sections, or a required entry field is missing
        """
        data = _mapping(data, path)

        ats = data.get("ats")
        ats_keywords = _strings(ats, "keywords") if isinstance(ats, dict) else []

        statement = _optional(data, "personal_statement")
        if statement is not None:
            statement = statement.strip() or None

        return cls(
            info=PersonalInfo.from_dict(_mapping(data.get("info"), f"{path}.info"), f"{path}.info"),
            sections=ResumeSections.from_dict(
                _mapping(data.get("sections"), f"{path}.sections"), f"{path}.sections"
            ),
            theme=_optional(data, "theme"),
            ats_keywords=ats_keywords,
            social_networks=_lenient_records(
                data, "social_networks", path, SocialNetwork.from_dict
            ),
            personal_statement=statement,
        )
