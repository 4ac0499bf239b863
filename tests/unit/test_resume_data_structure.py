"""Unit tests for building the résumé domain model from parsed YAML."""

from datetime import date

import pytest

from yamlresume.contexts.compiling.exceptions import StructuralError
from yamlresume.contexts.compiling.resume_data_structure import (
    Experience,
    ResumeData,
)


def minimal_resume(**overrides):
    data = {
        "info": {"name": "Ada Lovelace", "title": "Analyst"},
        "sections": {},
    }
    data.update(overrides)
    return data


@pytest.mark.unit
def test_minimal_resume():
    resume = ResumeData.from_dict(minimal_resume())

    assert resume.info.name == "Ada Lovelace"
    assert resume.info.title == "Analyst"
    assert resume.info.email is None
    assert resume.theme is None
    assert resume.ats_keywords == []
    assert resume.social_networks == []
    assert resume.personal_statement is None
    assert resume.sections.experiences == []
    assert resume.sections.references == []


@pytest.mark.unit
def test_missing_info_raises():
    data = minimal_resume()
    del data["info"]

    with pytest.raises(StructuralError) as exc_info:
        ResumeData.from_dict(data)
    assert exc_info.value.field_path == "resume.info"


@pytest.mark.unit
def test_missing_sections_raises():
    data = minimal_resume()
    del data["sections"]

    with pytest.raises(StructuralError) as exc_info:
        ResumeData.from_dict(data)
    assert exc_info.value.field_path == "resume.sections"


@pytest.mark.unit
def test_missing_required_info_field_raises():
    with pytest.raises(StructuralError) as exc_info:
        ResumeData.from_dict(minimal_resume(info={"name": "Ada"}))
    assert exc_info.value.field_path == "resume.info.title"


@pytest.mark.unit
def test_non_mapping_resume_raises():
    with pytest.raises(StructuralError):
        ResumeData.from_dict(["not", "a", "mapping"])


@pytest.mark.unit
def test_missing_required_entry_field_reports_path():
    data = minimal_resume(
        sections={"experiences": [{"company": "A", "position": "B"}, {"company": "C"}]}
    )

    with pytest.raises(StructuralError) as exc_info:
        ResumeData.from_dict(data)
    assert exc_info.value.field_path == "resume.sections.experiences[1].position"


@pytest.mark.unit
def test_non_mapping_entry_raises():
    with pytest.raises(StructuralError):
        ResumeData.from_dict(minimal_resume(sections={"projects": ["just a string"]}))


@pytest.mark.unit
def test_scalars_are_coerced_to_strings():
    data = minimal_resume(
        sections={
            "experiences": [
                {
                    "company": "Acme",
                    "position": "Dev",
                    "start_date": 2019,
                    "end_date": date(2021, 3, 1),
                    "highlights": ["Shipped", 42],
                }
            ]
        }
    )
    experience = ResumeData.from_dict(data).sections.experiences[0]

    assert experience == Experience(
        company="Acme",
        position="Dev",
        start_date="2019",
        end_date="2021-03-01",
        highlights=["Shipped", "42"],
    )


@pytest.mark.unit
def test_non_list_collections_become_empty():
    data = minimal_resume(
        sections={"experiences": None, "projects": "oops"},
        social_networks={"platform": "GitHub"},
        ats={"keywords": "python"},
    )
    resume = ResumeData.from_dict(data)

    assert resume.sections.experiences == []
    assert resume.sections.projects == []
    assert resume.social_networks == []
    assert resume.ats_keywords == []


@pytest.mark.unit
def test_ats_keywords_and_statement():
    data = minimal_resume(
        ats={"keywords": ["Python", "AWS"]},
        personal_statement="  Curious engineer.\n",
        theme="classic",
    )
    resume = ResumeData.from_dict(data)

    assert resume.ats_keywords == ["Python", "AWS"]
    assert resume.personal_statement == "Curious engineer."
    assert resume.theme == "classic"


@pytest.mark.unit
def test_blank_statement_is_absent():
    assert ResumeData.from_dict(minimal_resume(personal_statement="   ")).personal_statement is None


@pytest.mark.unit
def test_all_section_types_preserve_order():
    data = minimal_resume(
        sections={
            "skills": [{"name": "Languages", "keywords": ["Go", "Rust"]}, {"name": "Tools"}],
            "languages": [{"name": "English", "proficiency": "Native"}],
            "awards": [{"title": "Best Paper", "issuer": "ACM", "date": "2020-05"}],
            "certifications": [{"name": "CKA"}],
            "publications": [{"title": "On Things", "link": "https://x.dev"}],
            "references": [{"name": "Grace Hopper", "contact": "grace@example.com"}],
        }
    )
    sections = ResumeData.from_dict(data).sections

    assert [group.name for group in sections.skills] == ["Languages", "Tools"]
    assert sections.skills[0].keywords == ["Go", "Rust"]
    assert sections.skills[1].keywords == []
    assert sections.languages[0].proficiency == "Native"
    assert sections.awards[0].issuer == "ACM"
    assert sections.certifications[0].issuer is None
    assert sections.publications[0].link == "https://x.dev"
    assert sections.references[0].position is None


@pytest.mark.unit
def test_incomplete_unrendered_entries_are_dropped():
    data = minimal_resume(
        social_networks=[{"platform": "GitHub"}, {"platform": "LinkedIn", "username": "ada"}],
        sections={
            "skills": [{"keywords": ["Go"]}, {"name": "Tools"}],
            "languages": ["English"],
            "awards": [{"issuer": "ACM"}],
            "certifications": [{"issuer": "CNCF"}],
            "publications": [None],
            "references": [{"contact": "x@example.com"}, {"name": "Grace"}],
        },
    )
    resume = ResumeData.from_dict(data)

    assert [network.platform for network in resume.social_networks] == ["LinkedIn"]
    assert [group.name for group in resume.sections.skills] == ["Tools"]
    assert resume.sections.languages == []
    assert resume.sections.awards == []
    assert resume.sections.certifications == []
    assert resume.sections.publications == []
    assert [reference.name for reference in resume.sections.references] == ["Grace"]


@pytest.mark.unit
def test_rendered_entries_stay_strict():
    with pytest.raises(StructuralError):
        ResumeData.from_dict(minimal_resume(sections={"education": [{"degree": "BSc"}]}))
