"""
Section and Item Builders

Turn résumé domain entries into layout-tree fragments.

Every optional fragment (date line, bullet list, link line, ...) is computed
first and only appended when present; builders never emit placeholder nodes.
"""

from typing import List, Optional, Sequence

from yamlresume.contexts.compiling.defaults import DIVIDER_LINE_WIDTH, DIVIDER_WIDTH
from yamlresume.contexts.compiling.document_nodes import (
    CanvasLine,
    CanvasNode,
    ContentNode,
    ListNode,
    StackNode,
    TextNode,
)
from yamlresume.contexts.compiling.highlighter import highlight
from yamlresume.contexts.compiling.resume_data_structure import (
    Award,
    Certification,
    Education,
    Experience,
    Language,
    PersonalInfo,
    Project,
    Publication,
    Reference,
    SkillGroup,
)
from yamlresume.utils.formatting import format_date_range, has_items, join_present


def divider(color: str) -> CanvasNode:
    """Full-width horizontal rule drawn under a section title."""
    return CanvasNode(
        canvas=(
            CanvasLine(
                x1=0,
                y1=0,
                x2=DIVIDER_WIDTH,
                y2=0,
                line_width=DIVIDER_LINE_WIDTH,
                line_color=color,
            ),
        ),
        margin=(0, 0, 0, 8),
    )


def section(title: str, items: Sequence[ContentNode], divider_color: str) -> List[ContentNode]:
    """
    Wrap pre-built items into a titled, divider-delimited section.

    Args:
        title: Section title (rendered uppercased)
        items: Item nodes in render order
        divider_color: Color of the rule under the title

    Returns:
        A single-element list holding the section stack, or an empty list if
        items is empty (the whole section, title included, is omitted)
    """
    if not has_items(items):
        return []
    return [
        StackNode(
            stack=(
                TextNode(text=title.upper(), style="sectionTitle"),
                divider(divider_color),
                *items,
            )
        )
    ]


def bullet_list(items: Sequence[str], keywords: Sequence[str]) -> Optional[ListNode]:
    """Bulleted list with each line highlighted, or None if there are no lines."""
    if not has_items(items):
        return None
    return ListNode(
        items=tuple(highlight(item, keywords, style="bullet") for item in items),
        margin=(0, 2, 0, 0),
    )


def _date_line(start: Optional[str], end: Optional[str]) -> Optional[TextNode]:
    date_range = format_date_range(start, end)
    if date_range is None:
        return None
    return TextNode(text=date_range, style="itemMeta")


def _meta_line(*values: Optional[str]) -> Optional[TextNode]:
    text = join_present(values)
    if not text:
        return None
    return TextNode(text=text, style="itemMeta")


def _link_line(link: Optional[str]) -> Optional[TextNode]:
    if not link:
        return None
    return TextNode(text=link, link=link, style="link")


def _item(margin_bottom: float, *parts: Optional[ContentNode]) -> StackNode:
    return StackNode(
        stack=tuple(part for part in parts if part is not None),
        margin=(0, 0, 0, margin_bottom),
    )


def header(info: PersonalInfo) -> StackNode:
    """Name, title, and a " · " joined contact line (omitted when no contact values)."""
    meta = join_present([info.mobile, info.email, info.website, info.address])
    return StackNode(
        stack=tuple(
            node
            for node in (
                TextNode(text=info.name, style="name"),
                TextNode(text=info.title, style="tagline"),
                TextNode(text=meta, style="metaLine") if meta else None,
            )
            if node is not None
        )
    )


def experience_item(experience: Experience, keywords: Sequence[str]) -> StackNode:
    return _item(
        10,
        highlight(f"{experience.position} — {experience.company}", keywords, style="itemTitle"),
        _date_line(experience.start_date, experience.end_date),
        bullet_list(experience.highlights, keywords),
    )


def education_item(education: Education, keywords: Sequence[str]) -> StackNode:
    return _item(
        8,
        highlight(education.degree, keywords, style="itemTitle"),
        TextNode(text=education.institution, style="body"),
        _date_line(education.start_date, education.end_date),
        bullet_list(education.highlights, keywords),
    )


def project_item(project: Project, keywords: Sequence[str]) -> StackNode:
    return _item(
        8,
        highlight(project.name, keywords, style="itemTitle"),
        highlight(project.description, keywords, style="body"),
        _link_line(project.link),
    )


def skill_item(skill: SkillGroup, keywords: Sequence[str]) -> StackNode:
    listed = ", ".join(skill.keywords)
    return _item(
        6,
        highlight(skill.name, keywords, style="itemTitle"),
        highlight(listed, keywords, style="body") if listed else None,
    )


def language_item(language: Language) -> StackNode:
    text = f"{language.name} — {language.proficiency}" if language.proficiency else language.name
    return _item(4, TextNode(text=text, style="body"))


def award_item(award: Award, keywords: Sequence[str]) -> StackNode:
    return _item(
        8,
        highlight(award.title, keywords, style="itemTitle"),
        _meta_line(award.issuer, award.date),
        highlight(award.description, keywords, style="body") if award.description else None,
    )


def certification_item(certification: Certification, keywords: Sequence[str]) -> StackNode:
    return _item(
        6,
        highlight(certification.name, keywords, style="itemTitle"),
        _meta_line(certification.issuer, certification.date),
    )


def publication_item(publication: Publication, keywords: Sequence[str]) -> StackNode:
    return _item(
        8,
        highlight(publication.title, keywords, style="itemTitle"),
        _meta_line(publication.publisher, publication.date),
        _link_line(publication.link),
    )


def reference_item(reference: Reference) -> StackNode:
    return _item(
        6,
        TextNode(text=reference.name, style="itemTitle"),
        TextNode(text=reference.position, style="body") if reference.position else None,
        TextNode(text=reference.contact, style="itemMeta") if reference.contact else None,
    )
