"""
ATS Keyword Highlighting

Rewrites free text into a run sequence where keyword occurrences are bold,
so applicant tracking keywords stand out to a human reader.
"""

import re
from typing import List, Optional, Sequence

from yamlresume.contexts.compiling.document_nodes import InlineText, TextNode, TextRun


def build_keyword_pattern(keywords: Sequence[str]) -> "re.Pattern[str]":
    """
    Compile one case-insensitive alternation of all keywords.

    Keywords are literal substrings (regex metacharacters are escaped) and are
    not word-bounded. When several keywords match at the same position the
    first listed one wins.
    """
    alternation = "|".join(re.escape(keyword) for keyword in keywords)
    return re.compile(f"({alternation})", re.IGNORECASE)


def highlight(
    text: str, keywords: Sequence[str], style: Optional[str] = None
) -> TextNode:
    """
    Bold every case-insensitive keyword occurrence in text.

    Args:
        text: Text to scan
        keywords: ATS keywords; empty means no highlighting
        style: Optional style role for the resulting node

    Returns:
        TextNode with the plain string when there is nothing to highlight,
        otherwise a TextNode whose text is the split fragments in order,
        with keyword fragments as bold TextRun objects

    Examples:
        >>> highlight("React developer", ["react"]).text
        ('', TextRun(text='React', bold=True, italics=None, color=None, link=None), ' developer')
    """
    keywords = [keyword for keyword in keywords if keyword]
    if not keywords:
        return TextNode(text=text, style=style)

    lowered = {keyword.lower() for keyword in keywords}
    fragments: List[InlineText] = []
    for part in build_keyword_pattern(keywords).split(text):
        if part.lower() in lowered:
            fragments.append(TextRun(text=part, bold=True))
        else:
            fragments.append(part)

    return TextNode(text=tuple(fragments), style=style)
