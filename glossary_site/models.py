"""
Data models for glossary parsing and site generation.

A glossary itself is a plain ``dict`` mapping term -> definition. The
classes here cover the transient parse state and the bookkeeping around it.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

# term -> definition (definition lines joined with "\n")
Glossary = Dict[str, str]


@dataclass
class TermEntry:
    """A term being collected by the parser, with its definition lines so far."""
    term: str = ""
    lines: List[str] = field(default_factory=list)

    @property
    def pending(self) -> bool:
        return bool(self.term)

    @property
    def definition(self) -> str:
        return "\n".join(self.lines)

    def reset(self):
        self.term = ""
        self.lines = []


@dataclass
class ParserStats:
    """Statistics from parsing."""
    lines_read: int = 0
    entries_committed: int = 0
    duplicates_overwritten: int = 0
    terms_without_definition: int = 0
    unterminated_entries: int = 0

    def to_dict(self) -> dict:
        return {
            "lines_read": self.lines_read,
            "entries_committed": self.entries_committed,
            "duplicates_overwritten": self.duplicates_overwritten,
            "terms_without_definition": self.terms_without_definition,
            "unterminated_entries": self.unterminated_entries,
        }


@dataclass
class SiteResult:
    """Files written by one site generation run."""
    output_dir: Path
    index_page: Optional[Path] = None
    term_pages: List[Path] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        return len(self.term_pages) + (1 if self.index_page else 0)
