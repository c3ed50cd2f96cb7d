"""
Glossary Parser - turn blank-line separated stanzas into a term mapping.

Input format:
    book
    a printed or written literary work

    glossary
    a list of difficult or specialized terms, with their definitions,
    usually near the end of a book

The first non-blank line of a stanza is the term; following non-blank lines
are definition lines, joined with "\\n". A stanza is only committed when a
blank line closes it, so a final stanza with no trailing blank line is
dropped. A term closed before any definition line is dropped too. Repeated
terms overwrite earlier ones.

Usage:
    from glossary_site.parser import GlossaryParser, read_glossary

    glossary = read_glossary("data/terms.txt")

    parser = GlossaryParser()
    glossary = parser.parse(open("data/terms.txt").read().splitlines())
    print(parser.stats.to_dict())
"""

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from .errors import InputNotFoundError, InputUnreadableError
from .models import Glossary, ParserStats, TermEntry

logger = logging.getLogger(__name__)


class GlossaryParser:
    """Single forward pass over lines, committing a stanza at each blank line."""

    def __init__(self):
        self.stats = ParserStats()

    def parse(self, lines: Iterable[str]) -> Glossary:
        """
        Parse an iterable of text lines into a glossary.

        Args:
            lines: Any line source (open file, list of strings, generator).
                   Trailing newlines are stripped along with other whitespace.

        Returns:
            Dict mapping each well-terminated term to its definition.
        """
        self.stats = ParserStats()
        glossary: Glossary = {}
        entry = TermEntry()

        for raw in lines:
            self.stats.lines_read += 1
            line = raw.strip()

            if not line:
                if entry.pending and entry.lines:
                    self._commit(glossary, entry)
                elif entry.pending:
                    self.stats.terms_without_definition += 1
                    logger.debug(f"Dropping term with no definition: {entry.term!r}")
                entry.reset()
            elif not entry.pending:
                entry.term = line
            else:
                entry.lines.append(line)

        # No implicit flush at end of input
        if entry.pending:
            self.stats.unterminated_entries += 1
            logger.debug(f"Dropping unterminated stanza at end of input: {entry.term!r}")

        return glossary

    def _commit(self, glossary: Glossary, entry: TermEntry):
        if entry.term in glossary:
            self.stats.duplicates_overwritten += 1
            logger.warning(f"Duplicate term {entry.term!r}: keeping the later definition")
        glossary[entry.term] = entry.definition
        self.stats.entries_committed += 1

    def parse_file(self, path: Union[str, Path], encoding: str = "utf-8") -> Glossary:
        """
        Read and parse a glossary file.

        Raises:
            InputNotFoundError: the file does not exist.
            InputUnreadableError: the file cannot be opened, read or decoded.
        """
        path = Path(path)
        try:
            with open(path, 'r', encoding=encoding) as f:
                glossary = self.parse(f)
        except FileNotFoundError as e:
            raise InputNotFoundError(f"Input file not found: {path}", path) from e
        except (OSError, UnicodeDecodeError) as e:
            raise InputUnreadableError(f"Cannot read input file {path}: {e}", path) from e

        logger.info(f"Read {len(glossary)} terms from {path}")
        return glossary

    def print_stats(self):
        """Print parsing statistics."""
        print(f"\n=== Parsing Statistics ===")
        print(f"Lines read: {self.stats.lines_read:,}")
        print(f"Entries committed: {self.stats.entries_committed:,}")
        print(f"Duplicates overwritten: {self.stats.duplicates_overwritten:,}")
        print(f"Terms without definition: {self.stats.terms_without_definition:,}")
        print(f"Unterminated entries: {self.stats.unterminated_entries:,}")


def parse_lines(lines: Iterable[str], parser: Optional[GlossaryParser] = None) -> Glossary:
    """Convenience function to parse lines with a fresh (or given) parser."""
    return (parser or GlossaryParser()).parse(lines)


def read_glossary(path: Union[str, Path], encoding: str = "utf-8",
                  parser: Optional[GlossaryParser] = None) -> Glossary:
    """Convenience function to read a glossary file."""
    return (parser or GlossaryParser()).parse_file(path, encoding=encoding)
