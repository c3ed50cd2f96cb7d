"""
Glossary Site - build a static HTML site from a plain-text glossary.

The input is a text file of stanzas separated by blank lines: the first line
of a stanza is the term, the remaining lines are its definition. The output
is an ``index.html`` linking to one ``<term>.html`` page per term.

Usage:
    from glossary_site import read_glossary, generate_site

    glossary = read_glossary("data/terms.txt")
    result = generate_site(glossary, "output")
    print(f"{len(result.term_pages)} term pages written")

Step by step:
    from glossary_site import GlossaryParser, create_index_page, create_term_pages

    parser = GlossaryParser()
    glossary = parser.parse_file("data/terms.txt")
    print(parser.stats.to_dict())

    create_index_page(glossary, "output")
    create_term_pages(glossary, "output")
"""

from .models import Glossary, TermEntry, ParserStats, SiteResult
from .errors import (
    GlossaryError,
    InputNotFoundError,
    InputUnreadableError,
    OutputDirectoryError,
    PageWriteError,
)
from .config import SiteConfig, load_config
from .parser import GlossaryParser, parse_lines, read_glossary
from .site_generator import (
    sorted_terms,
    term_filename,
    render_index_page,
    render_term_page,
    create_index_page,
    create_term_pages,
    generate_site,
    write_page,
)

__version__ = "1.0.0"
__all__ = [
    # Models
    "Glossary",
    "TermEntry",
    "ParserStats",
    "SiteResult",
    # Errors
    "GlossaryError",
    "InputNotFoundError",
    "InputUnreadableError",
    "OutputDirectoryError",
    "PageWriteError",
    # Config
    "SiteConfig",
    "load_config",
    # Parser
    "GlossaryParser",
    "parse_lines",
    "read_glossary",
    # Site generator
    "sorted_terms",
    "term_filename",
    "render_index_page",
    "render_term_page",
    "create_index_page",
    "create_term_pages",
    "generate_site",
    "write_page",
]
