"""
Site Generator - render a glossary as linked static HTML pages.

Writes ``index.html`` listing every term in sorted order, plus one
``<term>.html`` page per term. Terms and definitions are written verbatim:
nothing is escaped and filenames are not sanitized, so a term containing
markup or path characters produces broken HTML or an unwritable file.

Usage:
    from glossary_site.site_generator import generate_site

    result = generate_site(glossary, "output")
    print(f"{result.page_count} pages written")
"""

import logging
from pathlib import Path
from typing import Callable, List, Optional, Union

from tqdm import tqdm

from .config import SiteConfig
from .errors import OutputDirectoryError, PageWriteError
from .models import Glossary, SiteResult

logger = logging.getLogger(__name__)

INDEX_FILENAME = "index.html"

INDEX_TEMPLATE = """<html><head><title>{title}</title></head><body>
<h1>{heading}</h1>
<ul>
{items}</ul>
</body></html>
"""

INDEX_ITEM_TEMPLATE = '<li><a href="{filename}">{term}</a></li>\n'

TERM_TEMPLATE = """<html><head><title>{term}</title></head><body>
<h1><i><b><font color="{color}">{term}</font></b></i></h1>
<p>{definition}</p>
<hr>Return to <a href="{index}">Index</a>
</body></html>
"""

PageWriter = Callable[[Path, str], None]


def write_page(path: Path, content: str):
    """Write one page, opening and closing the file around the write."""
    with open(path, 'w', encoding='utf-8') as f:
        f.write(content)


def term_filename(term: str) -> str:
    """Page filename for a term (identity mapping, no sanitizing)."""
    return f"{term}.html"


def sorted_terms(glossary: Glossary) -> List[str]:
    """All terms in code-point order."""
    return sorted(glossary)


def render_index_page(glossary: Glossary, title: str = "Glossary",
                      heading: str = "Glossary Index") -> str:
    """Generate the index page listing every term."""
    items = ''.join(
        INDEX_ITEM_TEMPLATE.format(filename=term_filename(term), term=term)
        for term in sorted_terms(glossary)
    )
    return INDEX_TEMPLATE.format(title=title, heading=heading, items=items)


def render_term_page(term: str, definition: str, color: str = "red") -> str:
    """Generate the page for a single term."""
    return TERM_TEMPLATE.format(
        term=term,
        definition=definition,
        color=color,
        index=INDEX_FILENAME,
    )


def _check_output_dir(output_dir: Path):
    if not output_dir.is_dir():
        raise OutputDirectoryError(
            f"Output folder does not exist or is not a directory: {output_dir}",
            output_dir,
        )


def _write(writer: PageWriter, path: Path, content: str):
    try:
        writer(path, content)
    except OSError as e:
        raise PageWriteError(f"Cannot write page {path}: {e}", path) from e
    logger.debug(f"Wrote {path}")


def create_index_page(
    glossary: Glossary,
    output_dir: Union[str, Path],
    title: str = "Glossary",
    heading: str = "Glossary Index",
    writer: PageWriter = write_page,
    check_dir: bool = True,
) -> Path:
    """
    Write ``index.html`` into an existing output folder.

    Args:
        glossary: Term -> definition mapping
        output_dir: Folder to write into (must already exist)
        title: Text for the <title> element
        heading: Text for the <h1> element
        writer: Callable taking (path, content); defaults to a UTF-8 file write
        check_dir: Verify output_dir is a directory before writing

    Returns:
        Path of the index page
    """
    output_dir = Path(output_dir)
    if check_dir:
        _check_output_dir(output_dir)

    path = output_dir / INDEX_FILENAME
    _write(writer, path, render_index_page(glossary, title, heading))
    return path


def create_term_pages(
    glossary: Glossary,
    output_dir: Union[str, Path],
    color: str = "red",
    writer: PageWriter = write_page,
    check_dir: bool = True,
    progress: bool = False,
) -> List[Path]:
    """
    Write one page per term, in sorted term order.

    Each page is written independently. The first failure raises
    PageWriteError; pages written before it stay on disk.

    Returns:
        Paths of the pages written
    """
    output_dir = Path(output_dir)
    if check_dir:
        _check_output_dir(output_dir)

    written = []
    for term in tqdm(sorted_terms(glossary), desc="Term pages", disable=not progress):
        path = output_dir / term_filename(term)
        _write(writer, path, render_term_page(term, glossary[term], color))
        written.append(path)

    return written


def generate_site(
    glossary: Glossary,
    output_dir: Union[str, Path],
    config: Optional[SiteConfig] = None,
    writer: PageWriter = write_page,
) -> SiteResult:
    """
    Generate the full site: index page, then every term page.

    Args:
        glossary: Term -> definition mapping
        output_dir: Folder to write into
        config: Page text/style settings (defaults if None)
        writer: Page writer passed through to both steps

    Returns:
        SiteResult listing the files written
    """
    config = config or SiteConfig()
    output_dir = Path(output_dir)

    if config.create_output_dir:
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputDirectoryError(f"Cannot create output folder {output_dir}: {e}", output_dir) from e

    result = SiteResult(output_dir=output_dir)
    result.index_page = create_index_page(
        glossary, output_dir, title=config.title, heading=config.heading, writer=writer
    )
    result.term_pages = create_term_pages(
        glossary, output_dir, color=config.term_color, writer=writer,
        progress=config.show_progress,
    )

    logger.info(f"Generated {result.page_count} pages in {output_dir}")
    return result
