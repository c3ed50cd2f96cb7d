import sys
from pathlib import Path

import pytest

# Make package importable when running tests from the repo root.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


TERMS_TEXT = (
    "meaning\nsomething that one wishes to convey, especially by language\n\n"
    "term\na word whose definition is in a glossary\n\n"
    "word\na string of characters in a language, which has at least one character\n\n"
    "definition\na sequence of words that gives meaning to a term\n\n"
    "glossary\na list of difficult or specialized terms, with their definitions,\n"
    "usually near the end of a book\n\n"
    "language\na set of strings of characters, each of which has meaning\n\n"
    "book\na printed or written literary work\n\n"
)


@pytest.fixture(autouse=True)
def clean_glossary_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in [
        "GLOSSARY_INPUT_PATH", "GLOSSARY_OUTPUT_DIR", "GLOSSARY_ENCODING",
        "GLOSSARY_TITLE", "GLOSSARY_HEADING", "GLOSSARY_TERM_COLOR",
        "GLOSSARY_SHOW_PROGRESS", "GLOSSARY_CREATE_OUTPUT_DIR", "GLOSSARY_LOG_LEVEL",
    ]:
        # setenv first so monkeypatch restores whatever load_dotenv writes
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def terms_file(tmp_path: Path) -> Path:
    path = tmp_path / "terms.txt"
    path.write_text(TERMS_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def sample_glossary() -> dict:
    return {
        "meaning": "something that one wishes to convey, especially by language",
        "term": "a word whose definition is in a glossary",
        "word": "a string of characters in a language, which has at least one character",
        "definition": "a sequence of words that gives meaning to a term",
        "glossary": "a list of difficult or specialized terms, with their definitions,\n"
                    "usually near the end of a book",
        "language": "a set of strings of characters, each of which has meaning",
        "book": "a printed or written literary work",
    }


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
    path = tmp_path / "output"
    path.mkdir()
    return path
