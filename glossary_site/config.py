"""Settings for glossary site generation.

All settings can be overridden via environment variables (optionally loaded
from a ``.env`` file) or by passing values directly to ``load_config``.

Supported env vars:
  - GLOSSARY_INPUT_PATH / GLOSSARY_OUTPUT_DIR
  - GLOSSARY_ENCODING
  - GLOSSARY_TITLE / GLOSSARY_HEADING / GLOSSARY_TERM_COLOR
  - GLOSSARY_SHOW_PROGRESS  ("true"/"false")
  - GLOSSARY_CREATE_OUTPUT_DIR  ("true"/"false")
  - GLOSSARY_LOG_LEVEL
"""

import os
from dataclasses import dataclass, fields
from typing import Optional

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "GLOSSARY_"


def _parse_bool(value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "f", "no", "n", "off"}:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")


@dataclass
class SiteConfig:
    """Input, output and page settings for one generation run."""

    input_path: Optional[str] = None
    output_dir: Optional[str] = None
    encoding: str = "utf-8"
    title: str = "Glossary"
    heading: str = "Glossary Index"
    term_color: str = "red"
    show_progress: bool = False
    create_output_dir: bool = False
    log_level: str = "INFO"


def load_config(env_file: Optional[str] = None, **overrides) -> SiteConfig:
    """Build a SiteConfig with dotenv, env-var and keyword overrides.

    Resolution order (later wins):
      1. Dataclass defaults
      2. ``.env`` file found from the working directory, or ``env_file``
         (does not replace variables already set; a missing ``env_file``
         raises FileNotFoundError)
      3. Environment variables (``GLOSSARY_TITLE``, etc.)
      4. Explicit keyword arguments that are not None
    """
    if env_file:
        if not os.path.isfile(env_file):
            raise FileNotFoundError(f"Env file not found: {env_file}")
        load_dotenv(env_file, override=False)
    else:
        # Search from the working directory, not from this package
        dotenv_path = find_dotenv(usecwd=True)
        if dotenv_path:
            load_dotenv(dotenv_path, override=False)

    cfg = SiteConfig()

    # Env-var layer
    for f in fields(SiteConfig):
        raw = os.getenv(f"{ENV_PREFIX}{f.name.upper()}")
        if raw is None or raw == "":
            continue
        if f.type is bool:
            setattr(cfg, f.name, _parse_bool(raw))
        else:
            setattr(cfg, f.name, raw)

    # Explicit overrides layer
    for key, value in overrides.items():
        if not hasattr(cfg, key):
            raise TypeError(f"Unknown config key: {key!r}")
        if value is not None:
            setattr(cfg, key, value)

    return cfg
