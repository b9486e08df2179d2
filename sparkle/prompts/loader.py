"""Prompt template loader.

Loads the fixed prompt sections from the templates/ directory and renders
them with provided variables using string.Template ($var syntax).

Substituted values are inserted verbatim; a '$' inside a value is never
re-interpreted.
"""

from functools import lru_cache
from pathlib import Path
from string import Template

_TEMPLATES_DIR = Path(__file__).parent / "templates"


@lru_cache(maxsize=32)
def _load_raw(name: str) -> str:
    """Load raw template text from file. Cached for performance."""
    path = _TEMPLATES_DIR / f"{name}.txt"
    if not path.exists():
        raise FileNotFoundError(f"Prompt template not found: {path}")
    return path.read_text(encoding="utf-8").rstrip("\n")


def render(name: str, **kwargs: str) -> str:
    """Load a prompt template and render it with the given variables.

    Args:
        name: Template filename without extension (e.g. "persona_preamble")
        **kwargs: Template variables to substitute

    Returns:
        Rendered prompt section, without a trailing newline

    Raises:
        FileNotFoundError: If template file doesn't exist
        KeyError: If a required placeholder has no value provided
    """
    template = Template(_load_raw(name))
    return template.substitute(**kwargs)
