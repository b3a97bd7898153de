import json, logging
from pathlib import Path

from pydantic import ValidationError

from codepad.schemas.template import CodeTemplate

log = logging.getLogger(__name__)

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
LANGUAGES = ["javascript", "python", "java", "cpp", "csharp", "go"]


def _resolve_dir(templates_dir: str | Path | None) -> Path:
    return Path(templates_dir) if templates_dir else DEFAULT_TEMPLATES_DIR


def load_template(
    language: str, templates_dir: str | Path | None = None
) -> CodeTemplate | None:
    """Read one descriptor; any failure yields None so callers keep going."""
    # language ends up in a path; only plain names map to a file
    if not language.isalnum():
        log.error("Rejected template name %r", language)
        return None
    path = _resolve_dir(templates_dir) / f"{language}.json"
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return CodeTemplate.model_validate(data)
    except FileNotFoundError:
        log.error("Failed to load template for %s: %s not found", language, path)
    except (OSError, ValueError, ValidationError) as e:
        log.error("Error loading template for %s: %s", language, e)
    return None


def load_all_templates(
    languages: list[str] | None = None, templates_dir: str | Path | None = None
) -> list[CodeTemplate]:
    templates = []
    for lang in languages or LANGUAGES:
        template = load_template(lang, templates_dir)
        if template:
            templates.append(template)
    return templates
