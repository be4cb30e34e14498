"""Prompt templates: a YAML mapping of key -> template with a {{THEME}} slot."""

from pathlib import Path

import yaml

THEME_PLACEHOLDER = "{{THEME}}"


class PromptError(Exception):
    """Template file unreadable, malformed, or missing the requested key."""


def load_prompts(path: Path) -> dict[str, str]:
    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise PromptError(f"cannot read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise PromptError(f"invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise PromptError(f"{path} must be a mapping of key -> template")
    return {str(k): str(v) for k, v in data.items()}


def get_template(prompts: dict[str, str], key: str) -> str:
    if key not in prompts:
        available = ", ".join(sorted(prompts)) or "(none)"
        raise PromptError(f"prompt key '{key}' not found. Available keys: {available}")
    return prompts[key]


def render(template: str, theme: str) -> str:
    return template.replace(THEME_PLACEHOLDER, theme)
