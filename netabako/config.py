"""Paths, settings resolution, and subprocess helper."""

import json
import os
import subprocess
from pathlib import Path

# ─────────────────────────────────────────────────────
# Home directory — config and logs live here
# ─────────────────────────────────────────────────────
NETABAKO_DIR = Path.home() / ".netabako"
LOGS_DIR = NETABAKO_DIR / "logs"
CONFIG_FILE = NETABAKO_DIR / "config.json"

# ─────────────────────────────────────────────────────
# Vertex AI defaults — override via env or config.json
# ─────────────────────────────────────────────────────
DEFAULT_PROJECT_ID = "neta-bako"
DEFAULT_LOCATION = "us-central1"
DEFAULT_MODEL_ID = "gemini-2.5-pro"
DEFAULT_API_BASE = "https://aiplatform.googleapis.com/v1"

DEFAULT_PROMPTS_FILE = Path("prompts.yaml")
DEFAULT_TOP_N = 10


# ─────────────────────────────────────────────────────
# Utilities
# ─────────────────────────────────────────────────────
def run_cmd(cmd, check=True, capture=False, **kwargs):
    if capture:
        r = subprocess.run(cmd, capture_output=True, text=True, **kwargs)
        if check and r.returncode != 0:
            raise RuntimeError(r.stderr)
        return r
    subprocess.run(cmd, check=check, **kwargs)


# ─────────────────────────────────────────────────────
# Settings resolution — env → config.json → default
# ─────────────────────────────────────────────────────
def load_config() -> dict:
    """Load config.json, or an empty dict when missing or unreadable."""
    if CONFIG_FILE.exists():
        try:
            cfg = json.loads(CONFIG_FILE.read_text())
            if isinstance(cfg, dict):
                return cfg
        except (OSError, ValueError):
            pass
    return {}


def get_setting(name: str, default: str = "") -> str:
    """Resolve a setting: environment variable first, then config.json."""
    val = os.environ.get(name)
    if val:
        return val
    val = load_config().get(name)
    if val:
        return str(val)
    return default


def get_project_id() -> str:
    return get_setting("NETABAKO_PROJECT_ID", DEFAULT_PROJECT_ID)


def get_location() -> str:
    return get_setting("NETABAKO_LOCATION", DEFAULT_LOCATION)


def get_model_id() -> str:
    return get_setting("NETABAKO_MODEL_ID", DEFAULT_MODEL_ID)


def get_api_base() -> str:
    return get_setting("NETABAKO_API_BASE", DEFAULT_API_BASE).rstrip("/")


def get_top_n(config: dict | None = None) -> int:
    """Cap on merged topics; 0 or less means unlimited."""
    config = load_config() if config is None else config
    try:
        return int(config.get("merge_top_n", DEFAULT_TOP_N))
    except (TypeError, ValueError):
        return DEFAULT_TOP_N
