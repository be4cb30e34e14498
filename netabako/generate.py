"""Gemini (Vertex AI) text generation."""

import shutil
import subprocess

import requests

from .config import get_api_base, get_location, get_model_id, get_project_id, run_cmd
from .log import get_logger
from .retry import with_retry

REQUEST_TIMEOUT = 120


class GenerationError(Exception):
    """Token lookup, the API call, or its response failed."""


def get_access_token() -> str:
    """Ask the gcloud CLI for an application-default access token."""
    gcloud = shutil.which("gcloud")
    if not gcloud:
        raise GenerationError("gcloud CLI not found. Install the Google Cloud SDK and run "
                              "'gcloud auth application-default login'.")
    try:
        r = run_cmd([gcloud, "auth", "application-default", "print-access-token"],
                    capture=True, timeout=60)
    except (RuntimeError, subprocess.TimeoutExpired) as e:
        raise GenerationError(f"access token lookup failed: {str(e)[:300]}") from e
    token = r.stdout.strip()
    if not token:
        raise GenerationError("gcloud returned an empty access token")
    return token


def build_endpoint() -> str:
    return (
        f"{get_api_base()}/projects/{get_project_id()}/locations/{get_location()}"
        f"/publishers/google/models/{get_model_id()}:generateContent"
    )


def build_request_body(prompt: str) -> dict:
    return {
        "contents": [
            {
                "role": "user",
                "parts": [{"text": prompt}],
            }
        ]
    }


def extract_texts(response: dict) -> list[str]:
    """All text parts across all candidates, in order."""
    texts = []
    for candidate in response.get("candidates") or []:
        content = candidate.get("content") or {}
        for part in content.get("parts") or []:
            if "text" in part:
                texts.append(part["text"])
    return texts


@with_retry(max_retries=2, base_delay=3.0, retry_on=(requests.ConnectionError, requests.Timeout))
def _post(endpoint: str, token: str, body: dict) -> requests.Response:
    return requests.post(
        endpoint,
        json=body,
        headers={"Authorization": f"Bearer {token}"},
        timeout=REQUEST_TIMEOUT,
    )


def generate(prompt: str) -> list[str]:
    """Send `prompt` to Gemini and return the generated text parts."""
    logger = get_logger()
    endpoint = build_endpoint()
    token = get_access_token()
    logger.debug("POST %s", endpoint)

    try:
        r = _post(endpoint, token, build_request_body(prompt))
    except requests.RequestException as e:
        raise GenerationError(f"generateContent request failed: {e}") from e

    logger.debug("generateContent status: %d", r.status_code)
    try:
        data = r.json()
    except ValueError as e:
        raise GenerationError(f"JSON parse failed: {e}\nraw: {r.text[:1000]}") from e

    if r.status_code != 200:
        message = (data.get("error") or {}).get("message", "") if isinstance(data, dict) else ""
        raise GenerationError(f"generateContent status {r.status_code}: {message or r.text[:300]}")

    if not isinstance(data, dict):
        raise GenerationError(f"unexpected response shape: {r.text[:300]}")
    return extract_texts(data)
