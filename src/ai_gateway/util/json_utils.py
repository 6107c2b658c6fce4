"""Utilities for JSON parsing from LLM responses."""

import json
import math
from typing import Any

from ai_gateway.errors import ParseError

PREVIEW_CHARS = 200


def strip_markdown_code_block(text: str) -> str:
    """Strip markdown code blocks (```json ... ```) from LLM responses."""
    text = text.strip()
    if text.startswith("```"):
        lines = text.split("\n")
        # Remove first line (```json) and last line (```)
        if lines[-1].strip() == "```":
            lines = lines[1:-1]
        else:
            lines = lines[1:]
        text = "\n".join(lines).strip()
    return text


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def _finite_float(literal: str) -> float:
    value = float(literal)
    if not math.isfinite(value):
        raise ValueError(f"number out of range {literal}")
    return value


def preview(text: str, limit: int = PREVIEW_CHARS) -> str:
    return text if len(text) <= limit else text[:limit] + "..."


def parse_json_response(text: str | None, provider_name: str, model_id: str | None = None) -> Any:
    """
    Parse the text of a JSON-mode response.

    Raises ParseError for empty or invalid JSON; never returns partial data.
    """
    raw_text = text or ""
    candidate = strip_markdown_code_block(raw_text)
    if not candidate:
        raise ParseError(
            f"Empty response from {provider_name} API in JSON mode",
            model_id=model_id,
            raw_text=raw_text,
        )
    try:
        # NaN and Infinity are not JSON even though json.loads accepts them
        return json.loads(candidate, parse_constant=_reject_constant, parse_float=_finite_float)
    except json.JSONDecodeError as e:
        raise ParseError(
            f"Failed to parse JSON response from {provider_name} API: {e.msg} at line {e.lineno} column {e.colno}",
            model_id=model_id,
            raw_text=raw_text,
        ) from e
    except (ValueError, RecursionError) as e:
        raise ParseError(
            f"Failed to parse JSON response from {provider_name} API: {e}",
            model_id=model_id,
            raw_text=raw_text,
        ) from e
