import json
import re
from typing import Any

from src.app.utils.custom_exceptions import ExtractionError
from src.app.utils.logging_util import loggers

JSON_FENCE_PATTERN = re.compile(r"```json\b\s*(.*?)```", re.IGNORECASE | re.DOTALL)
ANY_FENCE_PATTERN = re.compile(r"```[\w+-]*[ \t]*\n?(.*?)```", re.DOTALL)


def strip_code_fence(text: str) -> str:
    """
    Return the interior of the first markdown fence in the text.
    A fence tagged as json is preferred over any other fence; text without
    a fence is returned unchanged.
    """
    match = JSON_FENCE_PATTERN.search(text) or ANY_FENCE_PATTERN.search(text)
    if match:
        return match.group(1)
    return text


def strip_comment_lines(text: str) -> str:
    """Drop lines whose trimmed content starts with //."""
    return "\n".join(
        line for line in text.split("\n") if not line.strip().startswith("//")
    )


def parse_response(raw: str, strip_comments: bool = True) -> Any:
    """
    Recover a JSON value from free-form model output.

    :param raw: The message content returned by the model.
    :param strip_comments: Whether to drop // comment lines before parsing.
    :return: The parsed JSON value, not validated against any schema.
    :raises ExtractionError: If no valid JSON remains after stripping.
    """
    if not isinstance(raw, str):
        raise ExtractionError(repr(raw))

    content = strip_code_fence(raw)
    if strip_comments:
        content = strip_comment_lines(content)

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        loggers["main"].error(f"Failed to parse model response: {e}")
        raise ExtractionError(content) from e
