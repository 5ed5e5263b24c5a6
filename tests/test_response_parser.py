"""
Tests for recovering JSON from free-form model output.
"""

import pytest

from src.app.utils.custom_exceptions import ExtractionError
from src.app.utils.response_parser import (
    parse_response,
    strip_code_fence,
    strip_comment_lines,
)


def test_json_fence_ignores_surrounding_prose():
    raw = 'Sure! Here you go:\n```json\n{"feature": {"title": "A"}}\n```\nAnything else?'
    assert parse_response(raw) == {"feature": {"title": "A"}}


def test_json_fence_tag_is_case_insensitive():
    raw = '```JSON\n{"ok": true}\n```'
    assert parse_response(raw) == {"ok": True}


def test_untagged_fence_is_used_when_no_json_fence():
    raw = 'Result:\n```\n{"competitors": []}\n```'
    assert parse_response(raw) == {"competitors": []}


def test_other_language_tag_is_dropped_from_untagged_fallback():
    raw = '```javascript\n{"value": 1}\n```'
    assert parse_response(raw) == {"value": 1}


def test_json_fence_preferred_over_earlier_untagged_fence():
    raw = '```\nnot json\n```\nthen\n```json\n{"picked": "json"}\n```'
    assert strip_code_fence(raw).strip() == '{"picked": "json"}'
    assert parse_response(raw) == {"picked": "json"}


def test_plain_json_without_fence():
    assert parse_response('  {"a": [1, 2]}  ') == {"a": [1, 2]}


def test_comment_lines_are_removed_before_parsing():
    raw = """```json
{
  "gaps": [
    // e.g. "No offline mode"
    "No points ledger"
  ],
    // trailing explanation
  "website": "https://example.com"
}
```"""
    assert parse_response(raw) == {
        "gaps": ["No points ledger"],
        "website": "https://example.com",
    }


def test_strip_comment_lines_only_drops_leading_slashes():
    text = '  // drop me\n"url": "https://keep.me"\nkeep // inline'
    assert strip_comment_lines(text) == '"url": "https://keep.me"\nkeep // inline'


def test_comment_lines_fail_when_stripping_disabled():
    raw = '{\n// note\n"a": 1\n}'
    with pytest.raises(ExtractionError):
        parse_response(raw, strip_comments=False)


def test_malformed_json_raises_with_offending_text():
    raw = "```json\n{\"a\": 1,}\n```"
    with pytest.raises(ExtractionError) as exc_info:
        parse_response(raw)
    assert exc_info.value.details.strip() == '{"a": 1,}'
    assert exc_info.value.error_label == "Failed to parse response from OpenAI"


def test_prose_only_reply_raises():
    with pytest.raises(ExtractionError):
        parse_response("I'm sorry, I can't help with that.")


def test_non_string_content_raises():
    with pytest.raises(ExtractionError):
        parse_response(None)


def test_parsing_is_repeatable():
    raw = 'Intro\n```json\n{"x": {"y": [1, 2, 3]}}\n```'
    assert parse_response(raw) == parse_response(raw)


def test_jsonc_tag_is_not_taken_for_json():
    raw = '```jsonc\n{"dialect": "jsonc"}\n```'
    assert strip_code_fence(raw) == '{"dialect": "jsonc"}\n'
    assert parse_response(raw) == {"dialect": "jsonc"}


def test_json5_tag_is_not_taken_for_json():
    assert parse_response('```json5\n{"v": 5}\n```') == {"v": 5}
