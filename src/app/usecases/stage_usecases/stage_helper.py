import json
import time
from typing import Any, Callable, Dict, Optional, Type

from fastapi import Depends
from pydantic import ValidationError

from src.app.models.schemas.stage_result_schema import StageModel, dump_stage_result
from src.app.services.openai_service import OpenAIService
from src.app.utils.custom_exceptions import SchemaMismatchError
from src.app.utils.logging_util import loggers
from src.app.utils.response_parser import parse_response


def serialize_stage_data(stage_data: Any) -> str:
    """Pretty-print a prior stage payload for splicing into a prompt."""
    return json.dumps(stage_data, indent=2, ensure_ascii=False)


def _as_list(value: Any) -> list:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def normalize_solution_payload(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Fold the deprecated applovaCurrent/missingComponents shape into applovaContext."""
    deprecated_keys = ("applovaCurrent", "missingComponents", "proposedSolution")
    if "applovaContext" in payload or not any(k in payload for k in deprecated_keys):
        return payload

    loggers["main"].warning(
        "Solution response used the deprecated applovaCurrent shape; normalizing to applovaContext"
    )
    normalized = dict(payload)
    normalized["applovaContext"] = {
        "existingCapabilities": _as_list(normalized.pop("applovaCurrent", None)),
        "gaps": _as_list(normalized.pop("missingComponents", None)),
        "proposedSolution": normalized.pop("proposedSolution", "") or "",
    }
    return normalized


def normalize_user_story_payload(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Fold the deprecated singular userStory field into userStories."""
    if "userStories" in payload or "userStory" not in payload:
        return payload

    loggers["main"].warning(
        "User story response used the deprecated userStory field; normalizing to userStories"
    )
    normalized = dict(payload)
    normalized["userStories"] = _as_list(normalized.pop("userStory"))
    return normalized


def validate_stage_payload(
    payload: Any, result_model: Type[StageModel]
) -> Dict[str, Any]:
    if not isinstance(payload, dict):
        raise SchemaMismatchError(
            f"Expected a JSON object, got {type(payload).__name__}"
        )

    try:
        result = result_model.model_validate(payload)
    except ValidationError as e:
        errors = [
            {"loc": list(error["loc"]), "msg": error["msg"]}
            for error in e.errors()
        ]
        raise SchemaMismatchError(
            f"{result_model.__name__} validation failed: {json.dumps(errors)}",
            errors=errors,
        ) from e

    return dump_stage_result(result)


class StageHelper:
    def __init__(self, openai_service: OpenAIService = Depends(OpenAIService)):
        self.openai_service = openai_service

    async def run_stage(
        self,
        stage: str,
        feature_title: str,
        system_prompt: str,
        user_prompt: str,
        result_model: Type[StageModel],
        normalizer: Optional[Callable[[Dict[str, Any]], Dict[str, Any]]] = None,
    ) -> Dict[str, Any]:
        """
        Drive one stage: ask the model, recover JSON from its reply and check
        the result against the stage's canonical shape.
        """
        start_time = time.perf_counter()
        loggers["main"].info(f"Running {stage} stage for feature '{feature_title}'")

        content = await self.openai_service.completions(
            user_prompt=user_prompt,
            system_prompt=system_prompt,
        )

        parsed_response = parse_response(content)
        if normalizer and isinstance(parsed_response, dict):
            parsed_response = normalizer(parsed_response)

        result = validate_stage_payload(parsed_response, result_model)

        echoed_title = result.get("feature", {}).get("title")
        if echoed_title and echoed_title != feature_title:
            loggers["main"].warning(
                f"{stage} stage echoed feature title '{echoed_title}' instead of '{feature_title}'"
            )

        processing_time = time.perf_counter() - start_time
        loggers["time_tracker"].info(
            f"Processing time for {stage} stage: {processing_time:.2f} seconds"
        )
        return result
