from fastapi import Depends

from src.app.models.schemas.feature_request_schema import FeatureRequest
from src.app.models.schemas.stage_result_schema import SolutionResult
from src.app.prompts.solution_prompt import (
    SOLUTION_SYSTEM_PROMPT,
    SOLUTION_USER_PROMPT,
)
from src.app.usecases.stage_usecases.stage_helper import (
    StageHelper,
    normalize_solution_payload,
)


class SolutionUseCase:
    def __init__(self, stage_helper: StageHelper = Depends(StageHelper)):
        self.stage_helper = stage_helper

    def build_prompt(self, request: FeatureRequest) -> str:
        return SOLUTION_USER_PROMPT.format(
            feature_title=request.feature_title,
            feature_description=request.feature_description,
        )

    async def execute(self, request: FeatureRequest) -> dict:
        return await self.stage_helper.run_stage(
            stage="solution",
            feature_title=request.feature_title,
            system_prompt=SOLUTION_SYSTEM_PROMPT,
            user_prompt=self.build_prompt(request),
            result_model=SolutionResult,
            normalizer=normalize_solution_payload,
        )
