from fastapi import Depends

from src.app.models.schemas.feature_request_schema import FeatureRequest
from src.app.models.schemas.stage_result_schema import AnalysisResult
from src.app.prompts.competitor_analysis_prompt import (
    COMPETITOR_ANALYSIS_SYSTEM_PROMPT,
    COMPETITOR_ANALYSIS_USER_PROMPT,
)
from src.app.usecases.stage_usecases.stage_helper import StageHelper


class AnalysisUseCase:
    def __init__(self, stage_helper: StageHelper = Depends(StageHelper)):
        self.stage_helper = stage_helper

    def build_prompt(self, request: FeatureRequest) -> str:
        return COMPETITOR_ANALYSIS_USER_PROMPT.format(
            feature_title=request.feature_title,
            feature_description=request.feature_description,
        )

    async def execute(self, request: FeatureRequest) -> dict:
        return await self.stage_helper.run_stage(
            stage="analysis",
            feature_title=request.feature_title,
            system_prompt=COMPETITOR_ANALYSIS_SYSTEM_PROMPT,
            user_prompt=self.build_prompt(request),
            result_model=AnalysisResult,
        )
