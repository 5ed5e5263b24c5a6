from fastapi import Depends

from src.app.models.schemas.feature_request_schema import UIFlowRequest
from src.app.models.schemas.stage_result_schema import UIFlowResult
from src.app.prompts.ui_flow_prompt import (
    UI_FLOW_SYSTEM_PROMPT,
    UI_FLOW_USER_PROMPT,
)
from src.app.usecases.stage_usecases.stage_helper import (
    StageHelper,
    serialize_stage_data,
)


class UIFlowUseCase:
    def __init__(self, stage_helper: StageHelper = Depends(StageHelper)):
        self.stage_helper = stage_helper

    def build_prompt(self, request: UIFlowRequest) -> str:
        return UI_FLOW_USER_PROMPT.format(
            feature_title=request.feature_title,
            feature_description=request.feature_description,
            solution_data=serialize_stage_data(request.solution_data),
        )

    async def execute(self, request: UIFlowRequest) -> dict:
        return await self.stage_helper.run_stage(
            stage="ui-flow",
            feature_title=request.feature_title,
            system_prompt=UI_FLOW_SYSTEM_PROMPT,
            user_prompt=self.build_prompt(request),
            result_model=UIFlowResult,
        )
