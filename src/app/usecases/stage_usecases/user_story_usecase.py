from fastapi import Depends

from src.app.models.schemas.feature_request_schema import UserStoryRequest
from src.app.models.schemas.stage_result_schema import UserStoryResult
from src.app.prompts.user_story_prompt import (
    USER_STORY_SYSTEM_PROMPT,
    USER_STORY_USER_PROMPT,
)
from src.app.usecases.stage_usecases.stage_helper import (
    StageHelper,
    normalize_user_story_payload,
    serialize_stage_data,
)


class UserStoryUseCase:
    def __init__(self, stage_helper: StageHelper = Depends(StageHelper)):
        self.stage_helper = stage_helper

    def build_prompt(self, request: UserStoryRequest) -> str:
        return USER_STORY_USER_PROMPT.format(
            feature_title=request.feature_title,
            feature_description=request.feature_description,
            solution_data=serialize_stage_data(request.solution_data),
            ui_flow_data=serialize_stage_data(request.ui_flow_data),
        )

    async def execute(self, request: UserStoryRequest) -> dict:
        return await self.stage_helper.run_stage(
            stage="user-story",
            feature_title=request.feature_title,
            system_prompt=USER_STORY_SYSTEM_PROMPT,
            user_prompt=self.build_prompt(request),
            result_model=UserStoryResult,
            normalizer=normalize_user_story_payload,
        )
