from fastapi import Depends

from src.app.models.schemas.feature_request_schema import (
    FeatureRequest,
    UIFlowRequest,
    UserStoryRequest,
)
from src.app.usecases.stage_usecases.analysis_usecase import AnalysisUseCase
from src.app.usecases.stage_usecases.solution_usecase import SolutionUseCase
from src.app.usecases.stage_usecases.ui_flow_usecase import UIFlowUseCase
from src.app.usecases.stage_usecases.user_story_usecase import UserStoryUseCase


class AnalysisController:
    def __init__(self, analysis_usecase: AnalysisUseCase = Depends(AnalysisUseCase)):
        self.analysis_usecase = analysis_usecase

    async def analyze(self, feature_request: FeatureRequest):
        return await self.analysis_usecase.execute(feature_request)


class SolutionController:
    def __init__(self, solution_usecase: SolutionUseCase = Depends(SolutionUseCase)):
        self.solution_usecase = solution_usecase

    async def solution(self, feature_request: FeatureRequest):
        return await self.solution_usecase.execute(feature_request)


class UIFlowController:
    def __init__(self, ui_flow_usecase: UIFlowUseCase = Depends(UIFlowUseCase)):
        self.ui_flow_usecase = ui_flow_usecase

    async def ui_flow(self, ui_flow_request: UIFlowRequest):
        return await self.ui_flow_usecase.execute(ui_flow_request)


class UserStoryController:
    def __init__(
        self, user_story_usecase: UserStoryUseCase = Depends(UserStoryUseCase)
    ):
        self.user_story_usecase = user_story_usecase

    async def user_story(self, user_story_request: UserStoryRequest):
        return await self.user_story_usecase.execute(user_story_request)
