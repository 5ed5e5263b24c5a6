from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.app.controllers.stage_controller import (
    AnalysisController,
    SolutionController,
    UIFlowController,
    UserStoryController,
)
from src.app.models.schemas.feature_request_schema import (
    FeatureRequest,
    UIFlowRequest,
    UserStoryRequest,
)
from src.app.utils.error_handler import handle_exceptions

router = APIRouter()


@router.post("/analyze")
@handle_exceptions
async def analyze_route(
    feature_request: FeatureRequest,
    analysis_controller: AnalysisController = Depends(AnalysisController),
):
    response_data = await analysis_controller.analyze(feature_request)
    return JSONResponse(content=response_data, status_code=status.HTTP_200_OK)


@router.post("/solution")
@handle_exceptions
async def solution_route(
    feature_request: FeatureRequest,
    solution_controller: SolutionController = Depends(SolutionController),
):
    response_data = await solution_controller.solution(feature_request)
    return JSONResponse(content=response_data, status_code=status.HTTP_200_OK)


@router.post("/ui-flow")
@handle_exceptions
async def ui_flow_route(
    ui_flow_request: UIFlowRequest,
    ui_flow_controller: UIFlowController = Depends(UIFlowController),
):
    response_data = await ui_flow_controller.ui_flow(ui_flow_request)
    return JSONResponse(content=response_data, status_code=status.HTTP_200_OK)


@router.post("/user-story")
@handle_exceptions
async def user_story_route(
    user_story_request: UserStoryRequest,
    user_story_controller: UserStoryController = Depends(UserStoryController),
):
    response_data = await user_story_controller.user_story(user_story_request)
    return JSONResponse(content=response_data, status_code=status.HTTP_200_OK)
