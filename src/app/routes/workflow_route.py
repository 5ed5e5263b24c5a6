from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.app.controllers.workflow_controller import WorkflowController
from src.app.models.schemas.workflow_link_schema import NextStageLinkRequest
from src.app.utils.error_handler import handle_exceptions

router = APIRouter()


@router.post("/workflow/next-link")
@handle_exceptions
async def next_link_route(
    link_request: NextStageLinkRequest,
    workflow_controller: WorkflowController = Depends(WorkflowController),
):
    response_data = await workflow_controller.next_link(link_request)
    return JSONResponse(content=response_data, status_code=status.HTTP_200_OK)


@router.get("/workflow/stage-params")
@handle_exceptions
async def stage_params_route(
    request: Request,
    workflow_controller: WorkflowController = Depends(WorkflowController),
):
    response_data = await workflow_controller.stage_params(request.url.query)
    return JSONResponse(content=response_data, status_code=status.HTTP_200_OK)
