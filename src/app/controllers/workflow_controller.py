from fastapi import Depends

from src.app.models.schemas.workflow_link_schema import NextStageLinkRequest
from src.app.services.workflow_link_service import WorkflowLinkService


class WorkflowController:
    def __init__(
        self,
        workflow_link_service: WorkflowLinkService = Depends(WorkflowLinkService),
    ):
        self.workflow_link_service = workflow_link_service

    async def next_link(self, link_request: NextStageLinkRequest):
        return self.workflow_link_service.build_next_stage_link(link_request)

    async def stage_params(self, query: str):
        params = self.workflow_link_service.parse_stage_link_params(query)
        return params.model_dump(by_alias=True)
