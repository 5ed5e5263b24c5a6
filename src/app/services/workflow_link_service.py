import json
from typing import Any, Dict, Optional
from urllib.parse import parse_qs, urlencode

from src.app.models.schemas.workflow_link_schema import (
    NextStageLinkRequest,
    StageLinkParams,
    WorkflowStage,
)
from src.app.utils.custom_exceptions import WorkflowLinkError


class WorkflowLinkService:
    """Builds and reads the query strings that hand a feature from one stage page to the next."""

    NEXT_STAGE_PATHS = {
        WorkflowStage.ANALYSIS: "/solution",
        WorkflowStage.SOLUTION: "/ui-flow",
        WorkflowStage.UI_FLOW: "/user-story",
    }

    def build_next_stage_link(self, request: NextStageLinkRequest) -> Dict[str, str]:
        path = self.NEXT_STAGE_PATHS.get(request.stage)
        if path is None:
            raise WorkflowLinkError(
                f"'{request.stage.value}' is the last stage of the workflow"
            )

        params = {
            "title": request.feature_title,
            "description": request.feature_description,
        }
        if request.stage in (WorkflowStage.SOLUTION, WorkflowStage.UI_FLOW):
            params["solution"] = self._stringify(
                request.solution_data, "solutionData"
            )
        if request.stage == WorkflowStage.UI_FLOW:
            params["uiFlow"] = self._stringify(request.ui_flow_data, "uiFlowData")

        query = urlencode(params)
        return {"path": path, "query": query, "url": f"{path}?{query}"}

    def parse_stage_link_params(self, query: str) -> StageLinkParams:
        values = {
            key: items[0]
            for key, items in parse_qs(query, keep_blank_values=True).items()
        }

        return StageLinkParams(
            title=values.get("title"),
            description=values.get("description"),
            solution=self._load(values.get("solution"), "solution"),
            ui_flow=self._load(values.get("uiFlow"), "uiFlow"),
        )

    @staticmethod
    def _stringify(stage_data: Optional[Dict[str, Any]], field_name: str) -> str:
        if stage_data is None:
            raise WorkflowLinkError(f"{field_name} is required for this stage")
        # Compact form, as produced by JSON.stringify in the browser.
        return json.dumps(stage_data, separators=(",", ":"), ensure_ascii=False)

    @staticmethod
    def _load(raw: Optional[str], param_name: str) -> Optional[Dict[str, Any]]:
        if raw is None:
            return None
        try:
            value = json.loads(raw)
        except json.JSONDecodeError as e:
            raise WorkflowLinkError(
                f"Query parameter '{param_name}' is not valid JSON: {e}"
            ) from e
        if not isinstance(value, dict):
            raise WorkflowLinkError(
                f"Query parameter '{param_name}' must be a JSON object"
            )
        return value
