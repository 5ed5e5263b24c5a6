from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WorkflowStage(str, Enum):
    ANALYSIS = "analysis"
    SOLUTION = "solution"
    UI_FLOW = "ui-flow"
    USER_STORY = "user-story"


class NextStageLinkRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    stage: WorkflowStage = Field(..., description="Stage whose result was accepted")
    feature_title: str = Field(..., min_length=1)
    feature_description: str = Field(..., min_length=1)
    solution_data: Optional[Dict[str, Any]] = None
    ui_flow_data: Optional[Dict[str, Any]] = None


class StageLinkParams(BaseModel):
    """Values carried between stages in the URL query string."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: Optional[str] = None
    description: Optional[str] = None
    solution: Optional[Dict[str, Any]] = None
    ui_flow: Optional[Dict[str, Any]] = None
