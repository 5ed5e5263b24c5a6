from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class FeatureRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    feature_title: str = Field(..., description="Title of the feature under analysis")
    feature_description: str = Field(
        ..., description="Description of the feature under analysis"
    )

    @field_validator("feature_title")
    def validate_feature_title(cls, v):
        if not v or not v.strip():
            raise ValueError("Feature title cannot be empty or whitespace only")
        return v.strip()

    @field_validator("feature_description")
    def validate_feature_description(cls, v):
        if not v or not v.strip():
            raise ValueError(
                "Feature description cannot be empty or whitespace only"
            )
        return v.strip()


class UIFlowRequest(FeatureRequest):
    solution_data: Dict[str, Any] = Field(
        ..., description="Payload returned by the solution stage"
    )


class UserStoryRequest(UIFlowRequest):
    ui_flow_data: Dict[str, Any] = Field(
        ..., description="Payload returned by the ui-flow stage"
    )
