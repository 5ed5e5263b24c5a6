"""Canonical shapes of the JSON objects returned by each workflow stage."""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Number = Union[int, float, str]


class StageModel(BaseModel):
    # Fields beyond the canonical shape are passed through to the client.
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow"
    )


class FeatureEcho(StageModel):
    title: str = ""
    description: str = ""


class Competitor(StageModel):
    name: str
    description: str = ""
    market_share: Optional[Number] = None
    rating: Optional[Number] = None
    pricing: Optional[str] = None
    user_experience: Optional[str] = None
    supported_use_cases: List[Any] = Field(default_factory=list)
    possible_limitations: List[Any] = Field(default_factory=list)
    website: Optional[str] = None


class MarketInsights(StageModel):
    total_market_size: Optional[str] = None
    growth_rate: Optional[str] = None
    key_trends: List[Any] = Field(default_factory=list)


class AnalysisResult(StageModel):
    feature: FeatureEcho
    competitors: List[Competitor]
    market_insights: MarketInsights
    recommendations: Optional[List[Any]] = None


class ApplovaContext(StageModel):
    existing_capabilities: List[Any]
    gaps: List[Any]
    proposed_solution: str


class SolutionResult(StageModel):
    feature: FeatureEcho
    applova_context: ApplovaContext
    competitors: Optional[List[Competitor]] = None
    market_insights: Optional[MarketInsights] = None


class DesignOverview(StageModel):
    concept: str
    user_journey: List[Any] = Field(default_factory=list)
    key_screens: List[Any] = Field(default_factory=list)


class ResponsiveDesign(StageModel):
    mobile: List[Any] = Field(default_factory=list)
    tablet: List[Any] = Field(default_factory=list)
    desktop: List[Any] = Field(default_factory=list)


class FigmaSpecs(StageModel):
    colors: List[Any] = Field(default_factory=list)
    typography: List[Any] = Field(default_factory=list)
    components: List[Any] = Field(default_factory=list)
    interactions: List[Any] = Field(default_factory=list)


class UIFlowResult(StageModel):
    feature: FeatureEcho
    design_overview: DesignOverview
    responsive_design: ResponsiveDesign
    figma_specs: FigmaSpecs
    accessibility: List[Any]
    implementation_notes: List[Any]


class UserStory(StageModel):
    as_a: str
    i_want: str
    so_that: str
    acceptance_criteria: List[Any] = Field(default_factory=list)


class UIFlow(StageModel):
    flow_name: str
    steps: List[Any] = Field(default_factory=list)
    screens: List[Any] = Field(default_factory=list)


class TechnicalRequirements(StageModel):
    frontend: List[Any] = Field(default_factory=list)
    backend: List[Any] = Field(default_factory=list)
    database: List[Any] = Field(default_factory=list)
    integrations: List[Any] = Field(default_factory=list)


class UserStoryResult(StageModel):
    feature: FeatureEcho
    user_stories: List[UserStory] = Field(..., min_length=1)
    ui_flows: List[UIFlow]
    technical_requirements: TechnicalRequirements
    testing_scenarios: List[Any]
    success_metrics: List[Any]


def dump_stage_result(result: StageModel) -> Dict[str, Any]:
    return result.model_dump(by_alias=True, exclude_unset=True)
