"""
Shared fixtures: a fake OpenAI provider behind httpx.MockTransport and a
TestClient wired to it through FastAPI dependency overrides.
"""

import json

import httpx
import pytest
from fastapi.testclient import TestClient

from src.app.config.settings import Settings, get_settings
from src.app.services.api_service import ApiService
from src.main import app


def completion_body(content):
    return {
        "id": "chatcmpl-test",
        "choices": [
            {"index": 0, "message": {"role": "assistant", "content": content}}
        ],
        "usage": {"prompt_tokens": 10, "completion_tokens": 20, "total_tokens": 30},
    }


def fenced(payload, prose="Here is the analysis you asked for:"):
    return f"{prose}\n```json\n{json.dumps(payload, indent=2)}\n```\nLet me know if you need more."


class FakeProvider:
    """Records outgoing chat requests and answers with a canned response."""

    def __init__(self):
        self.calls = []
        self.status_code = 200
        self.content = "{}"
        self.error_text = ""

    def reply_with(self, content):
        self.status_code = 200
        self.content = content

    def reply_with_fenced_json(self, payload):
        self.reply_with(fenced(payload))

    def fail_with(self, status_code, error_text):
        self.status_code = status_code
        self.error_text = error_text

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        if self.status_code != 200:
            return httpx.Response(self.status_code, text=self.error_text)
        return httpx.Response(200, json=completion_body(self.content))

    def request_json(self, index=0):
        return json.loads(self.calls[index].content)


class MockApiService(ApiService):
    def __init__(self, provider: FakeProvider):
        super().__init__()
        self.transport = httpx.MockTransport(provider.handle)

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self.transport)


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def test_settings():
    return Settings(OPENAI_API_KEY="test-key")


@pytest.fixture
def client(provider, test_settings):
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[ApiService] = lambda: MockApiService(provider)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def feature_payload():
    return {
        "featureTitle": "Loyalty Points",
        "featureDescription": "Tiered rewards for repeat customers",
    }


@pytest.fixture
def competitor():
    return {
        "name": "Toast",
        "description": "Restaurant POS with built-in loyalty",
        "marketShare": 28,
        "rating": 4.3,
        "pricing": "$69/month",
        "userExperience": "Clean interface praised by front-of-house staff.",
        "supportedUseCases": ["Points per dollar spent"],
        "possibleLimitations": ["Loyalty is a paid add-on"],
        "website": "https://pos.toasttab.com",
    }


@pytest.fixture
def analysis_result(competitor):
    return {
        "feature": {
            "title": "Loyalty Points",
            "description": "Tiered rewards for repeat customers",
        },
        "competitors": [
            competitor,
            {**competitor, "name": "Square", "marketShare": 22},
            {**competitor, "name": "Clover", "marketShare": 15},
        ],
        "marketInsights": {
            "totalMarketSize": "$4.2B",
            "growthRate": "11% YoY",
            "keyTrends": ["Mobile-first loyalty"],
        },
        "recommendations": ["Bundle loyalty with online ordering"],
    }


@pytest.fixture
def solution_result(competitor):
    return {
        "feature": {
            "title": "Loyalty Points",
            "description": "Tiered rewards for repeat customers",
        },
        "applovaContext": {
            "existingCapabilities": ["Customer profiles"],
            "gaps": ["No points ledger"],
            "proposedSolution": "Add a points ledger keyed by customer profile.",
        },
        "competitors": [competitor],
        "marketInsights": {"totalMarketSize": "$4.2B", "keyTrends": []},
    }


@pytest.fixture
def ui_flow_result():
    return {
        "feature": {
            "title": "Loyalty Points",
            "description": "Tiered rewards for repeat customers",
        },
        "designOverview": {
            "concept": "Points balance visible at checkout",
            "userJourney": ["Look up customer", "Apply reward"],
            "keyScreens": ["Checkout", "Rewards"],
        },
        "responsiveDesign": {
            "mobile": ["Bottom sheet"],
            "tablet": ["Side panel"],
            "desktop": ["Modal"],
        },
        "figmaSpecs": {
            "colors": [{"name": "Primary", "hex": "#1D4ED8"}],
            "typography": ["Inter 16"],
            "components": ["RewardCard"],
            "interactions": ["Tap to redeem"],
        },
        "accessibility": ["WCAG AA contrast"],
        "implementationNotes": ["Reuse checkout drawer"],
    }


@pytest.fixture
def user_story_result():
    return {
        "feature": {
            "title": "Loyalty Points",
            "description": "Tiered rewards for repeat customers",
        },
        "userStories": [
            {
                "asA": "cashier",
                "iWant": "to apply a customer's reward at checkout",
                "soThat": "repeat customers feel recognised",
                "acceptanceCriteria": ["Reward reduces the order total"],
            }
        ],
        "uiFlows": [
            {"flowName": "Redeem", "steps": ["Scan"], "screens": ["Checkout"]}
        ],
        "technicalRequirements": {
            "frontend": ["RewardCard"],
            "backend": ["Points ledger API"],
            "database": ["points table"],
            "integrations": [],
        },
        "testingScenarios": ["Redeem with insufficient points"],
        "successMetrics": ["Repeat visit rate"],
    }
