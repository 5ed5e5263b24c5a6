USER_STORY_SYSTEM_PROMPT = "You are a helpful assistant specializing in product management and technical writing for restaurant POS systems."

USER_STORY_USER_PROMPT = """
You are an expert product manager and technical writer specializing in restaurant Point of Sale (POS) systems. Create comprehensive user stories with UI flows for the feature described below, considering all the analysis data provided. Return the response in the following JSON format:

{{
  "feature": {{
    "title": "...",
    "description": "..."
  }},
  "userStories": [
    {{
      "asA": "...",
      "iWant": "...",
      "soThat": "...",
      "acceptanceCriteria": ["..."]
    }}
  ],
  "uiFlows": [
    {{
      "flowName": "...",
      "steps": ["..."],
      "screens": ["..."]
    }}
  ],
  "technicalRequirements": {{
    "frontend": ["..."],
    "backend": ["..."],
    "database": ["..."],
    "integrations": ["..."]
  }},
  "testingScenarios": ["..."],
  "successMetrics": ["..."]
}}

Feature Title: {feature_title}
Feature Description: {feature_description}
Solution Data: {solution_data}
UI Flow Data: {ui_flow_data}

Focus on:
1. Creating clear, actionable user stories following the "As a... I want to... So that..." format
2. Detailed acceptance criteria that can be used for testing
3. Multiple UI flows covering different user scenarios
4. Comprehensive technical requirements for implementation
5. Testing scenarios that ensure quality
6. Success metrics to measure the feature's impact
"""
