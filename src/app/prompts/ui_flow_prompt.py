UI_FLOW_SYSTEM_PROMPT = "You are a helpful assistant specializing in UI/UX design for restaurant POS systems and Figma design specifications."

UI_FLOW_USER_PROMPT = """
You are an expert UI/UX designer specializing in restaurant Point of Sale (POS) systems and Figma design. Create a comprehensive UI flow design for the feature described below, considering the solution data provided. Return the response in the following JSON format:

{{
  "feature": {{
    "title": "...",
    "description": "..."
  }},
  "designOverview": {{
    "concept": "...",
    "userJourney": ["..."],
    "keyScreens": ["..."]
  }},
  "responsiveDesign": {{
    "mobile": ["..."],
    "tablet": ["..."],
    "desktop": ["..."]
  }},
  "figmaSpecs": {{
    "colors": ["..."],
    "typography": ["..."],
    "components": ["..."],
    "interactions": ["..."]
  }},
  "accessibility": ["..."],
  "implementationNotes": ["..."]
}}

Feature Title: {feature_title}
Feature Description: {feature_description}
Solution Data: {solution_data}

Focus on:
1. Creating a user-friendly interface that fits Applova's existing design system
2. Responsive design considerations for mobile, tablet, and desktop
3. Accessibility features and best practices
4. Figma design specifications including colors, typography, and components
5. User interaction patterns and flows
6. Implementation notes for developers
"""
