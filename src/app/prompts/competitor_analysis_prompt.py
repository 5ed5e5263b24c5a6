COMPETITOR_ANALYSIS_SYSTEM_PROMPT = "You are a helpful assistant."

COMPETITOR_ANALYSIS_USER_PROMPT = """
You are an expert in restaurant Point of Sale (POS) systems in the US. Analyze the feature described below and provide a DEEP competitor analysis, using up-to-date research and including links to sources where possible. For each competitor, provide detailed, paragraph-style explanations for the following fields, not just bullet points. Be as comprehensive as possible.

Return the analysis in the following JSON format:

{{
  "feature": {{
    "title": "...",
    "description": "..."
  }},
  "competitors": [
    {{
      "name": "...",
      "description": "...",
      "marketShare": ...,
      "rating": ...,
      "pricing": "...",
      "userExperience": "A detailed paragraph describing the overall user experience, including usability, interface, and customer feedback. Include links to reviews or testimonials if available.",
      "supportedUseCases": [
        "A detailed explanation of a supported use case, with context and examples. Include links to documentation, case studies, or product pages if available."
      ],
      "possibleLimitations": [
        "A detailed explanation of a limitation, with context, examples, and links to sources or user reports if available."
      ],
      "website": "..."
    }}
    // ... more competitors
  ],
  "marketInsights": {{
    "totalMarketSize": "...",
    "growthRate": "...",
    "keyTrends": ["..."]
  }},
  "recommendations": ["..."]
}}

Feature Title: {feature_title}
Feature Description: {feature_description}

IMPORTANT: For userExperience, supportedUseCases, and possibleLimitations, provide detailed, research-backed paragraphs and include links to sources, reviews, or documentation wherever possible. Do not just list bullet points. Be as comprehensive and specific as possible.
"""
