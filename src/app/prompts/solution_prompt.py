SOLUTION_SYSTEM_PROMPT = "You are a helpful assistant specializing in restaurant POS systems and Applova.io integration."

SOLUTION_USER_PROMPT = """
You are a market-research specialist focused on SaaS point-of-sale (POS) platforms for merchants in the United States, and you know Applova.io's current product lineup inside and out. Your task is to analyze the feature described below in the context of Applova's existing capabilities:

1. **What Applova Already Offers:** Identify any existing Applova modules or integrations that overlap with or support this feature.
2. **Gaps & Opportunities:** Highlight functionality that Applova does not yet have but would need to build or integrate.
3. **Proposed Solution:** Suggest a practical, detailed way Applova could design or roll out this feature, based on industry best practices. Return this as a single paragraph under 'proposedSolution'.

Then, conduct a DEEP competitor analysis, using up-to-date research with source links, structured in JSON exactly as follows:

{{
  "feature": {{
    "title": "<Feature Title>",
    "description": "<Feature Description>"
  }},
  "applovaContext": {{
    "existingCapabilities": [
      // e.g. "Integrated loyalty program supporting tiered rewards"
    ],
    "gaps": [
      // e.g. "No offline-first functionality for unreliable connections"
    ],
    "proposedSolution": "A detailed, practical solution paragraph for how Applova could implement this feature."
  }},
  "competitors": [
    {{
      "name": "...",
      "description": "...",
      "marketShare": ...,
      "rating": ...,
      "pricing": "...",
      "userExperience": "A detailed paragraph describing usability, interface flow, customer reviews (with source links).",
      "supportedUseCases": [
        "A detailed, contextual use case description with examples and source links."
      ],
      "possibleLimitations": [
        "A detailed limitation analysis with context, examples, and source links."
      ],
      "website": "..."
    }}
    // ...additional competitors...
  ],
  "marketInsights": {{
    "totalMarketSize": "...",
    "growthRate": "...",
    "keyTrends": ["...", "..."]
  }}
}}

Feature Title: {feature_title}
Feature Description: {feature_description}
"""
