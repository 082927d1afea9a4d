"""
modules/recommendation/prompts.py
----------------------------------
Prompt templates sent to Gemini.

  RECOMMENDATION_PROMPT: five destinations for one set of UserPreferences
"""

# ==========================================
# DESTINATION RECOMMENDATIONS
# ==========================================
# Header lines must stay "N. State (Place, Place, ...)"; modules/extraction
# reads the parenthesised list to put places on the map.
RECOMMENDATION_PROMPT = """
You are a travel advisor specializing in Indian tourism.
Suggest exactly 5 specific destinations in India for {place_type} places with a budget of {budget} INR to visit in {season} from {source}.

Format your response as follows:

Start with a brief introduction paragraph.

Then list 5 destinations in this format:
1. State Name (Specific places/cities/towns/villages inside parentheses)
• Special: Brief description of what makes this destination special.
• Attractions: Key attractions to visit.
• Budget Considerations: Information about costs.
• Best Season: When to visit and current conditions.
• Ideal Days: Recommended length of stay.
• Travel from {source}: How to get there.

2. Next Destination(Specific places)
...and so on.

After listing all 5 destinations, include:
• Budget Breakdown (Approximate for 7 Days): with categories like Transportation, Accommodation, Food, etc.
• Travel Tips for {season}: practical advice for travelers.

IMPORTANT: Make sure to use proper bullet points (•) and avoid using ** or <strong> tags for formatting.
"""


def build_recommendation_prompt(prefs) -> str:
    return RECOMMENDATION_PROMPT.format(
        place_type=prefs.place_type,
        budget=prefs.budget,
        season=prefs.season,
        source=prefs.source,
    )
