"""
Side tables for food and alcohol interactions.
"""

FOOD_INTERACTIONS = {
    "warfarin": ["Grapefruit", "Leafy greens"],
    "aspirin": ["Alcohol"],
    "simvastatin": ["Grapefruit"],
    "amiodarone": ["Grapefruit"],
    "levothyroxine": ["High-fat foods", "Coffee"],
}

ALCOHOL_INTERACTIONS = frozenset({
    "aspirin",
    "ibuprofen",
    "lisinopril",
    "metoprolol",
    "metformin",
})
