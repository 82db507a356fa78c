"""Constants for the template fallback generator."""

from __future__ import annotations

from typing import Final


BASE_SERVINGS: Final[int] = 4
MAX_RECIPE_INGREDIENTS: Final[int] = 8
OPTIONAL_AFTER_INDEX: Final[int] = 4

DEFAULT_PREP_TIME: Final[int] = 15
DEFAULT_COOK_TIME: Final[int] = 25

PROTEIN_KEYWORDS: Final[tuple[str, ...]] = (
    "chicken",
    "beef",
    "pork",
    "lamb",
    "turkey",
    "fish",
    "salmon",
    "tuna",
    "shrimp",
    "tofu",
    "tempeh",
    "egg",
    "beans",
    "lentil",
)
ANIMAL_KEYWORDS: Final[tuple[str, ...]] = (
    "chicken",
    "beef",
    "pork",
    "lamb",
    "turkey",
    "fish",
    "salmon",
    "tuna",
    "shrimp",
    "bacon",
    "sausage",
)
DAIRY_KEYWORDS: Final[tuple[str, ...]] = (
    "milk",
    "cheese",
    "butter",
    "cream",
    "yogurt",
    "parmesan",
)
GRAIN_KEYWORDS: Final[tuple[str, ...]] = ("rice", "pasta", "bread", "noodle", "quinoa", "flour")
GLUTEN_KEYWORDS: Final[tuple[str, ...]] = ("wheat", "pasta", "bread", "flour", "noodle")
SPICY_KEYWORDS: Final[tuple[str, ...]] = ("chili", "pepper", "paprika", "cayenne", "jalapeño")

SUBSTITUTES: Final[dict[str, list[str]]] = {
    "butter": ["olive oil", "coconut oil", "margarine"],
    "milk": ["almond milk", "soy milk", "oat milk"],
    "eggs": ["flax eggs", "chia eggs", "applesauce"],
    "cheese": ["nutritional yeast", "cashew cheese", "tofu"],
    "chicken": ["tofu", "tempeh", "mushrooms", "cauliflower"],
    "beef": ["lentils", "mushrooms", "jackfruit", "beans"],
}

# (instruction, minutes)
STANDARD_STEPS: Final[tuple[tuple[str, int], ...]] = (
    ("Prepare all ingredients by washing, chopping, and measuring as needed.", 10),
    ("Heat oil in a large pan or wok over medium-high heat.", 2),
    ("Add aromatics (onions, garlic) first and cook until fragrant.", 3),
    ("Add {main} and the other main ingredients in order of cooking time required.", 8),
    ("Season generously with available spices and herbs to taste.", 2),
    ("Combine all ingredients and cook until heated through and flavors meld.", 5),
    ("Taste and adjust seasoning as needed before serving.", 1),
    ("Serve hot and enjoy your creative {cuisine} bowl with plenty of fresh garnish.", 0),
)

BEGINNER_STEPS: Final[tuple[tuple[str, int], ...]] = (
    (
        "Get all your ingredients ready and set them on the counter so cooking goes smoothly.",
        5,
    ),
    ("Heat a large pan on medium heat and add a little oil once the pan is warm.", 3),
    (
        "Add the ingredients that take longest to cook first, usually onions, then garlic, "
        "then {main}.",
        5,
    ),
    ("Cook each ingredient until it looks and smells good, stirring every minute or so.", 10),
    ("Add salt and pepper to taste. Start with a pinch of each, taste, and add more.", 2),
    ("Mix everything together gently and cook a few more minutes until heated through.", 3),
    ("Turn off the heat and serve your {cuisine} bowl while it is still warm.", 1),
)

PROTEIN_REST_STEP: Final[tuple[str, int]] = (
    "Season your protein generously and let it come to room temperature for even cooking.",
    10,
)
EXPERT_SEAR_STEP: Final[tuple[str, int]] = (
    "Sear the protein in a dry, properly heated pan and leave it until it releases naturally.",
    4,
)
EXPERT_FINISH_STEP: Final[tuple[str, int]] = (
    "Finish off the heat by mounting the sauce with cold butter for a glossy, rich texture.",
    1,
)
