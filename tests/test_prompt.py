from core.models.profile import MealTimePreferences, Profile
from core.prompt import build_prompt


def test_prompt_is_fixed_format():
    prompt = build_prompt(
        Profile(weight=67, goal="Shred", email="a@b.com"), MealTimePreferences()
    )
    assert prompt == (
        "Generate today's meal plan for a 67kg male focused on Shred. "
        "Email: a@b.com. "
        "Preferred meal times: Breakfast 8:00 AM, Mid-morning 11:00 AM, "
        "Lunch 1:00 PM, Evening 5:00 PM, Dinner 8:00 PM. "
        "I prefer easy-prep Indian non-veg options like eggs, chicken, paneer, fish. "
        "Minimal cooking skills."
    )


def test_prompt_ignores_height():
    a = build_prompt(Profile(height="5'7\"", email="a@b.com"), MealTimePreferences())
    b = build_prompt(Profile(height="6'2\"", email="a@b.com"), MealTimePreferences())
    assert a == b
