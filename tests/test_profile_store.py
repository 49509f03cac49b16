from core.models.profile import Profile
from core.profile_store import ProfileStore


def test_starts_with_defaults():
    store = ProfileStore()
    assert store.get_profile() == Profile()
    assert store.meal_times.breakfast == "8:00 AM"


def test_replace_is_whole_object():
    store = ProfileStore(Profile(email="old@x.com", goal="Bulk"))
    new = Profile(height="6'0\"", weight=80, goal="Cut", email="")
    store.replace_profile(new)
    # no merge: the old email is gone even though the new one is empty
    assert store.get_profile() is new
    assert store.get_profile().email == ""


def test_replace_accepts_invalid_email():
    store = ProfileStore()
    store.replace_profile(Profile(email="not-an-email"))
    assert store.get_profile().email == "not-an-email"
