"""Application constants.

Contains handle rules, the built-in content filter word list, and the
canned data served by the mock profile lookup.
"""

# ---------------------------------------------------------------------------
# Handles
# ---------------------------------------------------------------------------
HANDLE_MAX_LENGTH: int = 30
HANDLE_PATTERN: str = r"^[a-zA-Z0-9._]+$"
INSTAGRAM_BASE_URL: str = "https://instagram.com"
BIO_MAX_LENGTH: int = 200

# ---------------------------------------------------------------------------
# Directory listing
# ---------------------------------------------------------------------------
DEFAULT_PAGE_SIZE: int = 8
MAX_PAGE_SIZE: int = 100

# ---------------------------------------------------------------------------
# Admin session
# Key under which clients persist the session marker (cookie / storage).
# ---------------------------------------------------------------------------
SESSION_COOKIE_NAME: str = "adminUser"

# ---------------------------------------------------------------------------
# Content filter
# Matched as case-insensitive substrings against handle and bio.
# ---------------------------------------------------------------------------
BLOCKED_WORDS: tuple[str, ...] = ("spam", "fake", "scam", "bot")

# ---------------------------------------------------------------------------
# Mock profile lookup
# ---------------------------------------------------------------------------
_UNSPLASH = "https://images.unsplash.com"
_AVATAR_QUERY = "?w=150&h=150&fit=crop&crop=face"

MOCK_PROFILES: dict[str, dict[str, str]] = {
    "photography_lover": {
        "profile_image": f"{_UNSPLASH}/photo-1494790108755-2616b612b5bc{_AVATAR_QUERY}",
        "bio": "Capturing life's beautiful moments through my lens 📸 "
               "Travel enthusiast and coffee addict ☕",
    },
    "foodie_adventures": {
        "profile_image": f"{_UNSPLASH}/photo-1507003211169-0a1dd7228f2d{_AVATAR_QUERY}",
        "bio": "Food blogger sharing culinary adventures around the world 🍕🍜 "
               "Chef by day, foodie by night",
    },
    "fitness_journey": {
        "profile_image": f"{_UNSPLASH}/photo-1438761681033-6461ffad8d80{_AVATAR_QUERY}",
        "bio": "Personal trainer helping you achieve your fitness goals 💪 "
               "Yoga instructor | Wellness advocate",
    },
    "art_creator": {
        "profile_image": f"{_UNSPLASH}/photo-1472099645785-5658abf4ff4e{_AVATAR_QUERY}",
        "bio": "Digital artist creating vibrant illustrations and designs 🎨 "
               "Commission work available",
    },
    "travel_wanderer": {
        "profile_image": f"{_UNSPLASH}/photo-1544005313-94ddf0286df2{_AVATAR_QUERY}",
        "bio": "Exploring the world one destination at a time ✈️ "
               "Travel tips and hidden gems",
    },
    "music_producer": {
        "profile_image": f"{_UNSPLASH}/photo-1500648767791-00dcc994a43e{_AVATAR_QUERY}",
        "bio": "Music producer and DJ spinning beats that move your soul 🎵 "
               "Available for collaborations",
    },
}

FALLBACK_PROFILE_IMAGES: list[str] = [
    f"{_UNSPLASH}/photo-1535713875002-d1d0cf377fde{_AVATAR_QUERY}",
    f"{_UNSPLASH}/photo-1527980965255-d3b416303d12{_AVATAR_QUERY}",
    f"{_UNSPLASH}/photo-1524504388940-b1c1722653e1{_AVATAR_QUERY}",
    f"{_UNSPLASH}/photo-1506794778202-cad84cf45f1d{_AVATAR_QUERY}",
    f"{_UNSPLASH}/photo-1557053910-d9eadeed1c58{_AVATAR_QUERY}",
]

FALLBACK_BIOS: list[str] = [
    "Creative soul sharing my journey ✨ Life is beautiful",
    "Living my best life 🌟 Follow for daily inspiration",
    "Entrepreneur | Dreamer | Achiever 💫 Making things happen",
    "Passionate about life and everything in it 🎯 Stay positive",
    "Creating content that matters 📱 Join the community",
]
