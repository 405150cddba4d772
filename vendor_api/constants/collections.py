# vendor_api/constants/collections.py
"""
Blob collections that uploaded pictures are written to.
"""


class Collection:
    """Blob collection names."""
    USER_PROFILE = "user_profile"
    PROFILE_PICTURES = "profile_pictures"
    COVER_PHOTOS = "cover_photos"
    VENUE_PROFILE_PICTURES = "venue_profile_pictures"
    VENUE_COVER_PHOTOS = "venue_cover_photos"

    @classmethod
    def all_values(cls) -> list[str]:
        """Return every collection name."""
        return [
            cls.USER_PROFILE,
            cls.PROFILE_PICTURES,
            cls.COVER_PHOTOS,
            cls.VENUE_PROFILE_PICTURES,
            cls.VENUE_COVER_PHOTOS,
        ]
