"""User profile domain service."""

from typing import Optional

from hourtrack.database.base import Database
from hourtrack.domain.entities import UserContext, UserProfile
from hourtrack.domain.errors import ValidationError, unsupported_language

SUPPORTED_LANGUAGES = frozenset({"da", "en"})
DEFAULT_LANGUAGE = "da"


class ProfileService:
    """Service for reading and updating the user's profile."""

    def __init__(self, db: Database, user: UserContext):
        self.db = db
        self.user = user

    def get_profile(self) -> UserProfile:
        """Get the user's profile, creating a default one if missing."""
        profile = self.db.get_user_profile(self.user.user_id)
        if profile is None:
            self.db.save_user_profile(self.user.user_id, language=DEFAULT_LANGUAGE)
            profile = self.db.get_user_profile(self.user.user_id)
        return profile

    def update_profile(
        self,
        full_name: Optional[str] = None,
        email: Optional[str] = None,
        language: Optional[str] = None,
    ) -> UserProfile:
        """Update profile fields and return the stored profile.

        An empty name or email clears the field.

        Raises:
            ValidationError: If the language is not supported
        """
        if language is not None:
            language = language.strip().lower()
            if language not in SUPPORTED_LANGUAGES:
                raise ValidationError(unsupported_language(language, SUPPORTED_LANGUAGES))
        if full_name is not None:
            full_name = full_name.strip()
        if email is not None:
            email = email.strip()

        self.db.save_user_profile(
            self.user.user_id,
            email=email,
            full_name=full_name,
            language=language,
        )
        return self.db.get_user_profile(self.user.user_id)
