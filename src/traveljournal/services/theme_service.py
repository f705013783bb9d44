"""Theme endpoints with an in-memory cache and built-in fallbacks."""

from typing import List, Optional
from uuid import UUID

from traveljournal.models.requests import SetDraftThemeRequest
from traveljournal.models.theme import JournalTheme
from traveljournal.services.api_client import APIClient
from traveljournal.services.exceptions import APIError
from traveljournal.themes.presets import DEFAULT_THEME, SYSTEM_THEMES
from traveljournal.utils.logging import get_logger


logger = get_logger(__name__)


class ThemeService:
    """
    Fetches journal themes, falling back to the built-in presets.

    The system theme list is cached after the first successful fetch; a
    failed fetch is not cached, so the next call tries the API again.
    """

    def __init__(self, client: APIClient):
        self.client = client
        self._cached_themes: Optional[List[JournalTheme]] = None

    async def get_system_themes(self) -> List[JournalTheme]:
        """System themes from the API, or the built-in presets if the call fails."""
        if self._cached_themes is not None:
            return list(self._cached_themes)

        try:
            themes = await self.client.request(
                "GET", "/themes", response_model=List[JournalTheme]
            )
        except APIError as e:
            logger.warning("theme_fetch_failed_using_fallbacks", error=str(e))
            return list(SYSTEM_THEMES)

        logger.info("themes_cached", count=len(themes))
        self._cached_themes = themes
        return list(themes)

    async def get_theme(self, theme_id: UUID) -> JournalTheme:
        return await self.client.request(
            "GET", f"/themes/{theme_id}", response_model=JournalTheme
        )

    async def get_theme_by_slug(self, slug: str) -> JournalTheme:
        return await self.client.request(
            "GET", f"/themes/slug/{slug}", response_model=JournalTheme
        )

    async def set_draft_theme(self, trip_id: UUID, theme_id: UUID) -> None:
        """Select the theme used to preview a trip's draft."""
        await self.client.request_void(
            "PATCH",
            f"/trips/{trip_id}/draft-theme",
            body=SetDraftThemeRequest(theme_id=theme_id),
        )

    def clear_cache(self) -> None:
        self._cached_themes = None

    @property
    def default_theme(self) -> JournalTheme:
        return DEFAULT_THEME

    @property
    def fallback_themes(self) -> List[JournalTheme]:
        return list(SYSTEM_THEMES)
