from talent_intake.acquisition.base import BaseAcquisitionStrategy
from talent_intake.acquisition.http_strategy import ScrapedPageStrategy
from talent_intake.acquisition.playwright_strategy import RenderedPageStrategy
from talent_intake.acquisition.resolver import ContentResolver
from talent_intake.config.settings import Settings


class ContentResolverFactory:
    """Builds the ordered strategy list from settings."""

    @classmethod
    def create(cls, settings: Settings) -> ContentResolver:
        strategies: list[BaseAcquisitionStrategy] = []
        if settings.renderer_enabled:
            strategies.append(
                RenderedPageStrategy(
                    navigation_timeout_seconds=settings.renderer_navigation_timeout_seconds,
                    user_agent=settings.fetch_user_agent,
                )
            )
        strategies.append(
            ScrapedPageStrategy(
                user_agent=settings.fetch_user_agent,
                timeout_seconds=settings.fetch_timeout_seconds,
                selector_min_length=settings.job_selector_min_length,
            )
        )
        return ContentResolver(strategies, max_content_length=settings.max_content_length)
