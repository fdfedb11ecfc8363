# File: /planner/observability/sentry.py | Version: 1.0 | Title: Optional Sentry initialization
import logging

from planner.core.config import Settings, settings as default_settings

log = logging.getLogger(__name__)


def init_sentry_if_configured(settings: Settings = default_settings) -> bool:
    dsn = settings.SENTRY_DSN.strip()
    if not dsn:
        log.info("Sentry disabled (no SENTRY_DSN).")
        return False

    try:
        import sentry_sdk

        sentry_sdk.init(
            dsn=dsn,
            traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
            profiles_sample_rate=settings.SENTRY_PROFILES_SAMPLE_RATE,
        )
        log.info("Sentry initialized.")
        return True
    except Exception as e:  # pragma: no cover (best-effort)
        log.warning("Sentry init failed: %s", e)
        return False
