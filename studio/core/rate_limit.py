"""
Rate Limiting Configuration

Rate limiting for the public write endpoints (contact form and admin login),
which are the only routes that accept anonymous input worth abusing.

Design Decisions:
- Uses slowapi for rate limiting (lightweight, FastAPI-compatible)
- IP-based limiting
- Limits are resolved per request from RATE_LIMITS, which create_app fills
  from the Settings it was given
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from studio.core.setting import Settings, settings

# Initialize rate limiter
# Uses IP address for rate limiting
limiter = Limiter(
    key_func=get_remote_address,
    enabled=settings.RATE_LIMIT_ENABLED,
)

# Rate limit configurations per endpoint
# Format: "count/period" (e.g., "10/minute" means 10 requests per minute)
RATE_LIMITS = {
    "contact": settings.CONTACT_RATE_LIMIT,
    "login": settings.LOGIN_RATE_LIMIT,
}


def contact_rate_limit() -> str:
    return RATE_LIMITS["contact"]


def login_rate_limit() -> str:
    return RATE_LIMITS["login"]


def configure_rate_limits(app_settings: Settings) -> Limiter:
    """
    Apply an application's rate limit settings to the shared limiter.

    Counters are cleared so hits recorded under earlier limits do not carry over.

    Returns:
        The configured limiter
    """
    limiter.enabled = app_settings.RATE_LIMIT_ENABLED
    RATE_LIMITS["contact"] = app_settings.CONTACT_RATE_LIMIT
    RATE_LIMITS["login"] = app_settings.LOGIN_RATE_LIMIT
    limiter.reset()
    return limiter
