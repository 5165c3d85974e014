"""
Provider contract.

Every provider is a plain function decorated with ``@provider(domain)``.
The decorated function returns a ProviderResult: the wrapped function's
return value on success, or a failure carrying a short reason when the
upstream source is unreachable or returns something unparseable.
"""

import functools
import logging
from typing import Callable
from xml.etree.ElementTree import ParseError

from sps_briefing.data_models import ProviderResult
from sps_briefing.errors import ProviderUnavailable

logger = logging.getLogger(__name__)

# Parse failures inside a provider mean the upstream shape changed
PARSE_ERRORS = (KeyError, IndexError, TypeError, ValueError, AttributeError, ParseError)


def provider(domain: str) -> Callable:
    """Wrap a fetch function in the fetch-or-null contract."""
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> ProviderResult:
            try:
                value = func(*args, **kwargs)
            except ProviderUnavailable as e:
                logger.warning(f"Provider '{domain}' unavailable: {e.reason}")
                return ProviderResult.failure(e.reason)
            except PARSE_ERRORS as e:
                logger.warning(f"Provider '{domain}' returned unparseable data: {e!r}")
                return ProviderResult.failure(f"unparseable response: {e}")
            return ProviderResult.success(value)

        wrapper.domain = domain
        return wrapper
    return decorator
