"""User-agent sniffing for choosing between file download and web link."""

import re
from typing import Optional

from workshopcal.config.constants import MOBILE_USER_AGENT_MARKERS

MOBILE_USER_AGENT_PATTERN = re.compile(
    "|".join(re.escape(marker) for marker in MOBILE_USER_AGENT_MARKERS),
    re.IGNORECASE,
)


def is_mobile_user_agent(user_agent: Optional[str]) -> bool:
    """Return True when the user agent looks like a phone or tablet browser."""
    if not user_agent:
        return False
    return MOBILE_USER_AGENT_PATTERN.search(user_agent) is not None
