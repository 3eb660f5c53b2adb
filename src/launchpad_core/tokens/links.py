import logging
import re
from urllib.parse import urlparse

from launchpad_core.common.model import LinkValidation

logger = logging.getLogger(__name__)

PORTAL_HOST = "portal.intuition.systems"
ATOM_URL_PREFIX = f"https://{PORTAL_HOST}/explore/atom/"

_ATOM_PATH_PREFIX = re.compile(r"^/explore/atom/(0x[a-fA-F0-9]+)")
_ATOM_PATH_EXACT = re.compile(r"^/explore/atom/(0x[a-fA-F0-9]{64})$")


def normalize_intuition_link(link: str) -> str:
    """
    Reduce a portal atom link to https://portal.intuition.systems/explore/atom/<hash>,
    dropping any trailing path, query or fragment. Returns "" when the link is
    empty or not an atom link.
    """
    if not link or not link.strip():
        return ""

    parsed = urlparse(link.strip())
    if not parsed.scheme or not parsed.netloc:
        logger.warning("Cannot normalize link without scheme and host: %s", link)
        return ""

    match = _ATOM_PATH_PREFIX.match(parsed.path)
    if not match:
        logger.warning("Link is not an Intuition atom link: %s", link)
        return ""

    return f"{ATOM_URL_PREFIX}{match.group(1)}"


def validate_intuition_link(link: str) -> LinkValidation:
    """
    Validate the optional Intuition link entered when creating a token.
    An empty link is valid and normalizes to "".
    """
    if not link or not link.strip():
        return LinkValidation(valid=True, normalized="")

    if not link.startswith("https://"):
        return LinkValidation(valid=False, error='Link must start with "https://"')

    parsed = urlparse(link.strip())
    if not parsed.netloc:
        return LinkValidation(valid=False, error="Invalid URL format")

    if parsed.hostname != PORTAL_HOST:
        return LinkValidation(valid=False, error=f"Link must be from {PORTAL_HOST}")

    if not _ATOM_PATH_EXACT.match(parsed.path):
        return LinkValidation(
            valid=False,
            error=f"Link must be in format: {ATOM_URL_PREFIX}0x...",
        )

    return LinkValidation(valid=True, normalized=normalize_intuition_link(link))
