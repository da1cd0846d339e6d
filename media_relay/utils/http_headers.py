from typing import Dict, Optional

# Base constants
UA_CHROME = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)

LANG_US = "en-US,en;q=0.9"

REFERER_TIKTOK = "https://www.tiktok.com/"
REFERER_INSTAGRAM = "https://www.instagram.com/"
REFERER_YOUTUBE = "https://www.youtube.com/"

# Checked in order, first match wins
REFERER_RULES = (
    (("tiktok", "musical.ly"), REFERER_TIKTOK),
    (("instagram",), REFERER_INSTAGRAM),
    (("youtube", "googlevideo.com"), REFERER_YOUTUBE),
)

# Hosts that only serve media with an explicit Range header
RANGE_HOST_MARKERS = ("googlevideo.com", "youtube")
DEFAULT_RANGE = "bytes=0-"


def select_referer(url: str) -> str:
    """Pick the Referer a media CDN expects for this URL"""
    for markers, referer in REFERER_RULES:
        if any(marker in url for marker in markers):
            return referer
    return REFERER_YOUTUBE


def needs_range(url: str) -> bool:
    return any(marker in url for marker in RANGE_HOST_MARKERS)


def video_fetch_headers(url: str, incoming_range: Optional[str] = None) -> Dict[str, str]:
    """
    Browser-like headers for fetching a media URL.
    Range is only sent to hosts that require it; the caller's range is
    propagated, otherwise the whole body is requested.
    """
    headers = {
        "User-Agent": UA_CHROME,
        "Referer": select_referer(url),
        "Accept": "*/*",
        "Accept-Language": LANG_US,
        # Raw bytes, the body is relayed as-is
        "Accept-Encoding": "identity",
        "Connection": "keep-alive",
        "Sec-Fetch-Dest": "video",
        "Sec-Fetch-Mode": "no-cors",
        "Sec-Fetch-Site": "cross-site",
    }

    if needs_range(url):
        headers["Range"] = incoming_range or DEFAULT_RANGE

    return headers
