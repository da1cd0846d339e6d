from .filename import sanitize_filename
from .http_headers import select_referer, video_fetch_headers
from .url import safe_url_for_log

__all__ = ["safe_url_for_log", "sanitize_filename", "select_referer", "video_fetch_headers"]
