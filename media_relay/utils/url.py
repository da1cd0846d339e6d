from urllib.parse import urlparse

LOG_URL_MAX = 100


def safe_url_for_log(url: str, max_length: int = LOG_URL_MAX) -> str:
    """Safe URL for logging: query string dropped, length capped"""
    try:
        parsed = urlparse(url)
        if not parsed.scheme or not parsed.netloc:
            return url[:max_length]
        base_url = f"{parsed.scheme}://{parsed.netloc}{parsed.path}"
        if parsed.query:
            base_url = f"{base_url}?..."
    except ValueError:
        return "invalid_url"

    if len(base_url) > max_length:
        return f"{base_url[:max_length]}..."
    return base_url
