from media_relay.utils.http_headers import (
    DEFAULT_RANGE,
    REFERER_INSTAGRAM,
    REFERER_TIKTOK,
    REFERER_YOUTUBE,
    select_referer,
    video_fetch_headers,
)
from media_relay.utils.url import safe_url_for_log


class TestSelectReferer:
    def test_tiktok(self):
        assert select_referer("https://v19.tiktokcdn-us.com/abc.mp4") == REFERER_TIKTOK

    def test_musically(self):
        assert select_referer("https://musical.ly/v/123") == REFERER_TIKTOK

    def test_instagram(self):
        assert select_referer("https://instagram.fxyz1-1.fna.fbcdn.net/v.mp4") == REFERER_INSTAGRAM

    def test_youtube(self):
        assert select_referer("https://rr3---sn-abc.googlevideo.com/videoplayback") == REFERER_YOUTUBE

    def test_unknown_host_falls_back_to_youtube(self):
        assert select_referer("https://media.example.org/clip.mp4") == REFERER_YOUTUBE

    def test_tiktok_wins_over_instagram(self):
        assert select_referer("https://tiktok.example/?from=instagram") == REFERER_TIKTOK


class TestVideoFetchHeaders:
    def test_browser_headers(self):
        headers = video_fetch_headers("https://media.example.org/clip.mp4")
        assert headers["Accept"] == "*/*"
        assert headers["Sec-Fetch-Dest"] == "video"
        assert headers["Sec-Fetch-Mode"] == "no-cors"
        assert headers["Sec-Fetch-Site"] == "cross-site"
        assert "Range" not in headers

    def test_range_ignored_for_non_youtube(self):
        headers = video_fetch_headers("https://media.example.org/clip.mp4", "bytes=5-")
        assert "Range" not in headers

    def test_range_propagated_for_googlevideo(self):
        headers = video_fetch_headers("https://rr1.googlevideo.com/videoplayback", "bytes=5-")
        assert headers["Range"] == "bytes=5-"

    def test_default_range_for_youtube(self):
        headers = video_fetch_headers("https://www.youtube.com/watch?v=abc")
        assert headers["Range"] == DEFAULT_RANGE


class TestSafeUrlForLog:
    def test_query_is_dropped(self):
        assert safe_url_for_log("https://cdn.example.com/v.mp4?sig=secret") == "https://cdn.example.com/v.mp4?..."

    def test_long_url_is_truncated(self):
        url = "https://cdn.example.com/" + "a" * 300
        assert safe_url_for_log(url) == url[:100] + "..."

    def test_not_a_url(self):
        assert safe_url_for_log("just text") == "just text"
