"""Tests for request URI assembly."""
from n2yo.api.uri import BASE_URL, build_uri, mask_api_key


class TestBuildUri:

    def test_segments_and_key(self):
        assert build_uri(["a", "b"], "K") == (
            "https://api.n2yo.com/rest/v1/satellite/a/b&apiKey=K"
        )

    def test_no_segments(self):
        assert build_uri([], "K") == f"{BASE_URL}&apiKey=K"

    def test_segment_order_preserved(self):
        uri = build_uri(["radiopasses", "25544", "41.702", "-76.014", "0", "2", "40"], "KEY")
        assert uri == (
            "https://api.n2yo.com/rest/v1/satellite/"
            "radiopasses/25544/41.702/-76.014/0/2/40&apiKey=KEY"
        )

    def test_no_url_encoding(self):
        """Segments and key are embedded verbatim."""
        uri = build_uri(["a b", "c?d"], "k&y")
        assert uri.endswith("/a b/c?d&apiKey=k&y")

    def test_custom_base_url(self):
        assert build_uri(["x"], "K", base_url="http://localhost:8000") == (
            "http://localhost:8000/x&apiKey=K"
        )


class TestMaskApiKey:

    def test_masks_key(self):
        uri = build_uri(["positions", "25544"], "SECRET")
        masked = mask_api_key(uri, "SECRET")
        assert "SECRET" not in masked
        assert masked.endswith("/positions/25544&apiKey=***")

    def test_empty_key_unchanged(self):
        assert mask_api_key("http://x/a&apiKey=", "") == "http://x/a&apiKey="
