import pytest
from pydantic import ValidationError

from scrapedo.types import ScrapeOptions
from scrapedo.utils.http_client import HttpClient
from scrapedo.utils.validation import apply_screenshot_rules, build_scrape_options, build_screenshot_options
from scrapedo.methods.scrape import _prepare_scrape_request


class TestScrapeOptionsValidation:
    """Unit tests for the single validation pass over a scrape request."""

    def test_url_is_stripped(self):
        options = build_scrape_options("  https://example.com  ")
        assert options.url == "https://example.com"

    def test_empty_url_validation(self):
        with pytest.raises(ValueError, match="URL cannot be empty"):
            build_scrape_options("")

    def test_whitespace_url_validation(self):
        with pytest.raises(ValueError, match="URL cannot be empty"):
            build_scrape_options("   ")

    def test_relative_url_rejected(self):
        with pytest.raises(ValidationError):
            ScrapeOptions(url="/just/a/path")

    def test_session_id_range(self):
        assert ScrapeOptions(url="https://example.com", session_id=1_000_000).session_id == 1_000_000
        with pytest.raises(ValidationError):
            ScrapeOptions(url="https://example.com", session_id=1_000_001)
        with pytest.raises(ValidationError):
            ScrapeOptions(url="https://example.com", session_id=-1)

    def test_timeout_ranges(self):
        with pytest.raises(ValidationError):
            ScrapeOptions(url="https://example.com", timeout=4999)
        with pytest.raises(ValidationError):
            ScrapeOptions(url="https://example.com", timeout=120001)
        with pytest.raises(ValidationError):
            ScrapeOptions(url="https://example.com", retry_timeout=55001)

    def test_enum_fields(self):
        with pytest.raises(ValidationError):
            ScrapeOptions(url="https://example.com", output="html")
        with pytest.raises(ValidationError):
            ScrapeOptions(url="https://example.com", method="PATCH")

    def test_unknown_option_rejected(self):
        with pytest.raises(ValidationError):
            build_scrape_options("https://example.com", not_a_real_option=True)

    def test_none_values_are_unset(self):
        options = build_scrape_options("https://example.com", render=None, timeout=None)
        assert options.render is None
        assert options.timeout is None

    def test_only_one_screenshot_variant(self):
        with pytest.raises(ValidationError, match="Only one of"):
            ScrapeOptions(url="https://example.com", screen_shot=True, full_screen_shot=True)

    def test_play_with_browser_excludes_screenshots(self):
        with pytest.raises(ValidationError, match="play_with_browser"):
            ScrapeOptions(
                url="https://example.com",
                particular_screen_shot="#main",
                play_with_browser=[{"Action": "Click", "Selector": "#b"}],
            )

    def test_play_with_browser_alone_is_valid(self):
        options = ScrapeOptions(url="https://example.com", play_with_browser='[{"Action":"Wait","Timeout":500}]')
        assert options.play_with_browser.startswith("[")


class TestScreenshotRules:
    def test_screenshot_forces_render_and_json(self):
        options = apply_screenshot_rules(ScrapeOptions(url="https://example.com", screen_shot=True))
        assert options.render is True
        assert options.return_json is True
        assert options.block_resources is False

    def test_explicit_block_resources_kept(self):
        options = apply_screenshot_rules(
            ScrapeOptions(url="https://example.com", full_screen_shot=True, block_resources=True)
        )
        assert options.block_resources is True

    def test_no_screenshot_no_change(self):
        original = ScrapeOptions(url="https://example.com")
        assert apply_screenshot_rules(original) is original

    def test_build_screenshot_options_viewport(self):
        options = build_screenshot_options("https://example.com")
        assert options.screen_shot is True
        assert options.full_screen_shot is None
        assert options.particular_screen_shot is None

    def test_build_screenshot_options_full_page(self):
        options = build_screenshot_options("https://example.com", full_page=True, geo_code="de")
        assert options.full_screen_shot is True
        assert options.screen_shot is None
        assert options.geo_code == "de"

    def test_build_screenshot_options_selector(self):
        options = build_screenshot_options("https://example.com", selector="#hero")
        assert options.particular_screen_shot == "#hero"
        assert options.render is True and options.return_json is True

    def test_build_screenshot_options_always_unblocks_resources(self):
        options = build_screenshot_options("https://example.com", block_resources=True, render=False)
        assert options.block_resources is False
        assert options.render is True

    def test_full_page_and_selector_conflict(self):
        with pytest.raises(ValueError, match="either full_page or selector"):
            build_screenshot_options("https://example.com", full_page=True, selector="#hero")


class TestScrapeRequestPreparation:
    def test_uses_client_token_and_api_url(self):
        client = HttpClient(api_key="abc", api_url="http://localhost:1234")
        descriptor = _prepare_scrape_request(client, ScrapeOptions(url="https://example.com"))
        assert descriptor.url.startswith("http://localhost:1234?token=abc&url=")

    def test_proxy_mode(self):
        client = HttpClient(api_key="abc")
        descriptor = _prepare_scrape_request(client, ScrapeOptions(url="https://example.com"), use_proxy=True)
        assert descriptor.mode == "proxy"
        assert descriptor.proxy_url == "http://abc@proxy.scrape.do:8080"
