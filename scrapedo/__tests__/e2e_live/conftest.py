import os
import pytest
from dotenv import load_dotenv

load_dotenv()


@pytest.fixture(scope="session")
def api_key():
    key = os.getenv("SCRAPEDO_API_KEY")
    if not key:
        pytest.skip("SCRAPEDO_API_KEY is not set")
    return key


@pytest.fixture(scope="session")
def api_url():
    return os.getenv("SCRAPEDO_API_URL") or "https://api.scrape.do"
