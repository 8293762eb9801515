"""Settings builder for API tests: explicit values, no .env lookup."""

from motivation_api.config import Settings

from tests.mock_gemini import TEST_API_URL


def make_settings(**overrides) -> Settings:
    values = {"gemini_api_key": "test-fake-key", "gemini_api_url": TEST_API_URL}
    values.update(overrides)
    return Settings(_env_file=None, **values)
