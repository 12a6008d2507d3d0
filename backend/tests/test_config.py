from supercoach.core.config import Settings


def test_settings_read_dotenv_file():
    assert Settings.model_config["env_file"] == ".env"


def test_blank_gemini_key_is_unset(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "")
    assert Settings(_env_file=None).gemini_api_key is None
    monkeypatch.setenv("GEMINI_API_KEY", "null")
    assert Settings(_env_file=None).gemini_api_key is None


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "abc")
    monkeypatch.setenv("PROGRESS_MONTHS_BACK", "12")
    monkeypatch.setenv("WEIGHT_UNIT", "lb")
    s = Settings(_env_file=None)
    assert s.gemini_api_key == "abc"
    assert s.progress_months_back == 12
    assert s.weight_unit == "lb"
