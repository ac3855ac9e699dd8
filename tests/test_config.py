import os

from esschema.config import FailureMode, Settings, get_settings


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.setenv("ESSCHEMA_ENV_FILE", str(tmp_path / "missing.env"))
    settings = get_settings()
    assert settings.on_failure == FailureMode.raise_error
    assert settings.elastic_host == "http://localhost:9200"
    assert settings.elastic_verify_ssl is False


def test_elastic_host_defaults():
    assert Settings(elastic_password="secret").elastic_host == "https://localhost:9200"
    assert Settings(elastic_password="secret").elastic_verify_ssl is False
    assert Settings(elastic_host="https://es.example.com:9200").elastic_verify_ssl is True
    assert Settings(elastic_host="https://es.example.com:9200", elastic_verify_ssl=False).elastic_verify_ssl is False


def test_env_file(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("ESSCHEMA_ON_FAILURE=log_warning\nESSCHEMA_ELASTIC_HOST=http://elastic:9200\n")
    monkeypatch.setenv("ESSCHEMA_ENV_FILE", str(env_file))
    try:
        settings = get_settings()
    finally:
        # load_dotenv writes to the environment directly
        os.environ.pop("ESSCHEMA_ON_FAILURE", None)
        os.environ.pop("ESSCHEMA_ELASTIC_HOST", None)
    assert settings.on_failure == FailureMode.log_warning
    assert settings.elastic_host == "http://elastic:9200"


def test_failure_mode_docs():
    assert "SchemaValidationError" in FailureMode.raise_error.__doc__
