# tests/conftest.py
import pytest


@pytest.fixture(autouse=True)
def clean_truthtable_env(monkeypatch):
    """Keep TRUTHTABLE_* variables from a developer's .env out of the tests."""
    monkeypatch.delenv("TRUTHTABLE_CONFIG", raising=False)
    monkeypatch.delenv("TRUTHTABLE_LOG_LEVEL", raising=False)
    # cli.main() loads .env itself; stop it from restoring the cleared variables
    monkeypatch.setattr("proplogic.cli.load_dotenv", lambda *args, **kwargs: False)


@pytest.fixture
def write_config(tmp_path):
    """Write a YAML config file and return its path."""
    def _write(text, name="truthtable.yaml"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
