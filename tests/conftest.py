import pytest
from unittest.mock import patch

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep a developer's .env and shell settings out of the tests."""
    for var in ('INSTITUTION_NAME', 'JUSTIFICATION_FORM_URL', 'SCHOOL_TIMEZONE'):
        monkeypatch.delenv(var, raising=False)
    with patch('src.features.absence_messages.config.load_dotenv') as mock_load:
        yield mock_load

@pytest.fixture
def student():
    """Arguments shared by the CLI tests."""
    return [
        '--full-name', 'João Silva',
        '--first-name', 'João',
        '--guardian', 'Maria',
    ]
