import pytest

from suite_money.config import LOCALE_ENV_VAR, set_default_locale


@pytest.fixture(autouse=True)
def default_locale(monkeypatch):
    """Pin the default locale to en_US so tests never depend on the machine's locale."""
    monkeypatch.delenv(LOCALE_ENV_VAR, raising=False)
    set_default_locale("en_US")
    yield
    set_default_locale(None)
