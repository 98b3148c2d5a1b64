"""Tests for settings validation."""

import pytest
from pydantic import ValidationError

from storefront.config import Settings


def test_defaults_bound_every_wait():
    settings = Settings(_env_file=None)
    assert settings.DB_POOL_TIMEOUT > 0
    assert settings.DB_STATEMENT_TIMEOUT_MS > 0
    assert settings.DB_MAX_OVERFLOW == 0


@pytest.mark.parametrize("field", ["DB_POOL_SIZE", "DB_POOL_TIMEOUT", "DB_STATEMENT_TIMEOUT_MS"])
def test_non_positive_values_rejected(field):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **{field: 0})


def test_negative_overflow_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, DB_MAX_OVERFLOW=-1)


def test_is_sqlite():
    assert Settings(_env_file=None, DATABASE_URL="sqlite:///:memory:").is_sqlite
    assert not Settings(_env_file=None, DATABASE_URL="postgresql://u:p@h/db").is_sqlite
