"""Shared pytest fixtures."""

from collections.abc import Iterator

import pytest

from math_utils.utils.settings import reset_arithmetic_settings, reset_settings

_SETTINGS_ENV_VARS = (
    "LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_FILE_PATH",
    "MATH_INTEGER_BITS",
    "MATH_ZERO_DIVISION_POLICY",
)


@pytest.fixture(autouse=True)
def isolated_settings(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path_factory: pytest.TempPathFactory,
) -> Iterator[None]:
    """Run every test with default settings and no stray .env file."""
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))
    reset_settings()
    reset_arithmetic_settings()
    yield
    reset_settings()
    reset_arithmetic_settings()
