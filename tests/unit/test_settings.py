import pytest
from pydantic import ValidationError

from builder_spoof.config.settings import SpoofSettings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SPOOF_PORT", raising=False)
    settings = SpoofSettings(_env_file=None)
    assert settings.port == 9636
    assert (settings.core_package_min, settings.core_package_max) == (100, 999)
    assert (settings.user_package_min, settings.user_package_max) == (2, 10)
    assert (settings.job_min, settings.job_max) == (1, 100)
    assert (settings.version_min, settings.version_max) == (1, 10)


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SPOOF_PORT", "9000")
    monkeypatch.setenv("SPOOF_SEED", "5")
    settings = SpoofSettings(_env_file=None)
    assert settings.port == 9000
    assert settings.seed == 5


def test_inverted_bounds_are_rejected() -> None:
    with pytest.raises(ValidationError, match="job_min"):
        SpoofSettings(_env_file=None, job_min=10, job_max=2)
