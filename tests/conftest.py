"""Shared pytest setup: Hypothesis profiles, fuzz gating, host-zone fixture.

Hypothesis profiles:
    dev      500 examples, random seed (default locally)
    ci       50 examples, derandomized, prints reproduction blobs (CI=true)
    verbose  100 examples with per-example output

HYPOTHESIS_PROFILE overrides the choice. Round-trip properties over every
pattern are cheap, so the dev profile runs them hard; the `fuzz` marker
(declared in pyproject.toml) is reserved for the epoch-level sweeps and is
skipped unless selected with `pytest -m fuzz`.
"""

import os
import time
from collections.abc import Iterator

import pytest
from hypothesis import Verbosity, settings

_PROFILES: dict[str, dict[str, object]] = {
    "dev": {"max_examples": 500},
    "ci": {"max_examples": 50, "derandomize": True, "print_blob": True},
    "verbose": {"max_examples": 100, "verbosity": Verbosity.verbose},
}

for _name, _options in _PROFILES.items():
    settings.register_profile(_name, **_options)  # type: ignore[arg-type]


def _profile_name() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE", "")
    if requested in _PROFILES:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_profile_name())


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip fuzz-marked tests unless the run selects them with -m."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return
    skip = pytest.mark.skip(reason="epoch sweep; run with: pytest -m fuzz")
    for item in items:
        if item.get_closest_marker("fuzz") is not None:
            item.add_marker(skip)


@pytest.fixture
def local_zone(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Pin the host zone to US Eastern via a POSIX TZ rule (no tz database).

    DST in this rule: second Sunday of March to first Sunday of November.
    """
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset not available on this platform")
    monkeypatch.setenv("TZ", "EST5EDT,M3.2.0,M11.1.0")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()
