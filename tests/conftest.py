from __future__ import annotations

import pytest

from ci_tagger.gha.common.command_runner import CommandOutcome


class FakeRunner:
    """Records argument vectors and replays queued outcomes."""

    def __init__(self, *outcomes: CommandOutcome) -> None:
        self.calls: list[tuple[str, ...]] = []
        self._outcomes = list(outcomes)

    def __call__(self, program: str, *args: str) -> CommandOutcome:
        self.calls.append((program, *args))
        if self._outcomes:
            return self._outcomes.pop(0)
        return CommandOutcome(success=True)


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture(autouse=True)
def _clean_ci_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("GITHUB_OUTPUT", "GIT_COMMIT", "GITHUB_SHA", "BUILD_NUMBER", "GITHUB_RUN_NUMBER"):
        monkeypatch.delenv(name, raising=False)
