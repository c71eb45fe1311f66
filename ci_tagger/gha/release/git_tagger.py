from __future__ import annotations

import logging

from ci_tagger.gha.common.command_runner import CommandOutcome, CommandRunner, run

TAG_PREFIX = "stable-"
TAG_MESSAGE = "ci-tagged"
REMOTE = "origin"


class GitTaggerError(RuntimeError):
    def __init__(self, message: str, outcome: CommandOutcome) -> None:
        super().__init__(message)
        self.outcome = outcome


def tag_name(build_number: str) -> str:
    return f"{TAG_PREFIX}{build_number}"


class GitTagger:
    """Marks a CI-verified commit with an annotated ``stable-<build>`` tag.

    The tag is created locally and then every local tag is pushed to
    ``origin``. A failed push leaves the new tag in the local repository;
    nothing is rolled back.
    """

    def __init__(self, runner: CommandRunner = run, logger: logging.Logger | None = None) -> None:
        self._run = runner
        self._logger = logger or logging.getLogger(__name__)

    def tag_and_push(self, sha: str | None, build_number: str | None) -> None:
        if not sha:
            raise ValueError("sha is required")
        if not build_number:
            raise ValueError("build_number is required")

        tag = tag_name(build_number)

        self._logger.info("Tagging %s as %s", sha, tag)
        outcome = self._run("git", "tag", "-a", tag, "-m", TAG_MESSAGE, sha)
        if not outcome.success:
            raise GitTaggerError(outcome.failure_message(f"Failed to tag {sha} as {tag}"), outcome)

        self._logger.info("Pushing tags to %s", REMOTE)
        outcome = self._run("git", "push", REMOTE, "--tags")
        if not outcome.success:
            raise GitTaggerError(outcome.failure_message("Failed to push tags"), outcome)
