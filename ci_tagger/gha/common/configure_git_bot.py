#!/usr/bin/env python3
from __future__ import annotations

import argparse

from ci_tagger.gha.common.command_runner import CommandRunner, run

DEFAULT_NAME = "github-actions[bot]"
DEFAULT_EMAIL = "41898282+github-actions[bot]@users.noreply.github.com"


class GitConfigError(RuntimeError):
    pass


def configure(name: str, email: str, runner: CommandRunner = run) -> None:
    """Set the committer identity that annotated tags are recorded with."""
    for key, value in (("user.name", name), ("user.email", email)):
        outcome = runner("git", "config", key, value)
        if not outcome.success:
            raise GitConfigError(outcome.failure_message(f"Failed to configure git user ({key})"))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Configure git user for GitHub Actions.")
    parser.add_argument("--name", default=DEFAULT_NAME)
    parser.add_argument("--email", default=DEFAULT_EMAIL)
    args = parser.parse_args(argv)

    try:
        configure(args.name, args.email)
    except GitConfigError as exc:
        raise SystemExit(str(exc)) from exc
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
