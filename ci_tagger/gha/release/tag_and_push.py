#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
import os

from ci_tagger.gha.common.github_output import append_github_output
from ci_tagger.gha.release.git_tagger import GitTagger, GitTaggerError, tag_name


def _env_default(*names: str) -> str | None:
    for name in names:
        value = os.environ.get(name)
        if value:
            return value
    return None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Tag a CI-verified commit as stable and push tags to origin.")
    parser.add_argument(
        "--sha",
        default=_env_default("GIT_COMMIT", "GITHUB_SHA"),
        help="Commit to tag (defaults to $GIT_COMMIT, then $GITHUB_SHA).",
    )
    parser.add_argument(
        "--build-number",
        default=_env_default("BUILD_NUMBER", "GITHUB_RUN_NUMBER"),
        help="Build id used in the tag name (defaults to $BUILD_NUMBER, then $GITHUB_RUN_NUMBER).",
    )
    parser.add_argument("--output-name", default="tag", help="Output key name.")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        GitTagger().tag_and_push(args.sha, args.build_number)
    except (ValueError, GitTaggerError) as exc:
        raise SystemExit(str(exc)) from exc

    append_github_output(args.output_name, tag_name(args.build_number))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
