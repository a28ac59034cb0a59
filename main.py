import asyncio
import logging
import sys
from typing import Optional

import httpx
from dotenv import find_dotenv, load_dotenv

from agents.security_agent import security_agent
from config import load_config
from decision import decide
from diff_parser import load_patch, render_changed_lines, select_risky_files, target_path
from errors import DiffCollectionError, ReviewerError
from models import Outcome, ReviewConfig, ReviewResult
from utils.git_client import read_staged_diff

logger = logging.getLogger(__name__)

BANNER_TOP = "\n── AI Secure Review (pre-commit) ──\n"
BANNER_BOTTOM = "\n───────────────────────────────────\n"


async def run_review(config: ReviewConfig, diff_text: Optional[str] = None,
                     transport: Optional[httpx.AsyncBaseTransport] = None) -> ReviewResult:
    """
    Run one review pass over the staged changes and return its outcome.
    Nothing here exits the process; see ReviewResult.exit_code.
    """
    if diff_text is None:
        diff_text = read_staged_diff()

    files = select_risky_files(load_patch(diff_text), config.risky_exts)
    diff = render_changed_lines(files, config.max_lines)
    if not diff.strip():
        return ReviewResult(outcome=Outcome.SKIPPED_NO_DIFF, strict=config.strict)

    logger.info("Reviewing %d staged file(s): %s", len(files), ", ".join(target_path(pf) for pf in files))

    if not config.api_key:
        return ReviewResult(outcome=Outcome.SKIPPED_NO_KEY, strict=config.strict)

    try:
        text = await security_agent(config, diff, transport=transport)
    except ReviewerError as e:
        return ReviewResult(outcome=Outcome.CALL_FAILED, strict=config.strict, error=str(e))

    return ReviewResult(outcome=decide(text, config.strict), strict=config.strict, text=text)


def report(result: ReviewResult) -> None:
    if result.outcome == Outcome.SKIPPED_NO_DIFF:
        print("[pre-commit] No eligible staged changes - skipping AI review.")
    elif result.outcome == Outcome.SKIPPED_NO_KEY:
        print("[pre-commit] OPENAI_API_KEY not set - skipping AI review.")
    elif result.outcome == Outcome.CALL_FAILED:
        print(f"[pre-commit] AI call failed: {result.error}", file=sys.stderr)
    else:
        print(BANNER_TOP)
        print(result.text)
        print(BANNER_BOTTOM)
        if result.outcome == Outcome.BLOCKED:
            print("❌ High-risk finding(s) reported. Commit blocked (PRECOMMIT_STRICT=1).",
                  file=sys.stderr)


def main() -> int:
    load_dotenv(find_dotenv(usecwd=True))
    config = load_config()

    level = logging.getLevelName(config.log_level)
    logging.basicConfig(
        level=level if isinstance(level, int) else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        result = asyncio.run(run_review(config))
    except DiffCollectionError as e:
        print(f"[pre-commit] ERROR: {e}", file=sys.stderr)
        return 1

    report(result)
    return result.exit_code


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
