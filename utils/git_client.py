# utils/git_client.py

import logging
import subprocess

from errors import DiffCollectionError

logger = logging.getLogger(__name__)

# staged changes only: added, copied, modified, renamed
STAGED_DIFF_CMD = ["git", "diff", "--cached", "--unified=3", "--diff-filter=ACMR"]


def read_staged_diff() -> str:
    """
    Return the unified diff of the index against HEAD as text.
    Any git failure is raised as DiffCollectionError.
    """
    logger.debug("Running %s", " ".join(STAGED_DIFF_CMD))
    try:
        proc = subprocess.run(
            STAGED_DIFF_CMD,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=True,
        )
    except FileNotFoundError as e:
        raise DiffCollectionError(f"git executable not found: {e}") from e
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise DiffCollectionError(f"git diff exited with status {e.returncode}: {stderr}") from e

    return proc.stdout
