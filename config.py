# config.py
import os
import re
from pathlib import Path
from typing import Mapping, Optional

from models import ReviewConfig

DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_MAX_LINES = 1200
DEFAULT_REQUEST_TIMEOUT = 60.0
DEFAULT_RISKY_EXTS = (
    "js,ts,tsx,jsx,py,go,rb,php,java,kt,cs,rs,swift,c,cc,cpp,h,sql,sh,ps1,"
    "yml,yaml,json,html,htm,css,scss,vue,mdx"
)
DEFAULT_SYSTEM_PROMPT = (
    "You are a senior Application Security engineer. "
    "Perform a precise secure code review on the provided diffs."
)
PROMPT_FILE = "prompt.txt"
LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_positive_int(value: Optional[str], default: int) -> int:
    # leading digits only, so "12abc" and "12.5" both read as 12
    match = LEADING_INT.match(value or "")
    if match is None:
        return default
    number = int(match.group(1))
    return number if number > 0 else default


def _parse_timeout(value: Optional[str], default: float) -> float:
    try:
        timeout = float(str(value).strip())
    except (TypeError, ValueError):
        return default
    return timeout if timeout > 0 else default


def parse_risky_exts(raw: str) -> frozenset:
    return frozenset(part.strip().lower() for part in raw.split(","))


def read_system_prompt(cwd: Optional[Path] = None) -> str:
    """
    Return the contents of prompt.txt in the working directory, verbatim,
    or the built-in reviewer prompt when the file does not exist.
    """
    path = Path(cwd or Path.cwd()) / PROMPT_FILE
    if path.is_file():
        # bytes, so CRLF endings survive; undecodable bytes become U+FFFD
        return path.read_bytes().decode("utf-8", errors="replace")
    return DEFAULT_SYSTEM_PROMPT


def load_config(environ: Optional[Mapping[str, str]] = None, cwd: Optional[Path] = None) -> ReviewConfig:
    env = os.environ if environ is None else environ

    return ReviewConfig(
        api_key=env.get("OPENAI_API_KEY") or "",
        base_url=(env.get("OPENAI_BASE_URL") or DEFAULT_BASE_URL).rstrip("/"),
        model=env.get("MODEL") or DEFAULT_MODEL,
        max_lines=_parse_positive_int(env.get("MAX_LINES"), DEFAULT_MAX_LINES),
        strict=(env.get("PRECOMMIT_STRICT") or "0") == "1",
        risky_exts=parse_risky_exts(env.get("RISKY_EXTS") or DEFAULT_RISKY_EXTS),
        system_prompt=read_system_prompt(cwd),
        request_timeout=_parse_timeout(env.get("REQUEST_TIMEOUT"), DEFAULT_REQUEST_TIMEOUT),
        log_level=(env.get("LOG_LEVEL") or "WARNING").upper(),
    )
