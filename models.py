from enum import Enum
from typing import FrozenSet, Optional

from pydantic import BaseModel, ConfigDict


class ReviewConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    api_key: str = ""
    base_url: str = "https://api.openai.com/v1"
    model: str = "gpt-4o-mini"
    max_lines: int = 1200
    strict: bool = False
    risky_exts: FrozenSet[str] = frozenset()
    system_prompt: str = ""
    request_timeout: float = 60.0
    log_level: str = "WARNING"


class ChatMessage(BaseModel):
    role: str = "assistant"
    content: Optional[str] = None


class ChatChoice(BaseModel):
    message: ChatMessage


class Outcome(str, Enum):
    SKIPPED_NO_DIFF = "skipped_no_diff"
    SKIPPED_NO_KEY = "skipped_no_key"
    ALLOWED = "allowed"
    BLOCKED = "blocked"
    CALL_FAILED = "call_failed"


class ReviewResult(BaseModel):
    outcome: Outcome
    strict: bool = False
    text: str = ""
    error: Optional[str] = None

    @property
    def exit_code(self) -> int:
        if self.outcome == Outcome.BLOCKED:
            return 1
        if self.outcome == Outcome.CALL_FAILED and self.strict:
            return 1
        return 0
