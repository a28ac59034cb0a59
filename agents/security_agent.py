from typing import List, Optional

import httpx

from agents.llm_client import call_chat_completion
from models import ReviewConfig

USER_TEMPLATE = """Unified diffs (staged, changed hunks only). Between markers.
>>> BEGIN_PATCHES
{diff}
<<< END_PATCHES"""


def build_messages(system_prompt: str, diff: str) -> List[dict]:
    return [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": USER_TEMPLATE.format(diff=diff)},
    ]


async def security_agent(config: ReviewConfig, diff: str,
                         transport: Optional[httpx.AsyncBaseTransport] = None) -> str:
    return await call_chat_completion(config, build_messages(config.system_prompt, diff),
                                      transport=transport)
