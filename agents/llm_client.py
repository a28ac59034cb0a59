# agents/llm_client.py
import logging
from typing import List, Optional

import httpx
from pydantic import ValidationError

from errors import ReviewerError
from models import ChatChoice, ReviewConfig

logger = logging.getLogger(__name__)

TEMPERATURE = 0.2
MAX_TOKENS = 800


def build_request_body(config: ReviewConfig, messages: List[dict]) -> dict:
    return {
        "model": config.model,
        "temperature": TEMPERATURE,
        "max_tokens": MAX_TOKENS,
        "messages": messages,
    }


def extract_content(payload) -> str:
    """
    Return choices[0].message.content, stripped. A body without that shape
    is treated as an empty review. Only the first choice is looked at.
    """
    choices = payload.get("choices") if isinstance(payload, dict) else None
    if not isinstance(choices, list) or not choices:
        logger.warning("Chat completion returned no choices, treating as empty review")
        return ""
    try:
        first = ChatChoice.model_validate(choices[0])
    except ValidationError as e:
        logger.warning("Unexpected chat completion payload, treating as empty review: %s", e)
        return ""
    return (first.message.content or "").strip()


async def call_chat_completion(config: ReviewConfig, messages: List[dict],
                               transport: Optional[httpx.AsyncBaseTransport] = None) -> str:
    """
    POST one request to {base_url}/chat/completions and return the reply text.
    Transport failures, non-2xx statuses and non-JSON bodies are raised as
    ReviewerError.
    """
    url = f"{config.base_url}/chat/completions"
    headers = {
        "Authorization": f"Bearer {config.api_key}",
        "Content-Type": "application/json",
    }

    logger.info("Requesting review from %s (model=%s)", url, config.model)
    try:
        async with httpx.AsyncClient(timeout=config.request_timeout, headers=headers,
                                     transport=transport) as client:
            resp = await client.post(url, json=build_request_body(config, messages))
    except httpx.HTTPError as e:
        raise ReviewerError(f"{type(e).__name__}: {e}") from e

    try:
        resp.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise ReviewerError(
            f"{resp.status_code} {resp.text}",
            status_code=resp.status_code,
            body=resp.text,
        ) from e

    try:
        payload = resp.json()
    except ValueError as e:
        raise ReviewerError(f"response is not JSON: {resp.text[:500]}", status_code=resp.status_code,
                            body=resp.text) from e
    return extract_content(payload)
