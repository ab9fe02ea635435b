# -*- coding: utf-8 -*-
"""Language model calling service (OpenAI-compatible chat/completions).

Only the transport lives here. Prompt text is built in `plans.prompts` and
responses are validated in `plans.validator`; no retries are attempted.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx

from .config import settings
from .errors import UpstreamUnavailable


def resolve_agent_settings() -> Dict[str, Any]:
    return {
        "model": settings.llm_model,
        "base_url": settings.llm_base_url,
        "api_key": settings.llm_api_key,
        "timeout": settings.llm_timeout,
        "temperature": settings.llm_temperature,
        "max_tokens": settings.llm_max_tokens,
    }


def _completions_url(base_url: str) -> str:
    base_url = base_url.rstrip("/")
    if base_url.endswith("/chat/completions"):
        return base_url
    return f"{base_url}/chat/completions"


def call_agent(messages: List[Dict[str, str]], *, json_mode: bool = True) -> Dict[str, Any]:
    cfg = resolve_agent_settings()
    payload: Dict[str, Any] = {
        "model": cfg["model"],
        "messages": messages,
        "temperature": cfg["temperature"],
        "max_tokens": cfg["max_tokens"],
        "stream": False,
    }
    if json_mode:
        payload["response_format"] = {"type": "json_object"}
    headers = {"Content-Type": "application/json"}
    if cfg["api_key"]:
        headers["Authorization"] = f"Bearer {cfg['api_key']}"

    try:
        with httpx.Client(timeout=cfg["timeout"]) as client:
            resp = client.post(_completions_url(cfg["base_url"]), headers=headers, json=payload)
            resp.raise_for_status()
            return resp.json()
    except httpx.HTTPStatusError as exc:
        raise UpstreamUnavailable(f"Model API error: {exc.response.status_code}") from exc
    except httpx.HTTPError as exc:
        raise UpstreamUnavailable(f"Model API unreachable: {exc}") from exc
    except ValueError as exc:
        raise UpstreamUnavailable(f"Model API returned non-JSON body: {exc}") from exc


def complete_text(prompt: str, *, system_prompt: Optional[str] = None, json_mode: bool = True) -> str:
    """Send one user prompt and return the raw assistant text."""
    messages: List[Dict[str, str]] = []
    if system_prompt:
        messages.append({"role": "system", "content": system_prompt})
    messages.append({"role": "user", "content": prompt})

    result = call_agent(messages, json_mode=json_mode)
    choices = result.get("choices") if isinstance(result, dict) else None
    content = ""
    if isinstance(choices, list) and choices and isinstance(choices[0], dict):
        message = choices[0].get("message") or {}
        if isinstance(message, dict):
            content = message.get("content") or ""
    if not isinstance(content, str) or not content.strip():
        raise UpstreamUnavailable("Model API returned an empty completion")
    return content
