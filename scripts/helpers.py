import json
import logging
import re

_LOG = logging.getLogger(__name__)

_FENCED = re.compile(r"```(?:json)?\s*({[\s\S]*?})\s*```")


def extract_clean_json(raw: str | dict | None) -> dict:
    """
    Pull a JSON object out of LLM text.

    Accepts a dict (returned as-is), a fenced ```json block, or bare JSON.
    Returns {} when nothing decodable is found.
    """
    if isinstance(raw, dict):
        return raw
    if not raw:
        return {}
    match = _FENCED.search(raw)
    json_str = match.group(1) if match else raw.strip()
    try:
        data = json.loads(json_str)
    except ValueError as e:
        _LOG.warning("failed to extract JSON: %s", e)
        return {}
    return data if isinstance(data, dict) else {}
