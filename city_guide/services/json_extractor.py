# city_guide/services/json_extractor.py

import json
import re
from typing import Any, Dict, List, Optional

# First "[" through the last "]", across newlines
ARRAY_PATTERN = re.compile(r"\[[\s\S]*\]")


def extract_json_array(text: Optional[str]) -> Optional[List[Dict[str, Any]]]:
    """
    Pull the JSON array out of free-form model output.

    Models often wrap the array in prose or ```json fences, so we take the
    widest bracketed span and parse that. Entries that are not JSON objects
    are dropped.

    Returns the list of objects, or None when the text holds no usable
    array. None is the caller's signal to substitute fallback data.
    """
    if not text:
        return None

    match = ARRAY_PATTERN.search(text)
    if match is None:
        return None

    try:
        parsed = json.loads(match.group(0))
    except (ValueError, RecursionError):
        return None

    if not isinstance(parsed, list):
        return None

    items = [item for item in parsed if isinstance(item, dict)]
    return items or None
