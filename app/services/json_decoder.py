import json
from typing import Any, NamedTuple, Optional

BRACKET_PAIRS = (("{", "}"), ("[", "]"))


class DecodedJSON(NamedTuple):
    ok: bool
    value: Any = None

    @classmethod
    def absent(cls) -> "DecodedJSON":
        return cls(ok=False)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def _loads_structured(text: str) -> DecodedJSON:
    try:
        # NaN/Infinity are not JSON and cannot be sent back in a response
        value = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return DecodedJSON.absent()
    if isinstance(value, (dict, list)):
        return DecodedJSON(ok=True, value=value)
    return DecodedJSON.absent()


def first_bracketed_block(text: str) -> Optional[str]:
    """
    Leftmost "{" or "[" through the last closing bracket of the same kind.

    Greedy, brackets are not balanced. Same span as
    ``re.search(r"(\\{[\\s\\S]*\\}|\\[[\\s\\S]*\\])", text)`` but linear on
    long unterminated input.
    """
    best = None
    for opening, closing in BRACKET_PAIRS:
        start = text.find(opening)
        end = text.rfind(closing)
        if start == -1 or end <= start:
            continue
        if best is None or start < best[0]:
            best = (start, end)
    if best is None:
        return None
    return text[best[0] : best[1] + 1]


def decode_json(raw_text: Optional[str]) -> DecodedJSON:
    """
    Best-effort JSON extraction from a Gemini reply.

    The whole reply is parsed first. When that fails (prose around the
    payload, ```json fences, trailing remarks), the first bracketed block is
    cut out and parsed instead. Only objects and arrays count as a result.
    """
    if not isinstance(raw_text, str):
        return DecodedJSON.absent()

    decoded = _loads_structured(raw_text)
    if decoded.ok:
        return decoded

    block = first_bracketed_block(raw_text)
    if block is None:
        return DecodedJSON.absent()
    return _loads_structured(block)
