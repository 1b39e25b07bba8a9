"""Payload extraction from raw model responses.

Models are asked for a bare payload but often wrap it in a markdown fence,
sometimes with a language tag (```json, ```hcl, ```terraform). This module
strips that formatting so the validators see only the payload.
"""

FENCE = "```"
_JSON_TAG = "json"


def clean_model_response(raw: str | None, *, json_payload: bool = False) -> str:
    """Strip code fences, language tags and surrounding whitespace.

    The cleaning pass is repeated until the text stops changing, so the result
    never starts or ends with a fence and cleaning it again is a no-op.

    Args:
        raw: Text returned by the model.
        json_payload: Also remove stray backticks and a leading ``json`` tag
            left behind by a malformed fence. Only safe when the payload is
            expected to start with ``{``.
    """
    text = raw or ""
    previous = None
    while text != previous:
        previous = text
        text = _clean_once(text, json_payload=json_payload)
    return text


def _clean_once(text: str, *, json_payload: bool) -> str:
    text = text.strip()

    if text.startswith(FENCE):
        # Drop the fence line together with any language tag on it
        first_newline = text.find("\n")
        if first_newline > -1:
            text = text[first_newline + 1 :]
        else:
            # Single line: a tag cannot be told apart from payload, keep it
            text = text[len(FENCE) :]

    if text.endswith(FENCE):
        text = text[: -len(FENCE)]

    if json_payload:
        text = text.strip().strip("`")
        if text.startswith(_JSON_TAG):
            text = text[len(_JSON_TAG) :]

    return text.strip()
