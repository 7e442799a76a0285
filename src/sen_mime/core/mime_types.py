"""MIME type string grammar and sniffer rule syntax checks."""

MIME_TYPE_LENGTH = 255

# RFC 2045 tspecials, plus the separator itself
_TSPECIALS = frozenset('()<>@,;:\\"/[]?=')


def _is_token(part: str) -> bool:
    if not part:
        return False
    for char in part:
        if ord(char) <= 0x20 or ord(char) >= 0x7F:
            return False
        if char in _TSPECIALS:
            return False
    return True


def is_valid_mime_type(mime_type: str) -> bool:
    """Check a type string against the registry grammar.

    A valid type is either a bare supertype ("entity") or a supertype/subtype
    pair ("entity/person"). Both parts are RFC 2045 tokens, and neither may be
    "." or "..".

    Examples:
        >>> is_valid_mime_type("application/x-sen-note")
        True
        >>> is_valid_mime_type("entity")
        True
        >>> is_valid_mime_type("text/plain; charset=utf-8")
        False
        >>> is_valid_mime_type("../escaped")
        False
    """
    if not mime_type or len(mime_type.encode("utf-8")) >= MIME_TYPE_LENGTH:
        return False
    parts = mime_type.split("/")
    if len(parts) > 2:
        return False
    if any(part in (".", "..") for part in parts):
        return False
    return all(_is_token(part) for part in parts)


def is_supertype(mime_type: str) -> bool:
    return "/" not in mime_type


def supertype_of(mime_type: str) -> str:
    return mime_type.split("/", 1)[0]


def check_sniffer_rule(rule: str) -> str | None:
    """Check sniffer rule syntax.

    A rule is a priority between 0.0 and 1.0 followed by one or more
    parenthesised pattern lists, optionally preceded by a [range]:

        0.50 ("GIF8")
        0.80 [0:32] ("<?xml" | "<sen")

    Returns:
        None if the rule is well formed, otherwise a description of the problem
    """
    text = rule.strip()
    if not text:
        return "empty sniffer rule"

    priority_text, _, body = text.partition(" ")
    try:
        priority = float(priority_text)
    except ValueError:
        return f"invalid priority {priority_text!r}"
    if not 0.0 <= priority <= 1.0:
        return f"priority {priority} out of range 0.0-1.0"

    body = body.strip()
    if not body or body[0] not in "([":
        return "expected a pattern list after the priority"

    closing = {")": "(", "]": "["}
    stack: list[str] = []
    in_string = False
    escaped = False
    saw_pattern = False
    for char in body:
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char in "([":
            stack.append(char)
            if char == "(":
                saw_pattern = True
        elif char in closing:
            if not stack or stack.pop() != closing[char]:
                return f"unbalanced {char!r}"

    if in_string:
        return "unterminated string"
    if stack:
        return f"unclosed {stack[-1]!r}"
    if not saw_pattern:
        return "missing pattern list"
    return None
