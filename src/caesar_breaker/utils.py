import os

import structlog

log = structlog.get_logger()


def read_secret(secret: str) -> str:
    """Return the file contents if `secret` names a readable file, otherwise the secret itself."""
    if not os.path.isfile(secret):
        return secret

    try:
        with open(secret, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        log.debug("secret is not a readable file", path=secret, error=str(e))
        return secret


def split(text: str) -> tuple[str, str]:
    """Split text into the characters at even positions and those at odd positions."""
    return text[0::2], text[1::2]


def join(first: str, second: str) -> str:
    """Interleave two strings. The first one is the same length or one longer."""
    joined = []
    for i, char in enumerate(first):
        joined.append(char)
        if i < len(second):
            joined.append(second[i])
    return "".join(joined)
