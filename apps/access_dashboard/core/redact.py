"""Helpers for safe logging of request payloads.

Auth calls carry passwords, session tokens and one-time codes. Payloads are
passed through ``redact_for_log`` before they reach a log record.
"""

from collections.abc import Mapping, Sequence

_SENSITIVE_KEYS = frozenset({
    'password',
    'confirm_password',
    'token',
    'authorization',
    'twofactorcode',
    'code',
    'qrcodedataurl',
    'facephoto',
    'photo',
})


def redact_for_log(value, max_string=256, _depth=0):
    """Return a redacted copy of *value* suitable for logs."""
    if _depth > 10:
        return '<max-depth>'

    if value is None or isinstance(value, (int, float, bool)):
        return value

    if isinstance(value, str):
        if len(value) > max_string:
            return f'{value[:max_string]}...<truncated>'
        return value

    if isinstance(value, bytes):
        return f'<bytes:{len(value)}b>'

    if isinstance(value, Mapping):
        redacted = {}
        for key, item in value.items():
            if str(key).lower() in _SENSITIVE_KEYS:
                redacted[key] = '<redacted>'
            else:
                redacted[key] = redact_for_log(item, max_string, _depth + 1)
        return redacted

    if isinstance(value, Sequence):
        return [redact_for_log(item, max_string, _depth + 1) for item in value]

    return repr(value)
