# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
from typing import Any

SENSITIVE_PATTERNS = [
    # Passwords and derived hashes
    (r"(encrypted_password\s*[:=]\s*['\"]?)([^'\"\s,}]+)(['\"]?)", r"\1***REDACTED***\3"),
    (r"(password\s*[:=]\s*['\"]?)([^'\"\s,}]+)(['\"]?)", r"\1***REDACTED***\3", re.IGNORECASE),
    # Werkzeug hash strings that leak without a key
    (r"\b(scrypt|pbkdf2):[^\s'\"]+\$[^\s'\"]+\$[0-9a-f]+", r"\1:***REDACTED***"),

    # Session cookies and signing keys
    (r"(session[_-]?key\s*[:=]\s*['\"]?)([^'\"\s,}]+)(['\"]?)", r"\1***REDACTED***\3", re.IGNORECASE),
    (r"(cookie\s*[:=]\s*['\"]?)([^'\"]{10,})(['\"]?)", r"\1***REDACTED***\3", re.IGNORECASE),

    # Database URLs with credentials
    (r"(postgres(?:ql)?(?:\+\w+)?|mysql(?:\+\w+)?)://([^:/]+):([^@]+)@", r"\1://\2:***REDACTED***@"),

    # Email addresses (partial masking)
    (r"([a-zA-Z0-9._%+-]+)@([a-zA-Z0-9.-]+\.[a-zA-Z]{2,})", r"***@\2"),
]


def sanitize_message(message: str) -> str:
    sanitized = message

    for pattern_tuple in SENSITIVE_PATTERNS:
        if len(pattern_tuple) == 2:
            pattern, replacement = pattern_tuple
            flags = 0
        else:
            pattern, replacement, flags = pattern_tuple

        sanitized = re.sub(pattern, replacement, sanitized, flags=flags)

    return sanitized


def sanitize_record(record: dict[str, Any]) -> bool:
    if "message" in record:
        record["message"] = sanitize_message(record["message"])
    return True
