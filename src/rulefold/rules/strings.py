"""Built-in string rules — regex matches and length checks.

Every rule here is a plain :class:`~rulefold.domain.rules.Rule` over
``str``. ``None`` fails the format and length rules instead of raising;
``not_empty`` accepts it, pair it with ``not_null`` to reject it.

Patterns use search semantics: a pattern without anchors matches anywhere
in the value.
"""

from __future__ import annotations

import re

from rulefold.domain.rules import Rule, make_rule


def _regex_rule(pattern: str, message: str) -> Rule[str]:
    compiled = re.compile(pattern)

    def predicate(value: str | None) -> bool:
        return value is not None and compiled.search(value) is not None

    return make_rule(predicate, message)


def _length(value: str | None) -> int | None:
    return None if value is None else len(value)


not_empty: Rule[str] = make_rule(lambda value: value != "", "Value cannot be empty")
not_null: Rule[str] = make_rule(lambda value: value is not None, "Value cannot be null")


def matches(pattern: str, message: str | None = None) -> Rule[str]:
    """Rule passing when *pattern* matches somewhere in the value."""
    if message is None:
        message = f"Value does not match the pattern {pattern}"
    return _regex_rule(pattern, message)


def min_length(length: int) -> Rule[str]:
    def predicate(value: str | None) -> bool:
        n = _length(value)
        return n is not None and n >= length

    return make_rule(predicate, f"Value is too short. Must be less than {length}")


def max_length(length: int) -> Rule[str]:
    def predicate(value: str | None) -> bool:
        n = _length(value)
        return n is not None and n <= length

    return make_rule(predicate, f"Value is too long. Must be less than {length}")


def length_between(minimum: int, maximum: int) -> Rule[str]:
    def predicate(value: str | None) -> bool:
        n = _length(value)
        return n is not None and minimum <= n <= maximum

    return make_rule(
        predicate,
        f"Value must be between {minimum} and {maximum} characters long",
    )


# --- Format rules ---

email = matches(r"^([\w\.\-]+)@([\w\-]+)((\.(\w){2,3})+)$", "Value is not a valid email address")
url = matches(r"^(https?://)?([\w\-]+)((\.(\w){2,3})+)(/.*)?$", "Value is not a valid URL")
phone = matches(
    r"^\+?(\d{1,3})?[-. ]?\(?(\d{3})\)?[-. ]?(\d{3})[-. ]?(\d{4})$",
    "Value is not a valid phone number",
)
zip_code = matches(r"^\d{5}(-\d{4})?$", "Value is not a valid zip code")
alpha = matches(r"^[a-zA-Z]+$", "Value must contain only letters")
alpha_numeric = matches(r"^[a-zA-Z0-9]+$", "Value must contain only letters and numbers")
numeric = matches(r"^\d+$", "Value must contain only numbers")
decimal = matches(r"^\d+(\.\d+)?$", "Value must be a decimal number")
hexadecimal = matches(r"^0[xX][0-9a-fA-F]+$", "Value must be a hexadecimal number")
base64 = matches(
    r"^([0-9a-zA-Z+/]{4})*([0-9a-zA-Z+/]{2}==|[0-9a-zA-Z+/]{3}=)?$",
    "Value must be a base64 encoded string",
)
guid = matches(
    r"^(\{?[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}\}?)$",
    "Value must be a GUID",
)
ipv4 = matches(
    r"^((25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\.){3}(25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)$",
    "Value must be an IPv4 address",
)
ipv6 = matches(
    r"^([0-9a-fA-F]{1,4}:){7,7}[0-9a-fA-F]{1,4}$"
    r"|^([0-9a-fA-F]{1,4}:){1,7}:$"
    r"|^([0-9a-fA-F]{1,4}:){1,6}:[0-9a-fA-F]{1,4}$"
    r"|^([0-9a-fA-F]{1,4}:){1,5}(:[0-9a-fA-F]{1,4}){1,2}$"
    r"|^([0-9a-fA-F]{1,4}:){1,4}(:[0-9a-fA-F]{1,4}){1,3}$"
    r"|^([0-9a-fA-F]{1,4}:){1,3}(:[0-9a-fA-F]{1,4}){1,4}$"
    r"|^([0-9a-fA-F]{1,4}:){1,2}(:[0-9a-fA-F]{1,4}){1,5}$"
    r"|^[0-9a-fA-F]{1,4}:((:[0-9a-fA-F]{1,4}){1,6})$"
    r"|^:((:[0-9a-fA-F]{1,4}){1,7}|:)$",
    "Value must be an IPv6 address",
)
mac_address = matches(r"^([0-9A-Fa-f]{2}[:-]){5}([0-9A-Fa-f]{2})$", "Value must be a MAC address")
