"""
Case conversion for snake_case identifiers.

Segments that are common initialisms (ID, URL, API, ...) keep their
all-uppercase form, so ``user_id`` becomes ``UserID`` rather than ``UserId``.
The initialism set is a parameter; callers that need extra acronyms pass
their own set.
"""

from collections.abc import Iterable

DEFAULT_INITIALISMS: frozenset[str] = frozenset({
    "ACL",
    "API",
    "ASCII",
    "CPU",
    "CSS",
    "DNS",
    "EOF",
    "GUID",
    "HTML",
    "HTTP",
    "HTTPS",
    "ID",
    "IP",
    "JSON",
    "LHS",
    "QPS",
    "RAM",
    "RHS",
    "RPC",
    "SLA",
    "SMTP",
    "SQL",
    "SSH",
    "TCP",
    "TLS",
    "TTL",
    "UDP",
    "UI",
    "UID",
    "UUID",
    "URI",
    "URL",
    "UTF8",
    "VM",
    "XML",
    "XMPP",
    "XSRF",
    "XSS",
})


def make_initialisms(extra: Iterable[str] = (), base: Iterable[str] = DEFAULT_INITIALISMS) -> frozenset[str]:
    """Build an initialism set from a base set plus extra acronyms."""
    return frozenset(word.upper() for word in (*base, *extra))


def title_case(name: str, initialisms: frozenset[str] | None = None) -> str:
    """
    Convert a snake_case name to TitleCase.

    Examples:
        >>> title_case("hello_there")
        'HelloThere'
        >>> title_case("fun_id")
        'FunID'
    """
    if initialisms is None:
        initialisms = DEFAULT_INITIALISMS

    parts = []
    for segment in name.split("_"):
        if not segment:
            continue
        upper = segment.upper()
        if upper in initialisms:
            parts.append(upper)
        else:
            parts.append(segment[0].upper() + segment[1:])
    return "".join(parts)


def camel_case(name: str, initialisms: frozenset[str] | None = None) -> str:
    """
    Convert a snake_case name to camelCase.

    The first segment is lower-cased unless it is an initialism, which stays
    uppercase (``id_token`` becomes ``IDToken``).

    Examples:
        >>> camel_case("hello_there_sunny")
        'helloThereSunny'
        >>> camel_case("fun_id_times")
        'funIDTimes'
    """
    if initialisms is None:
        initialisms = DEFAULT_INITIALISMS

    segments = [segment for segment in name.split("_") if segment]
    if not segments:
        return ""

    first, rest = segments[0], segments[1:]
    if first.upper() in initialisms:
        head = first.upper()
    else:
        head = first.lower()
    return head + title_case("_".join(rest), initialisms)
