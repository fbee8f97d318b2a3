"""Network-flavoured generators: emails, URLs, ports and IPv4 addresses."""
from __future__ import annotations

from typing import Callable

from mp_datagen.generators.checks import check_not_empty, check_that
from mp_datagen.generators.combinators import from_fixed_list, validated
from mp_datagen.generators.core import ValueGenerator
from mp_datagen.generators.numbers import integers
from mp_datagen.generators.strings import alphanumeric_string

SCHEMES: tuple[str, ...] = ("http", "https", "ftp", "file", "ssh")

_POPULAR_EMAIL_DOMAINS = (
    "yahoo.com",
    "google.com",
    "gmail.com",
    "example.com",
    "apple.com",
    "icloud.com",
    "microsoft.com",
)


def popular_email_domains() -> ValueGenerator[str]:
    return from_fixed_list(_POPULAR_EMAIL_DOMAINS)


def emails(domain_generator: "ValueGenerator[str] | Callable[[], str] | None" = None) -> ValueGenerator[str]:
    """``user@domain`` addresses.

    Raises:
        InvalidArgumentError: *domain_generator* produced ``None`` or an
            empty string on its first call.
    """
    domains = validated(domain_generator or popular_email_domains(), "email domain")
    users = alphanumeric_string()
    return ValueGenerator(lambda: f"{users.get()}@{domains.get()}", name="emails")


def urls_with_scheme(scheme: str) -> ValueGenerator[str]:
    """URLs such as ``https://k3Jd9x.gmail.com``; ``"https://"`` is accepted too."""
    check_not_empty(scheme, "missing scheme")
    clean = scheme.replace("://", "").lower()
    check_that(clean in SCHEMES, f"Unknown scheme: {scheme}")
    hosts = alphanumeric_string()
    domains = popular_email_domains()
    return ValueGenerator(lambda: f"{clean}://{hosts.get()}.{domains.get()}", name=f"urls({clean})")


def http_urls() -> ValueGenerator[str]:
    return urls_with_scheme("http")


def https_urls() -> ValueGenerator[str]:
    return urls_with_scheme("https")


def ports() -> ValueGenerator[int]:
    return integers(22, 32_767)


def ip4_addresses() -> ValueGenerator[str]:
    octets = integers(0, 256)
    return ValueGenerator(lambda: ".".join(str(octets.get()) for _ in range(4)), name="ip4_addresses")


__all__ = [
    "SCHEMES",
    "emails",
    "http_urls",
    "https_urls",
    "ip4_addresses",
    "popular_email_domains",
    "ports",
    "urls_with_scheme",
]
