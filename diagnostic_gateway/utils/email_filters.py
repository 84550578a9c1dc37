"""
Email Filters
=============

Cheap, local checks run before any network call:

- has_email_shape(): minimal syntactic check (a string containing '@')
- extract_domain(): lower-cased segment after the first '@'
- is_blocked_domain(): disposable provider or suspicious TLD

The block-lists are built once at import and never mutated.
"""

from typing import Any

from disposable_email_domains import blocklist as DISPOSABLE_DOMAINS

# Known throwaway providers seen on the diagnostic form. Unioned with the
# community-maintained disposable-email-domains list.
BLOCKED_DOMAINS = frozenset({
    "mailinator.com",
    "tempmail.com",
    "yopmail.com",
    "guerrillamail.com",
    "10minutemail.com",
    "sharklasers.com",
    "throwawaymail.com",
    "getnada.com",
}) | frozenset(DISPOSABLE_DOMAINS)

# Suffix match, so ".xyz" blocks "foo.xyz" but not "foo.xyzz"
BLOCKED_TLDS = (".xyz", ".icu", ".top", ".tk", ".ml", ".ga", ".cf", ".gq", ".ru", ".cn")


def has_email_shape(email: Any) -> bool:
    """Not RFC validation on purpose: a non-empty string with an '@' passes."""
    return isinstance(email, str) and "@" in email


def extract_domain(email: str) -> str:
    return email.split("@")[1].lower()


def is_disposable_domain(domain: str) -> bool:
    return domain.lower() in BLOCKED_DOMAINS


def has_blocked_tld(domain: str) -> bool:
    return domain.lower().endswith(BLOCKED_TLDS)


def is_blocked_domain(domain: str) -> bool:
    return is_disposable_domain(domain) or has_blocked_tld(domain)
