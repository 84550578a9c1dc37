"""
Email shape / disposable domain / suspicious TLD filters
"""

import pytest

from diagnostic_gateway.utils.email_filters import (
    BLOCKED_DOMAINS,
    BLOCKED_TLDS,
    extract_domain,
    has_blocked_tld,
    has_email_shape,
    is_blocked_domain,
    is_disposable_domain,
)


class TestEmailShape:

    @pytest.mark.parametrize("email", ["a@b", "jane.doe@acme.com", "@acme.com", "jane@"])
    def test_anything_with_at_sign_passes(self, email):
        assert has_email_shape(email)

    @pytest.mark.parametrize("email", ["", "jane.doe.acme.com", None, 123, ["a@b.com"]])
    def test_rejects_missing_at_or_non_string(self, email):
        assert not has_email_shape(email)


class TestExtractDomain:

    def test_lowercases_domain(self):
        assert extract_domain("Jane@ACME.Com") == "acme.com"

    def test_uses_segment_after_first_at(self):
        assert extract_domain("a@b@c.xyz") == "b"

    def test_empty_domain(self):
        assert extract_domain("jane@") == ""


class TestBlockLists:

    def test_block_lists_are_immutable(self):
        assert isinstance(BLOCKED_DOMAINS, frozenset)
        assert isinstance(BLOCKED_TLDS, tuple)

    @pytest.mark.parametrize("domain", [
        "mailinator.com", "tempmail.com", "yopmail.com", "guerrillamail.com",
        "10minutemail.com", "sharklasers.com", "throwawaymail.com", "getnada.com",
    ])
    def test_core_disposable_domains_are_blocked(self, domain):
        assert is_disposable_domain(domain)
        assert is_blocked_domain(domain)

    def test_disposable_match_is_case_insensitive(self):
        assert is_disposable_domain("YopMail.com")

    def test_disposable_match_is_exact(self):
        # Subdomains and look-alikes are not in the list
        assert not is_disposable_domain("mailinator.com.acme-industries.com")
        assert not is_disposable_domain("notmailinator.com.au")

    @pytest.mark.parametrize("domain", [
        "startup.xyz", "brand.icu", "shop.top", "free.tk", "site.ml",
        "site.ga", "site.cf", "site.gq", "company.ru", "mail.example.cn", "Company.RU",
    ])
    def test_suspicious_tlds_are_blocked(self, domain):
        assert has_blocked_tld(domain)
        assert is_blocked_domain(domain)

    @pytest.mark.parametrize("domain", ["example.xyzz", "acme.com", "ru.acme.com", "topco.io", "cnn.com"])
    def test_tld_match_is_suffix_only(self, domain):
        assert not has_blocked_tld(domain)

    def test_professional_domain_passes(self):
        assert not is_blocked_domain("acme-industries.com")
