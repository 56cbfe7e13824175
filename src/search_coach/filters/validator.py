"""Validation of user-selected search filter values.

The checks here are pure: they report a :class:`FilterCheck` with an optional
reason and leave logging to the caller. A passing check carries the matched
allow-list entry in ``value``, so callers never forward the raw input.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from search_coach.config.models import FilterConfig


@dataclass(frozen=True)
class FilterCheck:
    """Outcome of a filter check. Truthy when the value is valid."""

    valid: bool
    reason: str | None = None
    value: str | None = None

    def __bool__(self) -> bool:
        return self.valid


_OK = FilterCheck(valid=True)


class FilterValidator:
    """Validate market codes and domain suffixes against configured allow-lists.

    Args:
        config: Allow-lists and sentinel values. Defaults to :class:`FilterConfig`.
    """

    def __init__(self, config: FilterConfig | None = None) -> None:
        self._config = config or FilterConfig()
        self._markets = {m.casefold(): m for m in self._config.markets}
        self._domains = {d.casefold(): d for d in self._config.domains}

    @property
    def config(self) -> FilterConfig:
        return self._config

    def is_no_filter(self, code: str | None) -> bool:
        """Return True if *code* is the "no market selected" sentinel."""
        if code is None:
            return False
        return code.strip().casefold() == self._config.no_filter_market.casefold()

    def check_market(self, code: str | None) -> FilterCheck:
        """Check a market code.

        A code is valid when it contains exactly one of the allowed market
        codes, ignoring case. The result's ``value`` is that allowed code.
        """
        if code is None:
            return FilterCheck(False, "market code is missing")
        folded = code.casefold()
        matches = [market for key, market in self._markets.items() if key in folded]
        if not matches:
            return FilterCheck(False, f"market code {code!r} is not supported")
        if len(matches) > 1:
            return FilterCheck(
                False, f"market code {code!r} is ambiguous: {', '.join(matches)}"
            )
        return FilterCheck(True, value=matches[0])

    def check_domain(self, domain: str | None) -> FilterCheck:
        """Check a domain suffix.

        A domain is valid when exactly one of the allowed suffixes contains
        it, ignoring case. The result's ``value`` is that allowed suffix.
        """
        if domain is None:
            return FilterCheck(False, "domain is missing")
        folded = domain.strip().casefold()
        if not folded:
            return FilterCheck(False, "domain is empty")
        matches = [allowed for key, allowed in self._domains.items() if folded in key]
        if not matches:
            return FilterCheck(False, f"domain {domain!r} is not supported")
        if len(matches) > 1:
            return FilterCheck(
                False, f"domain {domain!r} is ambiguous: {', '.join(matches)}"
            )
        return FilterCheck(True, value=matches[0])

    def check_domains(self, domains: Iterable[str | None]) -> FilterCheck:
        """Check every domain in a batch. The first failure rejects the batch."""
        for domain in domains:
            check = self.check_domain(domain)
            if not check:
                return check
        return _OK

    def is_valid_market(self, code: str | None) -> bool:
        return self.check_market(code).valid

    def is_valid_domain(self, domain: str | None) -> bool:
        return self.check_domain(domain).valid

    def split_domain_values(self, raw: str | None) -> list[str]:
        """Split the delimited ``domainValues`` request parameter."""
        return split_domain_values(raw, self._config.domain_delimiter)


def split_domain_values(raw: str | None, delimiter: str = ";") -> list[str]:
    """Split a delimited domain string. Missing or empty input yields no domains."""
    if not raw:
        return []
    return raw.split(delimiter)
