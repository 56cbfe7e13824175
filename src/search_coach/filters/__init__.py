"""Search filter validation."""

from search_coach.filters.validator import FilterCheck, FilterValidator, split_domain_values

__all__ = ["FilterCheck", "FilterValidator", "split_domain_values"]
