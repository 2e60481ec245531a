"""Rule filtering by category, language and code type."""

from typing import Iterable

from rules_mcp.models import Rule, RuleFilter


def matches(rule: Rule, criteria: RuleFilter) -> bool:
    """
    Check one rule against every active criterion.

    A rule without a language (or code type) applies to all languages (or
    code types), so it passes any language (or code type) filter.
    """
    if criteria.category is not None and rule.category != criteria.category:
        return False
    if criteria.language is not None and rule.language is not None and rule.language != criteria.language:
        return False
    if criteria.codeType is not None and rule.codeType is not None and rule.codeType != criteria.codeType:
        return False
    return True


def filter_rules(rules: Iterable[Rule], criteria: RuleFilter | None = None) -> list[Rule]:
    """Return the rules passing all criteria, in input order."""
    if criteria is None:
        return list(rules)
    return [rule for rule in rules if matches(rule, criteria)]
