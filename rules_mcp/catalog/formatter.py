"""Render rule collections as markdown text."""

from rules_mcp.models import RuleCollection


def format_rules_as_text(collection: RuleCollection) -> str:
    """Format a rule collection as a human-readable markdown document."""
    system = collection.system.value
    output = f"# {system[:1].upper() + system[1:]} Rules\n\n"

    if collection.language is not None:
        output += f"Language: {collection.language.value}\n\n"

    if not collection.rules:
        output += "No rules found matching the criteria.\n"
        return output

    output += f"Found {len(collection.rules)} rule(s):\n\n"

    for index, rule in enumerate(collection.rules, start=1):
        output += f"## {index}. {rule.title}\n\n"
        output += f"**ID:** {rule.id}\n"
        output += f"**Category:** {rule.category.value}\n"
        if rule.language is not None:
            output += f"**Language:** {rule.language.value}\n"
        if rule.codeType is not None:
            output += f"**Code Type:** {rule.codeType.value}\n"
        if rule.tags:
            output += f"**Tags:** {', '.join(rule.tags)}\n"
        output += f"\n{rule.description}\n\n"
        output += f"{rule.content}\n\n"
        output += "---\n\n"

    return output
