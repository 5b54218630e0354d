"""Markdown rendering of rule descriptors for generated documentation."""

from magic_numbers_linter.domain.entities import Example, RuleDescriptor


class RuleDocumentationRenderer:
    """Renders a RuleDescriptor the way the rule reference pages are laid out."""

    @staticmethod
    def to_markdown(descriptor: RuleDescriptor, instructions: str = "") -> str:
        lines = [
            f"# {descriptor.name}",
            "",
            descriptor.description,
            "",
            f"* **Identifier:** `{descriptor.identifier}`",
            f"* **Symbol:** `{descriptor.symbol}`",
            f"* **Enabled by default:** {'No' if descriptor.opt_in else 'Yes'}",
            f"* **Kind:** {descriptor.kind.value}",
            "* **Default configuration:** severity: warning",
            "",
        ]
        if instructions:
            lines += ["## How to fix", "", instructions, ""]
        lines += RuleDocumentationRenderer._section(
            "Non Triggering Examples", descriptor.non_triggering_examples)
        lines += RuleDocumentationRenderer._section(
            "Triggering Examples", descriptor.triggering_examples)
        return "\n".join(lines).rstrip() + "\n"

    @staticmethod
    def _section(title: str, examples: tuple[Example, ...]) -> list[str]:
        if not examples:
            return []
        lines = [f"## {title}", ""]
        for example in examples:
            lines += ["```python", example.code, "```", ""]
        return lines
