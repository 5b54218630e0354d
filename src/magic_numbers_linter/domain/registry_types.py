from typing import TypedDict


class RuleRegistryEntry(TypedDict, total=False):
    identifier: str
    display_name: str
    short_description: str
    symbol: str
    message_template: str
    kind: str
    opt_in: bool
    manual_instructions: str
    non_triggering_examples: list[str]
    triggering_examples: list[str]
