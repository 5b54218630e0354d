"""
Pylint plugin entry point - composition root for the checker plugin.

Load with ``pylint --load-plugins=magic_numbers_linter.checker``. The rule is
opt-in: enable it with ``--enable=no-magic-numbers`` or
``enabled = true`` under ``[tool.no-magic-numbers]`` in pyproject.toml.
"""

from pylint.lint import PyLinter

from magic_numbers_linter.infrastructure.di.container import MagicNumbersContainer
from magic_numbers_linter.use_cases.checks.magic_numbers import MagicNumberChecker


def register(linter: PyLinter) -> None:
    """Register checkers."""
    container = MagicNumbersContainer.get_instance()
    config_loader = container.get_config_loader()
    descriptor = container.get_descriptor()

    linter.register_checker(MagicNumberChecker(
        linter, rule=container.create_rule(), descriptor=descriptor))

    if config_loader.enabled:
        linter.enable(descriptor.symbol)
