"""Package entry point - composition root. Wire dependencies and run the CLI app."""

from magic_numbers_linter.infrastructure.di.container import MagicNumbersContainer
from magic_numbers_linter.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    container = MagicNumbersContainer.get_instance()
    registry_service = container.get_registry_service()

    deps = CLIDependencies(
        descriptor=container.get_descriptor(),
        manual_instructions=registry_service.get_manual_instructions(),
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
