"""CLI entry points for rule documentation - Thin Controller using Typer."""

from dataclasses import dataclass
from pathlib import Path

import typer

from magic_numbers_linter.domain.entities import RuleDescriptor
from magic_numbers_linter.interface.reporters import RuleDocumentationRenderer


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    descriptor: RuleDescriptor
    manual_instructions: str = ""


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="no-magic-numbers",
            help="Documentation for the no-magic-numbers pylint rule. Lint with 'pylint --load-plugins=magic_numbers_linter.checker --enable=no-magic-numbers'.",
            add_completion=False,
        )

        @app.command()
        def docs(
            output: Path | None = typer.Option(
                None, "--output", "-o", help="Write Markdown to this file instead of stdout"),  # noqa: B008, RUF100
        ) -> None:
            """Render the rule reference page (identifier, kind, opt-in status, examples) as Markdown."""
            text = RuleDocumentationRenderer.to_markdown(
                deps.descriptor, deps.manual_instructions)
            if output is None:
                typer.echo(text, nl=False)
                return
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(text, encoding="utf-8")
            typer.echo(f"Wrote {output}")

        @app.command()
        def examples(
            triggering: bool = typer.Option(
                True, "--triggering/--non-triggering", help="Which example corpus to print"),
        ) -> None:
            """Print one example corpus; '↓' marks each expected violation."""
            corpus = (
                deps.descriptor.triggering_examples
                if triggering
                else deps.descriptor.non_triggering_examples
            )
            for example in corpus:
                typer.echo(example.code)
                typer.echo("")

        return app
