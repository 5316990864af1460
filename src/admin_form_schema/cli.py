"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys

import click

from admin_form_schema.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    UnknownEntityError,
    load_configuration,
    write_placeholder_configuration,
)
from admin_form_schema.field_definitions import EntityIdentifier, InvalidEntityIdentifier
from admin_form_schema.schema_caching import (
    RequestMemoizer,
    SchemaCacheService,
    build_localization_context,
    get_field_schema_map,
)
from admin_form_schema.schema_management import SchemaError


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="admin-form-schema")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Flatten admin form field trees into path-keyed schema maps."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
        logging.getLogger("admin_form_schema").setLevel(logging.DEBUG)


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML admin configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML admin configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="schema-map")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON admin configuration file",
)
@click.option("--collection", "collection_slug", help="Slug of the collection to flatten")
@click.option("--global", "global_slug", help="Slug of the global to flatten")
@click.option("--locale", help="Locale used for field labels; defaults to the configured one")
def schema_map(
    config_path: str, collection_slug: str | None, global_slug: str | None, locale: str | None
) -> None:
    """Print the flattened field schema map of one collection or global as JSON."""
    try:
        identifier = EntityIdentifier(collection_slug=collection_slug, global_slug=global_slug)
        configuration = load_configuration(config_path)
        flattened = get_field_schema_map(
            identifier,
            configuration,
            build_localization_context(configuration, locale),
            cache=SchemaCacheService(),
            request=RequestMemoizer(),
        )
    except (
        InvalidEntityIdentifier,
        ConfigurationError,
        UnknownEntityError,
        SchemaError,
        OSError,
    ) as exc:
        raise CliError(str(exc)) from exc
    click.echo(json.dumps(flattened.to_payload(), indent=2, ensure_ascii=False, default=str))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
