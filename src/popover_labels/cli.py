"""Command line interface entry point."""

from __future__ import annotations

import importlib
import sys

import click

from popover_labels.annotations import ConfigurationError
from popover_labels.attribute_resolution import model_field_names, resolve_annotation
from popover_labels.configuration import (
    DEFAULT_CONFIG_FILENAME,
    Configuration,
    SettingsError,
    default_configuration,
    load_configuration,
    write_placeholder_configuration,
)
from popover_labels.label_rendering import label_for


class CliError(Exception):
    """Custom CLI error."""


class ModelImportError(Exception):
    """Raised when a ``module:Class`` model reference cannot be imported."""


_MODEL_OPTION = click.option(
    "--model",
    "model_reference",
    required=True,
    help="Model class to inspect, as module.path:ClassName",
)
_CONFIG_OPTION = click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to the YAML settings file",
)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="popover-labels")
def cli() -> None:
    """Render form labels with popover hints resolved from model annotations."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML settings template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML settings template with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="render-label")
@_MODEL_OPTION
@click.option("--field", "field_path", required=True, help="Field path on the model")
@click.option("--text", "label_text", required=False, help="Explicit label text")
@_CONFIG_OPTION
def render_label_command(
    model_reference: str, field_path: str, label_text: str | None, config_path: str | None
) -> None:
    """Print the label element rendered for one model field."""
    try:
        configuration = _load_settings(config_path)
        model_type = import_model(model_reference)
        rendered = label_for(
            model_type, field_path, label_text=label_text, configuration=configuration
        )
    except (SettingsError, ModelImportError, ConfigurationError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(rendered)


@cli.command(name="check-model")
@_MODEL_OPTION
@_CONFIG_OPTION
def check_model(model_reference: str, config_path: str | None) -> None:
    """Resolve the popover text of every model field and report unresolvable entries."""
    try:
        configuration = _load_settings(config_path)
        model_type = import_model(model_reference)
    except (SettingsError, ModelImportError) as exc:
        raise CliError(str(exc)) from exc

    failures: list[str] = []
    for field_name in model_field_names(model_type):
        try:
            resolved = resolve_annotation(
                model_type, field_name, default_catalog=configuration.default_catalog
            )
        except ConfigurationError as exc:
            failures.append(f"{field_name}: {exc}")
            continue
        click.echo(f"{field_name}: {resolved.title} | {resolved.content}")

    if failures:
        raise CliError("\n".join(failures))


def import_model(reference: str) -> type:
    """Import a model class given as ``module.path:ClassName``."""
    module_name, separator, attribute_path = reference.partition(":")
    if not separator or not module_name or not attribute_path:
        raise ModelImportError(f"Model reference must look like module:Class, got '{reference}'.")
    try:
        target: object = importlib.import_module(module_name)
    except ImportError as exc:
        raise ModelImportError(f"Cannot import module '{module_name}': {exc}") from exc
    for part in attribute_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise ModelImportError(f"'{module_name}' has no attribute '{attribute_path}'.") from exc
    if not isinstance(target, type):
        raise ModelImportError(f"'{reference}' is not a class.")
    return target


def _load_settings(config_path: str | None) -> Configuration:
    if config_path is None:
        return default_configuration()
    return load_configuration(config_path)


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
