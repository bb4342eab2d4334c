# -*- coding: utf-8 -*-
"""Location: ./tagvalidator/cli.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Fred Araujo

tagvalidator CLI ─ command line tools for validating message tag groups
This module is exposed as a **console-script** via:

    [project.scripts]
    tagvalidator = "tagvalidator.cli:main"

so that a user can simply type `tagvalidator ...` to use the CLI.

Features
─────────
* validate: Validates the tag groups in a JSON file for a domain
* rules: Prints the rule catalog

Typical usage
─────────────
```console
$ tagvalidator validate payments payment.json --terms terms.json
$ tagvalidator rules offers
$ tagvalidator --log-level debug validate offers offer.json
```
"""

# Standard
import json
from pathlib import Path
from typing import Any, Optional

# Third-Party
from pydantic import ValidationError
import typer
from typing_extensions import Annotated

# First-Party
from tagvalidator.models import DomainContext
from tagvalidator.services.logging_service import logging_service
from tagvalidator.types import LogLevel
from tagvalidator.utils.error_formatter import ErrorFormatter
from tagvalidator.validation.catalog import get_rule_catalog
from tagvalidator.validation.errors import TagValidationError
from tagvalidator.validation.structural import StructuralValidator

logger = logging_service.get_logger(__name__)

# Exit codes
EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_USAGE = 2

app = typer.Typer(help="Command line tools for validating message tag groups.", add_completion=False)

# ---------------------------------------------------------------------------
# Utility functions
# ---------------------------------------------------------------------------


def read_json(path: Path) -> Any:
    """Read a JSON document from a file.

    Args:
        path: File to read.

    Returns:
        The decoded document.

    Raises:
        typer.Exit: If the file cannot be read or decoded.
    """
    try:
        with open(path, "r", encoding="utf-8") as file:
            return json.load(file)
    except (OSError, json.JSONDecodeError) as e:
        typer.echo(f"Cannot read JSON from {path}: {e}", err=True)
        raise typer.Exit(code=EXIT_USAGE)


def extract_tags(document: Any) -> Any:
    """Find the tag groups in a decoded document.

    Args:
        document: A list of tag groups, or an object carrying them under ``tags``.

    Returns:
        The tag groups, or the document unchanged when no ``tags`` key is present.

    Examples:
        >>> extract_tags({"tags": [{"descriptor": {"code": "META"}}]})
        [{'descriptor': {'code': 'META'}}]
        >>> extract_tags([])
        []
    """
    if isinstance(document, dict) and "tags" in document:
        return document["tags"]
    return document


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------
@app.callback()
def callback(
    log_level: Annotated[Optional[LogLevel], typer.Option("--log-level", "-l", case_sensitive=False, help="Minimum log level for this run.")] = None,
):
    """Apply options shared by every command.

    Args:
        log_level: Optional log level overriding ``TAGVALIDATOR_LOG_LEVEL``.
    """
    if log_level is not None:
        logging_service.set_level(log_level)


@app.command(help="Validates the tag groups in a JSON file for a domain.")
def validate(
    domain: Annotated[str, typer.Argument(help="Domain whose rules apply, e.g. payments, provider, items, offers.")],
    file: Annotated[Path, typer.Argument(help="JSON file holding a list of tag groups or an object with a 'tags' key.")],
    terms: Annotated[Optional[Path], typer.Option("--terms", "-t", help="JSON file holding the negotiated reference definitions.")] = None,
    allowed_codes: Annotated[Optional[str], typer.Option("--allowed-codes", "-a", help="Comma-separated group codes expected in this message.")] = None,
):
    """Validate a tag group collection and print the outcome as JSON.

    Args:
        domain: Domain whose rules apply.
        file: JSON file holding the tag groups.
        terms: Optional JSON file holding reference definitions.
        allowed_codes: Optional comma-separated group codes.

    Raises:
        typer.Exit: With 0 when valid, 1 when invalid, 2 on unusable input.
    """
    logger.debug(f"Validating {file} against {domain} rules")
    tags = extract_tags(read_json(file))
    try:
        context = DomainContext(
            reference_definitions=read_json(terms) if terms else None,
            allowed_group_codes=[code.strip() for code in allowed_codes.split(",") if code.strip()] if allowed_codes else None,
        )
    except ValidationError as e:
        typer.echo(f"Invalid reference definitions: {ErrorFormatter.format_validation_error(e)}", err=True)
        raise typer.Exit(code=EXIT_USAGE)
    try:
        outcome = StructuralValidator().validate(domain, tags, context)
    except TagValidationError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=EXIT_USAGE)

    typer.echo(json.dumps(outcome.model_dump(mode="json", include={"is_valid", "errors", "warnings"}), indent=2))
    raise typer.Exit(code=EXIT_VALID if outcome.is_valid else EXIT_INVALID)


@app.command(help="Prints the rule catalog, or the rules of one domain.")
def rules(domain: Annotated[Optional[str], typer.Argument(help="Domain to print; all domains when omitted.")] = None):
    """Print catalog rules as JSON.

    Args:
        domain: Optional domain to restrict the output to.

    Raises:
        typer.Exit: With 2 when the domain is unknown or the catalog is invalid.
    """
    try:
        catalog = get_rule_catalog()
    except TagValidationError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=EXIT_USAGE)
    if domain is not None and catalog.domain(domain) is None:
        typer.echo(f"Unknown domain '{domain}'; expected one of: {', '.join(catalog.domains())}", err=True)
        raise typer.Exit(code=EXIT_USAGE)
    typer.echo(json.dumps(catalog.to_dict(domain), indent=2))


def main() -> None:  # noqa: D401 - imperative mood is fine here
    """Entry point for the *tagvalidator* console script.

    Environment Variables:
        TAGVALIDATOR_LOG_LEVEL: Logging level (default: INFO)
        TAGVALIDATOR_RULES_CATALOG_PATH: Rule catalog to use instead of the packaged one
    """
    logging_service.initialize()
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
