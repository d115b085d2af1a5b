"""Command-line interface for gql-jddf."""

import asyncio
import json
import logging
import sys

import click
import httpx

from . import __version__
from .core.auth import BearerAuth, CombinedAuth, HeaderAuth, NoAuth, parse_header
from .core.converter import convert_document
from .core.errors import ConversionError
from .core.executor import INTROSPECTION_QUERY, GraphQLError, IntrospectionClient
from .core.introspection import loads_document
from .core.scalars import ScalarRegistry, parse_scalar_mapping
from .core.sdl import introspection_from_sdl


def configure_logging(verbose: bool):
    """Send log records to stderr; stdout carries only the output document."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_registry(mappings: tuple[str, ...]) -> ScalarRegistry:
    """Build a scalar registry from ``NAME=TYPE`` options."""
    registry = ScalarRegistry()
    for mapping in mappings:
        try:
            registry.register(*parse_scalar_mapping(mapping))
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--scalar") from e
    return registry


@click.group()
@click.version_option(version=__version__)
def main():
    """Convert GraphQL introspection results into JDDF schemas.

    Generate a JSON validator for payloads of any GraphQL API.
    """
    pass


@main.command()
@click.option(
    "--input",
    "-i",
    "input_file",
    type=click.File("rb"),
    default="-",
    help="Introspection JSON document (default: stdin).",
)
@click.option(
    "--output",
    "-o",
    "output_file",
    type=click.File("w"),
    default="-",
    help="Output file for the JDDF schema (default: stdout).",
)
@click.option(
    "--scalar",
    "-s",
    "scalars",
    multiple=True,
    metavar="NAME=TYPE",
    help="Map a custom scalar to a JDDF type, e.g. DateTime=timestamp. Repeatable.",
)
@click.option(
    "--sdl",
    is_flag=True,
    help="Read GraphQL SDL instead of an introspection result.",
)
@click.option(
    "--indent",
    type=click.IntRange(min=0),
    default=None,
    help="Pretty-print with this many spaces of indentation.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def convert(
    input_file,
    output_file,
    scalars: tuple[str, ...],
    sdl: bool,
    indent: int | None,
    verbose: bool,
):
    """Convert an introspection result into a JDDF schema.

    Examples:

        gql-jddf convert < introspection.json > schema.jddf.json

        gql-jddf convert -i introspection.json -s DateTime=timestamp --indent 2

        gql-jddf convert --sdl -i schema.graphql
    """
    configure_logging(verbose)
    registry = build_registry(scalars)

    try:
        if sdl:
            document = introspection_from_sdl(input_file.read())
        else:
            document = loads_document(input_file.read())
        schema = convert_document(document, registry)
        text = schema.to_json(indent=indent)
    except ConversionError as e:
        raise click.ClickException(e.message) from e

    if verbose:
        click.echo(f"  Definitions: {len(schema.definitions)}", err=True)

    output_file.write(text)
    output_file.write("\n")


@main.command()
@click.option(
    "--url",
    "-u",
    required=True,
    help="GraphQL endpoint URL.",
)
@click.option(
    "--bearer",
    default=None,
    help="Bearer token for the Authorization header.",
)
@click.option(
    "--header",
    "-H",
    "headers",
    multiple=True,
    metavar="NAME=VALUE",
    help="Extra request header. Repeatable.",
)
@click.option(
    "--timeout",
    type=float,
    default=30.0,
    show_default=True,
    help="Request timeout in seconds.",
)
@click.option(
    "--output",
    "-o",
    "output_file",
    type=click.File("w"),
    default="-",
    help="Output file for the introspection result (default: stdout).",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def introspect(url: str, bearer: str | None, headers: tuple[str, ...], timeout: float, output_file, verbose: bool):
    """Fetch an introspection result from a GraphQL endpoint.

    The output can be piped straight into ``gql-jddf convert``.

    Examples:

        gql-jddf introspect --url http://localhost:4000/graphql | gql-jddf convert
    """
    configure_logging(verbose)

    try:
        extra_headers = dict(parse_header(h) for h in headers)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--header") from e

    handlers = []
    if bearer:
        handlers.append(BearerAuth(bearer))
    if extra_headers:
        handlers.append(HeaderAuth(extra_headers))
    auth = CombinedAuth(*handlers) if handlers else NoAuth()

    if verbose:
        click.echo(f"Introspecting {url}...", err=True)

    try:
        document = asyncio.run(_fetch(url, auth, timeout))
    except (GraphQLError, httpx.HTTPError) as e:
        raise click.ClickException(str(e)) from e

    click.echo(json.dumps(document, indent=2), file=output_file)


async def _fetch(url, auth, timeout):
    async with IntrospectionClient(url, auth=auth, timeout=timeout) as client:
        return await client.fetch()


@main.command()
def query():
    """Print the introspection query used by ``introspect``."""
    click.echo(INTROSPECTION_QUERY)


if __name__ == "__main__":
    main()
