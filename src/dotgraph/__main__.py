"""CLI entry point for dotgraph."""

import logging
import sys

import click

from dotgraph.errors import DotSyntaxError
from dotgraph.inspection import format_graph
from dotgraph.parser import parse, parse_file

logger = logging.getLogger("dotgraph.cli")


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option("--inspect", "-i", "inspect", is_flag=True, help="Print the parsed graph's attributes")
@click.option("--verbose", "-v", "verbose", is_flag=True, help="Log every token recognized while parsing")
def main(input: str | None, inspect: bool, verbose: bool) -> None:
    """Parse a DOT graph description and optionally inspect its attributes."""
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    try:
        if input:
            graph = parse_file(input, verbose)
        else:
            graph = parse(sys.stdin.read(), verbose)
    except OSError as e:
        click.echo(f"error: cannot read '{input}': {e}", err=True)
        sys.exit(1)
    except DotSyntaxError as e:
        click.echo(f"parse error: {e}", err=True)
        click.echo("try verbose mode (-v) to see the tokens parsed so far", err=True)
        sys.exit(1)

    logger.info("parsed %s %s: %d vertices, %d edges", graph.kind, graph.name, len(graph.vertices()), graph.edge_count())

    if inspect:
        click.echo(format_graph(graph))


if __name__ == "__main__":
    main()
