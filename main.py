#!/usr/bin/env python3
"""Tag cloud generator CLI.

Usage:
    python main.py -i data/importance.txt -o cloud.html -n 100
    python main.py                      # prompts for input, output and count
    python main.py -i book.txt -o book.html -n 50 --max-font 36
"""

import sys
from pathlib import Path

import click

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from config import Config
from core.errors import TagCloudError
from tag_cloud import generate_tag_cloud, validate_word_count


@click.command()
@click.option("-i", "--input", "input_file", prompt="Enter file for input", help="Input text file")
@click.option("-o", "--output", "output_file", prompt="Enter file for output", help="Output HTML file")
@click.option("-n", "--count", "num_words", prompt="Enter number of words to be read", help="Number of words in the cloud")
@click.option("--min-font", default=None, type=int, help="Smallest font size (default 11)")
@click.option("--max-font", default=None, type=int, help="Largest font size (default 48)")
@click.option("--encoding", default=None, help="Encoding of input and output files (default utf-8)")
@click.option("--stylesheet", "stylesheets", multiple=True, help="Stylesheet URL (repeatable, replaces defaults)")
def main(
    input_file: str,
    output_file: str,
    num_words: str,
    min_font: int,
    max_font: int,
    encoding: str,
    stylesheets: tuple,
):
    """Generate an HTML tag cloud of the most frequent words in a text file."""

    try:
        n = validate_word_count(num_words)
    except TagCloudError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    try:
        config = Config.from_env()
        if min_font is not None:
            config.min_font = min_font
        if max_font is not None:
            config.max_font = max_font
        if encoding:
            config.encoding = encoding
        if stylesheets:
            config.stylesheets = list(stylesheets)
        config.validate()
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    try:
        selection = generate_tag_cloud(input_file, output_file, n, config)
    except TagCloudError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Wrote {len(selection)} words to {output_file}")
    click.echo("Completed!")


if __name__ == "__main__":
    main()
