"""CLI entry point."""

import typer

from seqparse.cli.parse_cmd import detect_cmd, parse_cmd

app = typer.Typer(
    name="seqparse",
    help="seqparse: FASTA / GenBank parser",
    no_args_is_help=True,
)

app.command(name="parse")(parse_cmd)
app.command(name="detect")(detect_cmd)


if __name__ == "__main__":
    app()
