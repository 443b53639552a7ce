"""CLI entrypoint: Typer app definition and command registration"""

import typer

from chapterize.cli.commands import add_book_cmd, books_cmd, chapters_cmd, import_cmd, init_cmd, parse_cmd


app = typer.Typer(name="chapterize", no_args_is_help=True, help="Split manuscripts into chapters and import them into books")

app.command(name="init")(init_cmd)
app.command(name="add-book")(add_book_cmd)
app.command(name="books")(books_cmd)
app.command(name="parse")(parse_cmd)
app.command(name="import")(import_cmd)
app.command(name="chapters")(chapters_cmd)
