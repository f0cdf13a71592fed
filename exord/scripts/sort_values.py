import sys
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv
from loguru import logger
from typing_extensions import Annotated

from exord.tools.order import DuplicateValueError, ExplicitOrder, IncomparableValueError, UnknownPolicy
from exord.tools.utils import configure_logger, parse_values, read_values

app = typer.Typer()

OrderOption = Annotated[str, typer.Option("--order", help="Values in their explicit order, joined by the separator (e.g., 'low,medium,high').", envvar="EXORD_ORDER")]
UnknownOption = Annotated[Optional[UnknownPolicy], typer.Option(help="Where to place values missing from the order. If `None` such values are reported as errors.", case_sensitive=False, envvar="EXORD_UNKNOWN")]
SeparatorOption = Annotated[str, typer.Option(help="Separator used in `--order`.", envvar="EXORD_SEPARATOR")]
InputOption = Annotated[Optional[Path], typer.Option("--input", help="File with one value per line. Reads from stdin if omitted.", exists=True, file_okay=True, dir_okay=False)]
VerboseOption = Annotated[bool, typer.Option(help="Log debug messages to stderr.")]
LogDirOption = Annotated[Optional[Path], typer.Option(help="Directory where an `out.log` file is written.", dir_okay=True, file_okay=False)]


@app.callback()
def main(
    env_file: Annotated[Optional[Path], typer.Option(help="Path to a dotenv file with EXORD_* defaults.", exists=True, file_okay=True, dir_okay=False)] = None,
):
    """Sort and compare values by an explicit order."""
    if env_file is not None:
        load_dotenv(dotenv_path=env_file)


def _build_order(order: str, unknown: Optional[UnknownPolicy], separator: str) -> ExplicitOrder:
    values = parse_values(order, separator=separator)
    try:
        explicit_order = ExplicitOrder(values, unknown=unknown)
    except DuplicateValueError as e:
        logger.error(str(e))
        raise typer.Exit(code=1)

    logger.debug(f"Using explicit order '{explicit_order}' with unknown={unknown.value if unknown else None}.")
    return explicit_order


def _load_input(input_path: Optional[Path]) -> List[str]:
    if input_path is None:
        return read_values(sys.stdin)
    with open(input_path, "r") as f:
        return read_values(f)


@app.command("sort", help="Print input values arranged by the explicit order, one per line.")
def sort_values(
    order: OrderOption,
    unknown: UnknownOption = None,
    separator: SeparatorOption = ",",
    input_path: InputOption = None,
    reverse: Annotated[bool, typer.Option(help="Print values from the last to the first.")] = False,
    verbose: VerboseOption = False,
    log_dir: LogDirOption = None,
):
    configure_logger(log_dir=log_dir, verbose=verbose)

    explicit_order = _build_order(order, unknown, separator)
    values = _load_input(input_path)

    try:
        result = explicit_order.sort(values)
    except IncomparableValueError as e:
        logger.error(str(e))
        raise typer.Exit(code=1)

    logger.debug(f"Sorted {len(result)} values.")
    for value in reversed(result) if reverse else result:
        typer.echo(value)


@app.command("compare", help="Print the comparison of two values: negative, zero or positive.")
def compare_values(
    left: Annotated[str, typer.Argument(help="Left value.")],
    right: Annotated[str, typer.Argument(help="Right value.")],
    order: OrderOption,
    unknown: UnknownOption = None,
    separator: SeparatorOption = ",",
    verbose: VerboseOption = False,
    log_dir: LogDirOption = None,
):
    configure_logger(log_dir=log_dir, verbose=verbose)

    explicit_order = _build_order(order, unknown, separator)

    try:
        result = explicit_order.compare(left, right)
    except IncomparableValueError as e:
        logger.error(str(e))
        raise typer.Exit(code=1)

    typer.echo(result)


@app.command("check", help="Exit with code 0 if input values follow the explicit order, and 1 otherwise.")
def check_values(
    order: OrderOption,
    unknown: UnknownOption = None,
    separator: SeparatorOption = ",",
    input_path: InputOption = None,
    verbose: VerboseOption = False,
    log_dir: LogDirOption = None,
):
    configure_logger(log_dir=log_dir, verbose=verbose)

    explicit_order = _build_order(order, unknown, separator)
    values = _load_input(input_path)

    try:
        ordered = explicit_order.is_ordered(values)
    except IncomparableValueError as e:
        logger.error(str(e))
        raise typer.Exit(code=1)

    typer.echo("ordered" if ordered else "not ordered")
    if not ordered:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
