#!filepath: calendar_intervals/cli.py
from typing import Optional

import typer
from rich import print
from rich.markup import escape

from calendar_intervals import __version__
from calendar_intervals.config.app_config import AppConfig
from calendar_intervals.generator import IntervalGenerator
from calendar_intervals.utils.errors import UserInputError
from calendar_intervals.utils.logger import init_logging

app = typer.Typer(help="Calendar-aligned time intervals CLI")


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
def generate(
    begin: str = typer.Argument(..., help="RFC 3339 instant, e.g. 2022-10-29T08:23:45Z"),
    end: str = typer.Argument(..., help="RFC 3339 instant"),
    grouping: Optional[str] = typer.Option(None, "--grouping", "-g", help="per_day | per_week | per_month"),
    offset_west: Optional[int] = typer.Option(None, "--offset-west", help="seconds west of UTC (CEST = -7200)"),
    precision: Optional[str] = typer.Option(None, "--precision", "-p", help="e.g. 1ms, 1us, 1ns"),
    no_extend_begin: bool = typer.Option(False, "--no-extend-begin"),
    no_extend_end: bool = typer.Option(False, "--no-extend-end"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="YAML config path"),
):
    """
    打印 [begin, end] 之间的 interval（UTC），每行一个
    """
    try:
        cfg = AppConfig.load(path=config)
        init_logging(cfg.log)

        gen = IntervalGenerator.from_config(cfg.generator)
        if grouping is not None:
            gen = gen.with_grouping(grouping)
        if offset_west is not None:
            gen = gen.with_offset_west_secs(offset_west)
        if precision is not None:
            gen = gen.with_precision(precision)
        if no_extend_begin:
            gen = gen.without_extended_begin()
        if no_extend_end:
            gen = gen.without_extended_end()

        intervals = gen.get_intervals(begin, end)
    except (UserInputError, ValueError, FileNotFoundError) as e:
        print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=2)

    for b, e in intervals:
        print(f"{b.isoformat()}  {e.isoformat()}")


if __name__ == "__main__":
    app()
