import logging
import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .adapters.memory_store import InMemorySegmentMapStore
from .application.planning import get_relevant_segments
from .application.use_cases import commit_fetched, plan_fetch
from .application.utils import RANGE_SEP, format_range, parse_range, parse_step
from .domain.models import Range

console = Console()
err_console = Console(stderr=True)


class RangeParam(click.ParamType):
    name = f"START{RANGE_SEP}END"

    def convert(self, value, param, ctx):
        if isinstance(value, Range):
            return value
        try:
            return parse_range(value)
        except ValueError as e:
            self.fail(str(e), param, ctx)


RANGE = RangeParam()


def _ranges_table(title: str, ranges) -> Table:
    table = Table(title=title)
    table.add_column("#", justify="right")
    table.add_column("range")
    for i, r in enumerate(ranges, 1):
        table.add_row(str(i), escape(format_range(r)))
    return table


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr")
def cli(verbose):
    """tscache: plan and record fetched ranges of a time-series cache."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
        )


@cli.command("missing")
@click.option("--have", "have", type=RANGE, multiple=True, help="Already cached range; repeat for several")
@click.option("--request", "requested", type=RANGE, required=True, help="Range you want data for")
@click.option("--step", type=str, default="", help="Split gaps into chunks of this width: a number, or a duration (7d, 12h, PT2H) for date bounds")
def missing_cmd(have, requested, step):
    """Print the parts of --request not covered by the --have ranges."""
    try:
        store = InMemorySegmentMapStore()
        cache_map = commit_fetched(store, have)
        chunk = parse_step(step, requested.start) if step else None
        gaps = plan_fetch(store, requested, step=chunk)
        overlap = get_relevant_segments(cache_map, requested)
    except (ValueError, TypeError, RuntimeError) as e:
        raise click.ClickException(str(e))

    if not gaps:
        console.print(f"[green]covered[/]: {escape(format_range(requested))} ({len(overlap)} segment(s))")
        return
    console.print(_ranges_table("chunks to fetch" if chunk is not None else "missing", gaps))
    console.print(f"[bold]summary[/]: gaps={len(gaps)}  overlapping_segments={len(overlap)}")


@cli.command("merge")
@click.argument("ranges", type=RANGE, nargs=-1, required=True)
def merge_cmd(ranges):
    """Record RANGES in order and print the coalesced segments."""
    try:
        cache_map = commit_fetched(InMemorySegmentMapStore(), ranges)
    except (ValueError, TypeError, RuntimeError) as e:
        raise click.ClickException(str(e))
    console.print(_ranges_table("segments", cache_map.segments))
    console.print(f"[bold]summary[/]: segments={len(cache_map.segments)}  history={len(cache_map.segment_history)}")


if __name__ == "__main__":
    cli()
