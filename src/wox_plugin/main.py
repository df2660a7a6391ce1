from typer import Argument, Exit, Option, Typer
from typing import Annotated
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .models import Item
from .results import ResultList
from .search import EmptyQueryError, RankOptionsError, SortBy, rank_results, score

app = Typer(help="Try out the fuzzy ranking used by Wox plugins.")


@app.command("score")
def score_command(
    query: Annotated[str, Argument(help="Query typed in the launcher.")],
    candidate: Annotated[str, Argument(help="Text to score against the query.")],
) -> None:
    console = Console()
    console.print(f"{score(query, candidate):.4f}")


@app.command("rank")
def rank_command(
    query: Annotated[str, Argument(help="Query typed in the launcher.")],
    candidates: Annotated[list[str], Argument(help="Result titles to rank.")],
    min_score: Annotated[
        float,
        Option("--min-score", help="Drop results scoring at or below this value (0 keeps all)."),
    ] = 0.0,
    max_results: Annotated[
        int,
        Option("--max-results", "-n", help="Keep at most this many results (0 keeps all)."),
    ] = 0,
) -> None:
    console = Console()
    results = ResultList(Item.build(title) for title in candidates)
    try:
        rank_results(
            results,
            query,
            sort_by=SortBy.TITLE,
            min_score=min_score,
            max_results=max_results,
        )
    except (RankOptionsError, EmptyQueryError) as exc:
        console.print(f"[bold red]{escape(str(exc))}[/]")
        raise Exit(code=2)

    table = Table(title=f"Results for {query!r}", title_justify="left")
    table.add_column("#", justify="right", style="bold")
    table.add_column("Score", justify="right", style="cyan")
    table.add_column("Title")
    for position, item in enumerate(results, start=1):
        table.add_row(str(position), f"{score(query, item.title):.2f}", item.title)
    console.print(table)
