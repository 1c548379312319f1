"""CLI commands for rname.

This module implements the user-facing commands: movie, tv, config and
version.
- Uses Typer for declarative CLI structure and option parsing.
- All output is routed through a Rich Console.
- The rename flow for each command lives in a plain function (rename_movie,
  rename_tv) that takes its collaborators as arguments: the metadata client,
  a Selector for ambiguous choices and a confirmation callable.

Flow: walk the directory, classify files, resolve metadata, build the plan,
show it, confirm, then apply renames, purge and move the directory.
"""

import asyncio
from contextlib import contextmanager
from enum import Enum
from functools import partial
from pathlib import Path
from typing import Annotated, Callable, Iterator, Optional

import typer
from rich.console import Console
from rich.prompt import Prompt

from rname.cli import app, get_console
from rname.cli.renderer import format_candidate, render_plan, render_settings
from rname.cli.utils.prompt_utils import (
    Selector,
    prompt_confirm,
    prompt_select,
    select_one,
)
from rname.core.apply import ApplyResult, execute_plan
from rname.core.errors import NoResultsError, NoVideoFilesError, RnameError
from rname.core.parser import (
    is_english_subtitle,
    is_episode_video,
    is_movie_video,
    parse_episode,
    parse_movie,
)
from rname.core.planner import create_movie_plan
from rname.core.purge import purge_candidates
from rname.core.scanner import regular_files, scan_directory
from rname.core.tv_planner import create_tv_plan, sort_episodes, validate_single_season
from rname.metadata.base import MetadataClient
from rname.metadata.clients.tmdb import TMDBClient, TMDBMovieClient, TMDBShowClient
from rname.metadata.models import MediaMetadata
from rname.models.core import FileEntry
from rname.models.plan import RenamePlan
from rname.utils.config import RnameConfig, get_config_file, load_config, save_config
from rname.utils.sanitize import remove_trailing_slash

Confirm = Callable[[str], bool]


class ExitCode(int, Enum):
    """Exit codes for CLI commands."""

    SUCCESS = 0
    ERROR = 1


DIRECTORY = Annotated[
    str,
    typer.Argument(help="Directory holding the files to rename."),
]

KEEP = Annotated[
    bool,
    typer.Option("--keep", "-k", help="Keep files in directory that are not renamed."),
]

TMDB_ID = Annotated[
    Optional[str],
    typer.Option("--id", "-i", help="Manually provide TMDb ID (overrides --query)."),
]

QUERY = Annotated[
    Optional[str],
    typer.Option(
        "--query",
        "-q",
        help="Manually enter the search text (quote text with spaces).",
    ),
]

SKIP = Annotated[
    bool,
    typer.Option("--skip", "-s", help="Skip inclusion of episode names in filenames."),
]


def resolve_directory(directory: str) -> Path:
    """Return the absolute path of a user supplied directory argument."""
    return Path(remove_trailing_slash(directory)).expanduser().resolve()


async def resolve_metadata(
    client: MetadataClient,
    query: str,
    tmdb_id: Optional[str],
    selector: Selector,
    width: int,
) -> MediaMetadata:
    """Resolve exactly one metadata record by id or by search.

    Raises:
        EmptyQueryError: If *query* is empty and no id is given.
        NoResultsError: If the search has no results.
        SelectionError: If the selector does not pick a candidate.
    """
    if tmdb_id:
        return await client.details(tmdb_id)
    candidates = await client.search(query)
    if not candidates:
        raise NoResultsError(f'No results found for "{query}"')
    labels = [format_candidate(candidate, width) for candidate in candidates]
    return select_one("Multiple results found", candidates, labels, selector)


def rename_movie(
    root: Path,
    *,
    client: TMDBMovieClient,
    selector: Selector,
    confirm: Confirm,
    console: Console,
    keep: bool = False,
    tmdb_id: Optional[str] = None,
    query: Optional[str] = None,
) -> Optional[ApplyResult]:
    """Rename the movie in *root*.

    Returns:
        The apply result, or None when the confirmation was declined.
    """
    entries = scan_directory(root)
    files = regular_files(entries)

    videos = [parse_movie(entry) for entry in files if is_movie_video(entry)]
    if not videos:
        raise NoVideoFilesError(f"No movie video file found in {root}")
    video = select_one(
        "Multiple video files found",
        videos,
        [v.source_name for v in videos],
        selector,
    )

    search = query or f"{video.title} y:{video.year}"
    metadata = asyncio.run(
        resolve_metadata(client, search, tmdb_id, selector, console.width)
    )

    subtitles = [entry for entry in files if is_english_subtitle(entry)]
    plan = create_movie_plan(video, subtitles, metadata, root)
    return _confirm_and_apply(plan, entries, metadata, client, confirm, console, keep)


def rename_tv(
    root: Path,
    *,
    client: TMDBShowClient,
    selector: Selector,
    confirm: Confirm,
    console: Console,
    keep: bool = False,
    skip: bool = False,
    tmdb_id: Optional[str] = None,
    query: Optional[str] = None,
) -> Optional[ApplyResult]:
    """Rename one season of a TV show in *root*.

    Returns:
        The apply result, or None when the confirmation was declined.
    """
    entries = scan_directory(root)
    files = regular_files(entries)

    episodes = [parse_episode(entry) for entry in files if is_episode_video(entry)]
    season = validate_single_season(episodes)
    episodes = sort_episodes(episodes)

    async def lookup() -> tuple[MediaMetadata, dict[int, str]]:
        metadata = await resolve_metadata(
            client, query or episodes[0].show, tmdb_id, selector, console.width
        )
        if skip:
            return metadata, {}
        titles = await client.episode_titles(metadata.provider_id, season)
        return metadata, titles

    metadata, titles = asyncio.run(lookup())

    subtitles = [entry for entry in files if is_english_subtitle(entry)]
    plan = create_tv_plan(episodes, subtitles, metadata, root, titles, skip_titles=skip)
    return _confirm_and_apply(plan, entries, metadata, client, confirm, console, keep)


def _confirm_and_apply(
    plan: RenamePlan,
    entries: list[FileEntry],
    metadata: MediaMetadata,
    client: TMDBClient,
    confirm: Confirm,
    console: Console,
    keep: bool,
) -> Optional[ApplyResult]:
    console.print(
        f"{metadata.label} - {client.web_url(metadata.provider_id)}",
        markup=False,
        highlight=False,
    )
    render_plan(plan, console=console)
    if not confirm("Rename files as shown above?"):
        console.print("[yellow]Nothing renamed.[/yellow]")
        return None

    purge_paths = (
        [] if keep else purge_candidates(entries, plan.root_dir, plan.original_paths)
    )
    result = execute_plan(plan, purge_paths)
    console.print(
        f"Renamed {result.moved} file(s), deleted {len(result.purged)}, "
        f"moved to {result.final_dir}",
        style="green",
        markup=False,
    )
    return result


def setup_config(console: Console) -> RnameConfig:
    """Prompt for the TMDb API key and persist it."""
    api_key = Prompt.ask("Enter your TMDb API key (v3 auth)", console=console)
    config = RnameConfig(api_key=api_key.strip())
    save_config(config)
    return config


def _ensure_config(console: Console) -> RnameConfig:
    config = load_config()
    if not config.api_key:
        console.print("[yellow]Config not found, initiating setup...[/yellow]")
        config = setup_config(console)
    return config


@contextmanager
def _handle_errors(console: Console) -> Iterator[None]:
    """Turn errors into a red message and a non-zero exit code."""
    try:
        yield
    except typer.Exit:
        raise
    except (RnameError, FileNotFoundError, NotADirectoryError) as e:
        console.print(f"Error: {e}", style="red", markup=False)
        raise typer.Exit(ExitCode.ERROR)
    except Exception as e:
        console.print(
            f"Error: An unexpected error occurred: {e}", style="red", markup=False
        )
        console.print_exception()
        raise typer.Exit(ExitCode.ERROR)


@app.command()
def movie(
    directory: DIRECTORY,
    keep: KEEP = False,
    tmdb_id: TMDB_ID = None,
    query: QUERY = None,
) -> None:
    """Rename a movie."""
    console = get_console()
    with _handle_errors(console):
        config = _ensure_config(console)
        rename_movie(
            resolve_directory(directory),
            client=TMDBMovieClient(config),
            selector=partial(prompt_select, console=console),
            confirm=partial(prompt_confirm, console=console),
            console=console,
            keep=keep,
            tmdb_id=tmdb_id,
            query=query,
        )


@app.command()
def tv(
    directory: DIRECTORY,
    skip: SKIP = False,
    keep: KEEP = False,
    tmdb_id: TMDB_ID = None,
    query: QUERY = None,
) -> None:
    """Rename a tv show."""
    console = get_console()
    with _handle_errors(console):
        config = _ensure_config(console)
        rename_tv(
            resolve_directory(directory),
            client=TMDBShowClient(config),
            selector=partial(prompt_select, console=console),
            confirm=partial(prompt_confirm, console=console),
            console=console,
            keep=keep,
            skip=skip,
            tmdb_id=tmdb_id,
            query=query,
        )


app.command("m", hidden=True, help="Alias of movie.")(movie)
app.command("t", hidden=True, help="Alias of tv.")(tv)


@app.command()
def config(
    show: bool = typer.Option(
        False, "--show", "-s", help="Show current configuration settings."
    ),
) -> None:
    """Setup rname config options."""
    console = get_console()
    with _handle_errors(console):
        if show:
            current = load_config()
            render_settings(
                {"api_key": current.api_key, "config_file": get_config_file()},
                console=console,
            )
        else:
            setup_config(console)
            console.print(f"[green]Setup Complete[/green] ({get_config_file()})")


@app.command()
def version() -> None:
    """Show the version of rname."""
    from rname.__about__ import __version__

    get_console().print(f"rname version: [bold]{__version__}[/bold]")


def main() -> None:
    """Main entry point for the CLI."""
    app()
