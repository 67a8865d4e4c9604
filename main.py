#!/usr/bin/env python3
"""
Watchlist command line application
Main features:
1. List, add, edit and remove movies and shows
2. Show counts by watch status
"""
import logging

import click
from colorama import Fore, Style

from config import Config
from watchlist_manager import EntryDraft, EntryNotFoundError, ValidationError, create_service
from watchlist_manager.display import TableView, display_counts, display_view, print_notice


def setup_logging(verbose: bool):
    """Configure logging; quiet unless asked"""
    level = getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO) if verbose else logging.WARNING
    handlers = [logging.StreamHandler()]
    if Config.LOG_FILE:
        handlers.append(logging.FileHandler(Config.LOG_FILE))
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def _position(index: int) -> int:
    """Convert the 1-based position shown to users to a list index."""
    return index - 1


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Show log output')
@click.pass_context
def cli(ctx, verbose):
    """Movie and show watchlist"""
    setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj['service'] = create_service(notify=print_notice, confirm=click.confirm, view=TableView(enabled=False))


@cli.command(name='list')
@click.pass_context
def list_entries(ctx):
    """List the watchlist"""
    service = ctx.obj['service']
    display_view(service.view_model())


@cli.command()
@click.option('--title', '-t', prompt=True, help='Movie or show title')
@click.option('--status', '-s', type=click.Choice(Config.STATUSES), prompt=True, help='Watch status')
@click.option('--genre', '-g', type=click.Choice(Config.GENRES), prompt=True, help='Genre')
@click.option('--season', help='Season number')
@click.option('--episode', help='Episode number')
@click.option('--image', help='Poster image URL')
@click.pass_context
def add(ctx, title, status, genre, season, episode, image):
    """Add a movie or show"""
    service = ctx.obj['service']
    service.view.enabled = True
    draft = EntryDraft.from_form({
        'title': title,
        'status': status,
        'genre': genre,
        'season': season,
        'episode': episode,
        'image': image,
    })
    try:
        service.submit(draft)
    except ValidationError as exc:
        ctx.exit(_fail(f"Field: {exc.field}"))


@cli.command()
@click.argument('index', type=int)
@click.option('--title', '-t', help='New title')
@click.option('--status', '-s', type=click.Choice(Config.STATUSES), help='New watch status')
@click.option('--genre', '-g', type=click.Choice(Config.GENRES), help='New genre')
@click.option('--season', help='Season number (empty string clears it)')
@click.option('--episode', help='Episode number (empty string clears it)')
@click.option('--image', help='Poster image URL (empty string clears it)')
@click.pass_context
def edit(ctx, index, title, status, genre, season, episode, image):
    """Edit the entry at position INDEX"""
    service = ctx.obj['service']
    try:
        service.begin_edit(_position(index))
    except EntryNotFoundError as exc:
        ctx.exit(_fail(str(exc)))

    form = service.session.draft_for_edit(service.store).to_dict()
    changes = {
        'title': title,
        'status': status,
        'genre': genre,
        'season': season,
        'episode': episode,
        'image': image,
    }
    form.update({key: value for key, value in changes.items() if value is not None})
    service.view.enabled = True

    try:
        service.submit(form)
    except ValidationError as exc:
        ctx.exit(_fail(f"Field: {exc.field}"))


@cli.command()
@click.argument('index', type=int)
@click.option('--yes', '-y', is_flag=True, help='Do not ask for confirmation')
@click.pass_context
def remove(ctx, index, yes):
    """Remove the entry at position INDEX"""
    service = ctx.obj['service']
    confirm = (lambda message: True) if yes else None
    service.view.enabled = True
    try:
        removed = service.remove(_position(index), confirm=confirm)
    except EntryNotFoundError as exc:
        ctx.exit(_fail(str(exc)))
    if removed is None:
        print("Nothing removed")


@cli.command()
@click.pass_context
def stats(ctx):
    """Show counts by watch status"""
    service = ctx.obj['service']
    print(f"{Fore.CYAN}=== Statistics ==={Style.RESET_ALL}")
    display_counts(service.counts())


@cli.command()
def config_check():
    """Check configuration"""
    print(f"{Fore.CYAN}=== Configuration ==={Style.RESET_ALL}")

    print(f"Storage backend: {Config.WATCHLIST_BACKEND}")
    if Config.WATCHLIST_BACKEND == 'json':
        print(f"Watchlist file: {Config.WATCHLIST_FILE}")
    elif Config.WATCHLIST_BACKEND == 'redis':
        print(f"Redis URL: {Config.REDIS_URL}")
    print(f"Storage key: {Config.WATCHLIST_KEY}")
    print(f"Statuses: {', '.join(Config.STATUSES)}")
    print(f"Genres: {', '.join(Config.GENRES)}")
    print(f"Log level: {Config.LOG_LEVEL}")


def _fail(message: str) -> int:
    print(f"{Fore.RED}{message}{Style.RESET_ALL}")
    return 1


if __name__ == '__main__':
    cli()
