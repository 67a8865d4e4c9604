"""Terminal rendering of the watchlist."""

from typing import Dict

from colorama import Fore, Style, init
from tabulate import tabulate

from .models import NoticeKind
from .projector import Counts, WatchlistView, status_label

# Initialize colorama
init()

STATUS_COLORS = {
    'watching': Fore.CYAN,
    'completed': Fore.GREEN,
    'on-hold': Fore.YELLOW,
    'dropped': Fore.RED,
}


def print_notice(message: str, kind: NoticeKind) -> None:
    if kind == NoticeKind.ERROR:
        print(f"{Fore.RED}⚠️  {message}{Style.RESET_ALL}")
    else:
        print(f"{Fore.GREEN}✅ {message}{Style.RESET_ALL}")


def colored_status(status: str) -> str:
    color = STATUS_COLORS.get(status, '')
    return f"{color}{status_label(status)}{Style.RESET_ALL}" if color else status_label(status)


class TableView:
    """Prints the watchlist as a grid each time it changes."""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled

    def render(self, view: WatchlistView) -> None:
        if not self.enabled:
            return
        display_view(view)


def display_view(view: WatchlistView) -> None:
    if view.is_empty:
        print(f"\n{Fore.YELLOW}No movies in your watchlist yet{Style.RESET_ALL}")
        print("Add your first movie with the 'add' command to get started!")
        return

    headers = ['#', 'Title', 'Season', 'Episode', 'Status', 'Genre', 'Image', 'Added']
    table_data = []
    for card in view.cards:
        entry = card.entry
        marker = f"{card.index + 1}*" if card.is_editing else str(card.index + 1)
        table_data.append([
            marker,
            entry.title,
            entry.season or '-',
            entry.episode or '-',
            colored_status(entry.status),
            entry.genre,
            entry.image or 'No Image Available',
            entry.date_added[:10],
        ])

    print(f"\n{Fore.CYAN}=== Watchlist ({len(view.cards)}) ==={Style.RESET_ALL}")
    print(tabulate(table_data, headers=headers, tablefmt='grid'))


def display_counts(counts: Counts) -> None:
    rows: Dict[str, int] = counts.to_dict()
    table_data = [[status_label(name).title(), value] for name, value in rows.items()]
    print(tabulate(table_data, headers=['', 'Count'], tablefmt='grid'))
