"""Interactive prompts used by the CLI commands.

Choosing one of several candidates is modelled as a ``Selector``: a callable
taking a message and a list of labels and returning the chosen index. The
commands receive the selector as a parameter, so tests can pass a plain
function instead of prompting.
"""

from typing import Callable, Sequence, TypeVar

from rich.console import Console
from rich.prompt import Confirm, IntPrompt

from rname.core.errors import SelectionError

T = TypeVar("T")

Selector = Callable[[str, Sequence[str]], int]


def prompt_select(
    message: str, labels: Sequence[str], console: Console | None = None
) -> int:
    """Print numbered *labels* and ask for one of them.

    Returns:
        The zero-based index of the chosen label.
    """
    console = console or Console()
    console.print(f"[bold]{message}[/bold]")
    for number, label in enumerate(labels, start=1):
        console.print(f"{number:>3}) {label}", markup=False, highlight=False)
    choice = IntPrompt.ask(
        "Select",
        console=console,
        choices=[str(n) for n in range(1, len(labels) + 1)],
        show_choices=False,
    )
    return choice - 1


def select_one(
    message: str,
    options: Sequence[T],
    labels: Sequence[str],
    selector: Selector,
) -> T:
    """Resolve *options* to exactly one, asking *selector* only when ambiguous.

    Raises:
        SelectionError: If there is nothing to choose from or the selector
            returns an index outside *options*.
    """
    if not options:
        raise SelectionError(f"{message}: nothing to select from")
    if len(options) == 1:
        return options[0]
    index = selector(message, labels)
    if not 0 <= index < len(options):
        raise SelectionError(f'Failed to select option, "{index}"')
    return options[index]


def prompt_confirm(message: str, console: Console | None = None) -> bool:
    """Ask a yes/no question, defaulting to no."""
    return Confirm.ask(message, console=console or Console(), default=False)
