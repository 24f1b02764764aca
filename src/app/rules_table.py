from __future__ import annotations

from tabulate import tabulate

from protocol import MoveSet, OutcomeTable


def format_menu(moves: MoveSet) -> str:
    lines = ["Available moves:"]
    for index, move in enumerate(moves, start=1):
        lines.append(f"{index} - {move}")
    lines.append("0 - exit")
    lines.append("? - help")
    return "\n".join(lines)


def format_help(table: OutcomeTable) -> str:
    """Render the outcome table; rows are your move, columns the computer's."""
    headers = ["Moves", *table.moves]
    rows = [[move, *labels] for move, labels in table.rows()]
    return tabulate(rows, headers=headers, tablefmt="grid", disable_numparse=True)
