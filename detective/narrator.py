import json

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.theme import Theme

custom_theme = Theme({
    "info": "bold #b0d8e3",       # Pale Cyan
    "text": "default",            # Adaptive
    "dim": "dim",                 # Grey
    "warning": "bold #ffafaf",    # Soft red
    "success": "bold #a3be8c",    # Soft green
})


class Narrator:
    def __init__(self, console, debug=False):
        """
        The Narrator is the VOICE of the game.
        It takes the Director's events (dicts) and writes them to the console.
        """
        self.console = console
        self.debug = debug

    def render(self, events):
        for event in events:
            if self.debug:
                self.console.print(Panel(
                    f"[dim]{escape(json.dumps(event, indent=2, ensure_ascii=False))}[/dim]",
                    title="[DEBUG: Director Event]",
                    border_style="dim",
                ))
            handler = getattr(self, f"_on_{event.get('event_type')}", None)
            if handler is None:
                self.console.print(f"[warning]Unknown event:[/] {escape(str(event.get('event_type')))}")
                continue
            handler(event.get('data', {}))

    def prompt_moves(self, room):
        if room.is_dead_end:
            self.console.print("\n[dim]A dead end. No doors lead further from here.[/dim]")
        left = escape(room.left.name) if room.left else "-"
        right = escape(room.right.name) if room.right else "-"
        self.console.print(
            f"\n[dim]Left: {left} | Right: {right}[/dim]\n"
            "Choose an action: (e) left | (d) right | (s) stop and judge"
        )

    # ==========================================================
    # EXPLORATION EVENTS
    # ==========================================================
    def _on_exploration_started(self, data):
        self.console.print(Panel("[info]The exploration of the mansion begins.[/info]", border_style="info"))

    def _on_room_entered(self, data):
        self.console.print(f"\n[bold]You are in: {escape(data['room'])}[/bold]")

    def _on_clue_collected(self, data):
        self.console.print(f"You found a clue: \"{escape(data['clue'])}\"")
        self.console.print(f"[success]Clue collected.[/success] [dim]({data['total']} in your notebook)[/dim]")

    def _on_clue_already_collected(self, data):
        self.console.print(f"You found a clue: \"{escape(data['clue'])}\"")
        self.console.print("[dim]You already collected this clue; it was not duplicated.[/dim]")

    def _on_no_clue(self, data):
        self.console.print("[dim]There is no clue here.[/dim]")

    def _on_moved(self, data):
        self.console.print(f"[dim]You go {data['direction']}...[/dim]")

    def _on_no_exit(self, data):
        self.console.print(f"[warning]There is no room to the {data['direction']}.[/warning]")

    def _on_invalid_command(self, data):
        self.console.print("[warning]Invalid command.[/warning] Use 'e', 'd' or 's'.")

    def _on_exploration_ended(self, data):
        if data.get('reason') == "stop":
            self.console.print("\nYou decided to end the exploration.")
        else:
            self.console.print("\n[dim]No more input. The exploration ends here.[/dim]")
        self.console.print(Panel(
            f"Exploration finished. Clues collected: {data.get('total', 0)}",
            border_style="info",
        ))

    def _on_error(self, data):
        self.console.print(f"[warning]Director error:[/] {escape(str(data.get('reason')))}")

    # ==========================================================
    # JUDGEMENT
    # ==========================================================
    def show_ledger(self, ledger):
        clues = list(ledger)
        if not clues:
            self.console.print("[dim]Your notebook is empty.[/dim]")
            return
        lines = "\n".join(f"  - {escape(text)}" for text in clues)
        self.console.print(Panel(lines, title="Collected clues (A-Z)", border_style="info"))

    def show_verdict(self, verdict):
        table = Table(title="Suspect tally")
        table.add_column("Suspect")
        table.add_column("Clues", justify="right")
        for name, count in verdict.tallies.items():
            style = "success" if name in verdict.leaders else None
            table.add_row(escape(name), str(count), style=style)
        self.console.print(table)

        if verdict.culprit:
            self.console.print(Panel(
                f"The evidence points to [bold]{escape(verdict.culprit)}[/bold] "
                f"({verdict.top_tally} clue{'s' if verdict.top_tally != 1 else ''}).",
                title="Verdict",
                border_style="success",
            ))
        elif verdict.is_tie:
            names = ", ".join(escape(name) for name in verdict.leaders)
            self.console.print(Panel(
                f"The evidence is split between: {names} ({verdict.top_tally} clues each).",
                title="Verdict",
                border_style="warning",
            ))
        else:
            self.console.print(Panel(
                "No collected clue implicates any suspect.",
                title="Verdict",
                border_style="warning",
            ))

    def show_accusation_menu(self, candidates):
        self.console.print("\n[bold]Who do you accuse?[/bold]")
        for number, name in enumerate(candidates, start=1):
            self.console.print(f" ({number}) {escape(name)}")

    def _on_accusation(self, data):
        supporting = data['supporting_clues']
        if data['outcome'] == "SUSTAINED":
            body = (
                f"{len(supporting)} clues point to {escape(data['suspect'])}. "
                "The accusation is sustained."
            )
            style = "success"
        else:
            body = (
                f"Only {len(supporting)} clue(s) point to {escape(data['suspect'])}; "
                f"at least {data['threshold']} are needed. The accusation is not sustained."
            )
            style = "warning"
        self.console.print(Panel(body, title="Judgement", border_style=style))
