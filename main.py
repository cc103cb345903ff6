import os
import sys
import time

import yaml
from dotenv import load_dotenv
from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt

# Import Engine Components
from detective.casefile import CASE_BASE_PATH, load_case
from detective.director import Director
from detective.errors import CaseFileError
from detective.listener import Listener
from detective.narrator import Narrator, custom_theme
from detective.verdict import judge_accusation, reach_verdict

# --- CONFIGURATION ---
CONFIG_PATH = "config.yaml"
DEFAULT_CASE_ID = "ravenscroft_manor"
DEFAULT_CONFIG = {
    'case_id': DEFAULT_CASE_ID,
    'debug_mode': False,
    'accusation_threshold': 2,
}

load_dotenv()
console = Console(theme=custom_theme)


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def load_config(config_path=CONFIG_PATH):
    """
    Loads config.yaml or creates default if missing.
    DETECTIVE_CASE in the environment (or .env) overrides the case id.
    """
    if not os.path.exists(config_path):
        default_yaml = f"""
# DETECTIVE QUEST CONFIGURATION
# -----------------------------
# case_id picks a folder under detective/data/cases.
# accusation_threshold is how many clues must point to the accused.

case_id: {DEFAULT_CASE_ID}
debug_mode: false
accusation_threshold: 2
"""
        with open(config_path, "w") as f:
            f.write(default_yaml.strip() + "\n")

    with open(config_path, "r") as f:
        config = {**DEFAULT_CONFIG, **(yaml.safe_load(f) or {})}

    if os.getenv("DETECTIVE_CASE"):
        config['case_id'] = os.getenv("DETECTIVE_CASE")
    return config


def toggle_debug(config_path=CONFIG_PATH):
    """Toggles the debug_mode flag in config.yaml. Environment overrides are not written back."""
    with open(config_path, "r") as f:
        stored = yaml.safe_load(f) or {}
    stored["debug_mode"] = not stored.get("debug_mode", False)
    with open(config_path, "w") as f:
        yaml.dump(stored, f, default_flow_style=False)
    return stored["debug_mode"]


def cases_dir():
    return os.getenv("DETECTIVE_CASES_DIR", CASE_BASE_PATH)


def show_welcome_screen(config):
    clear_screen()

    welcome_md = Markdown("""
    # DETECTIVE QUEST

    Walk the mansion. Collect the clues. Name the culprit.
    """)

    console.print(Panel(
        welcome_md,
        border_style="info",
        padding=(1, 2),
        width=60
    ))

    console.print("\n[dim]Select an option:[/dim]\n")

    debug_state = "On" if config.get('debug_mode', False) else "Off"
    menu_options = [
        ("1", f"Start Investigation: {config.get('case_id')}"),
        ("D", f"Toggle Debug Mode (current: {debug_state})"),
        ("Q", "Quit"),
    ]
    for key, label in menu_options:
        console.print(f" [[info]{key}[/info]] {escape(label)}")

    print()
    return Prompt.ask(" >", choices=["1", "D", "Q"], default="1", console=console)


# ============================================
# JUDGEMENT
# ============================================
def ask_accusation(listener, narrator, candidates):
    """
    Single keypress accusation: the player presses a suspect's number.
    Returns the accused name, or None if input ran out.
    """
    narrator.show_accusation_menu(candidates)
    while True:
        choice = listener.listen()
        if choice is None:
            return None
        # ASCII decimals only.
        if choice.isascii() and choice.isdecimal() and 1 <= int(choice) <= len(candidates):
            return candidates[int(choice) - 1]
        narrator.console.print(f"[warning]Pick a number between 1 and {len(candidates)}.[/warning]")


def judge(case, ledger, listener, narrator, threshold=2):
    """Lists the notebook, announces the majority verdict and hears the accusation."""
    narrator.show_ledger(ledger)
    verdict = reach_verdict(ledger, case.directory, case.candidates)
    narrator.show_verdict(verdict)

    accused = ask_accusation(listener, narrator, case.candidates) if case.candidates else None
    if accused is not None:
        narrator.render([judge_accusation(ledger, case.directory, accused, threshold)])
    return verdict


# ============================================
# GAME LOOP
# ============================================
def start_game(config, game_console=None):
    game_console = game_console or console
    game_console.print(Panel("[info]OPENING CASE FILE...[/info]", border_style="info"))

    # 1. LOAD CASE DATA
    try:
        case = load_case(config.get('case_id', DEFAULT_CASE_ID), cases_dir())
    except FileNotFoundError as e:
        game_console.print(Panel(f"[warning]ERROR: Case data not found.[/] Missing file: {escape(str(e))}", border_style="warning"))
        return None
    except yaml.YAMLError as e:
        game_console.print(Panel(f"[warning]YAML STRUCTURE ERROR:[/]\nCheck your case files for indentation or syntax errors.\nDetails: {escape(str(e))}", border_style="warning"))
        return None
    except CaseFileError as e:
        game_console.print(Panel(f"[warning]CASE FILE ERROR:[/]\n{escape(str(e))}", border_style="warning"))
        return None

    # 2. INITIALIZE ENGINE
    director = Director(case.mansion, case.catalog)
    listener = Listener(game_console)
    narrator = Narrator(game_console, debug=config.get('debug_mode', False))

    game_console.print(Panel(
        f"[bold blue]{escape(case.title)}[/bold blue]\n\n{escape(case.intro.strip())}",
        title="CASE OPENED",
        border_style="info"
    ))

    # 3. EXPLORE, THEN JUDGE
    ledger = director.run(listener, narrator)
    return judge(case, ledger, listener, narrator, config.get('accusation_threshold', 2))


# ============================================
# MAIN
# ============================================
def main():
    while True:
        try:
            # Re-load config to get the latest debug state for the menu label
            config = load_config()
            choice = show_welcome_screen(config).upper()

            if choice == "1":
                start_game(config)
                Prompt.ask("\n[dim]Press Enter to return to the menu[/dim]", default="", show_default=False, console=console)
            elif choice == "D":
                state = toggle_debug()
                clear_screen()
                console.print(Panel(
                    f"[info]DEBUG MODE:[/][bold]{' ON' if state else ' OFF'}[/bold]",
                    border_style="info"
                ))
                time.sleep(1)
            elif choice == "Q":
                console.print("\nGoodbye.")
                sys.exit()
        except (EOFError, KeyboardInterrupt):
            console.print("\nGoodbye.")
            break


if __name__ == "__main__":
    main()
