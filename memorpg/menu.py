"""The title menu."""

from __future__ import annotations

from memorpg.console import Console

_MENU = (
    "\n=================================\n"
    "       MEMO-RPG : THE GAME       \n"
    "=================================\n"
    "1. Play a New Game\n"
    "2. Load a Saved Game\n"
    "3. View High Scores\n"
    "4. Quit\n"
    "=================================\n"
    "Your choice (1-4) : "
)


def main_menu(console: Console) -> bool:
    """Show the menu until the player picks one; True to play, False to quit."""
    while True:
        console.write(_MENU)
        try:
            choice = console.read_int()
        except ValueError:
            console.write("\n[Error] Please enter a valid number.\n")
            continue

        if choice == 1:
            console.write("\n>>> Starting a new adventure...\n")
            return True
        if choice == 2:
            console.write("\n[Feature in progress] Loading save file...\n")
        elif choice == 3:
            console.write("\n[Feature in progress] Fetching scores...\n")
        elif choice == 4:
            console.write("\nExiting MEMO-RPG. See you soon!\n")
            return False
        else:
            console.write("\n[Error] Invalid choice. Please choose between 1 and 4.\n")