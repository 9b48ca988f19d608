from pathlib import Path
import sys

from dotenv import load_dotenv

# Ensure the src directory is on sys.path when running as a script
_SRC_DIR = Path(__file__).resolve().parents[1]
if str(_SRC_DIR) not in sys.path:
    sys.path.insert(0, str(_SRC_DIR))

from plunder.bootstrap import configure_logging, create_game_service
from plunder.presentation.main_menu import main_menu


def _print_help_surface() -> None:
    print("\nHelp:")
    print("- Pick towns and battle actions by typing their number and pressing ENTER.")
    print("- Set PLUNDER_SEED to replay a voyage, PLUNDER_LOG_LEVEL=DEBUG to trace every roll.")
    print("- Set PLUNDER_LOG_FILE to keep logs out of the game screen.")


def main():
    load_dotenv()
    try:
        configure_logging()
        game_service = create_game_service()
        main_menu(game_service)
    except (KeyboardInterrupt, EOFError):
        print("\nSession ended.")
    except Exception as exc:
        print("An unexpected error occurred. The game closed safely.")
        print(f"Reason: {exc}")
        _print_help_surface()


if __name__ == "__main__":
    main()
