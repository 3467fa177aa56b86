"""Interactive terminal menu for the word dictionary."""

from __future__ import annotations

from worddict.constants import NOT_FOUND_MESSAGE
from worddict.dictionary import Dictionary

MENU = """
Menu:
1. Add Word
2. Query Word
3. Exit"""


def _add_word(dictionary: Dictionary) -> None:
    word = input("Enter the word: ").strip()
    meaning = input("Enter the meaning: ").strip()
    try:
        dictionary.add_word(word, meaning)
    except OSError as exc:
        print(f"Error writing to dictionary file: {exc}")
        return
    except ValueError as exc:
        print(f"Invalid word: {exc}")
        return
    print(f"Word '{word}' added to the dictionary.")


def _query_word(dictionary: Dictionary) -> None:
    word = input("Enter the word to query: ").strip()
    meaning = dictionary.query_word(word)
    print("Meaning:", NOT_FOUND_MESSAGE if meaning is None else meaning)


def run_cli(dictionary: Dictionary) -> None:
    """Run the add/query menu until the user exits."""
    print("Welcome to the Word Dictionary!")

    while True:
        print(MENU)
        try:
            inp = input("Enter your choice: ").strip()
            try:
                choice = int(inp)
            except ValueError:
                print("Invalid input. Please enter a number.")
                continue

            if choice == 1:
                _add_word(dictionary)
            elif choice == 2:
                _query_word(dictionary)
            elif choice == 3:
                break
            else:
                print("Invalid choice. Please try again.")
        except (EOFError, KeyboardInterrupt):
            print()
            break

    print("Exiting. Goodbye!")
