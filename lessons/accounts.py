"""A file-backed store of user accounts with a login menu."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterator, Optional, Sequence, Union

DEFAULT_RECORDS = "records.txt"


class AccountStore:
    """Keeps user ids and passwords as whitespace-separated pairs in a file."""

    def __init__(self, path: Union[str, Path] = DEFAULT_RECORDS) -> None:
        self.path = Path(path)

    def records(self) -> Iterator[tuple[str, str]]:
        """Yield every complete (user id, password) pair in the file."""
        try:
            text = self.path.read_text()
        except FileNotFoundError:
            return
        words = iter(text.split())
        yield from zip(words, words)

    def register(self, user_id: str, password: str) -> None:
        """Append an account to the file."""
        for value in (user_id, password):
            if not value or any(ch.isspace() for ch in value):
                raise ValueError("user id and password must be single words")
        with self.path.open("a") as handle:
            handle.write(f"{user_id} {password}\n")

    def authenticate(self, user_id: str, password: str) -> bool:
        """Return True when the pair is recorded."""
        return any(record == (user_id, password) for record in self.records())

    def recover(self, user_id: str) -> Optional[str]:
        """Return the password recorded for ``user_id``, or None."""
        return next((pw for uid, pw in self.records() if uid == user_id), None)


def _tokens() -> Iterator[str]:
    for line in sys.stdin:
        yield from line.split()


def _next(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise EOFError from None


def _menu() -> None:
    print(" --------------------------------------------")
    print("         Welcome to the login page           ")
    print("---------------------------------------------")
    print(" ", end="")
    print("\t| Press 1 to LOGIN            |")
    print("\t| Press 2 to REGISTER         |")
    print("\t| Press 3 to FORGET PASSWORD  |")
    print("\t| Press 4 to EXIT             |")
    print()
    print("----> Please enter your choice")


def _login(store: AccountStore, tokens: Iterator[str]) -> None:
    print("\t\t\t Please enter the username and password : ")
    print("\t\t\t USERNAME ", end="", flush=True)
    user_id = _next(tokens)
    print("\t\t\t PASSWORD ", end="", flush=True)
    secret_word = _next(tokens)
    if store.authenticate(user_id, secret_word):
        print(f"{user_id} Your login is successfull \n Thanks for logging in !! ")
    else:
        print("             LOGIN ERROR                ")
        print()
        print("----> Please check your username and password")


def _register(store: AccountStore, tokens: Iterator[str]) -> None:
    print("\t\t\t Enter the USERNAME : ", end="", flush=True)
    user_id = _next(tokens)
    print("\t\t\t Enter the PASSWORD : ", end="", flush=True)
    store.register(user_id, _next(tokens))
    print("\n\t\t\t You have successfully registered  ")


def _forget(store: AccountStore, tokens: Iterator[str]) -> None:
    print("\t\t\t You forgot the password no worries ")
    print("Press 1 to search your id by username ")
    print("Press 2 to go back to the main menu ")
    print("\t\t\t Enter your choice ")
    option = _next(tokens)
    if option == "1":
        print("\n\t\t Enter the username that you remember : ")
        found = store.recover(_next(tokens))
        if found is not None:
            print("\n\n Your account is found \n")
            print(f"Your password is : {found}")
        else:
            print("\n\t Sorry , your account was not found ! ")
    elif option != "2":
        print("\t\t\t Wrong choice ! please try again ")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the login menu until the user chooses to exit."""
    parser = argparse.ArgumentParser(prog="accounts", description="Login system.")
    parser.add_argument("--records", default=DEFAULT_RECORDS, help="records file")
    args = parser.parse_args(argv)
    store = AccountStore(args.records)
    tokens = _tokens()
    actions = {"1": _login, "2": _register, "3": _forget}
    try:
        while True:
            _menu()
            choice = _next(tokens)
            print()
            if choice == "4":
                print("\t\t\t Thank you ")
                return 0
            action = actions.get(choice)
            if action is None:
                print("----> Please select from the options given above ")
                continue
            try:
                action(store, tokens)
            except ValueError as error:
                print(error)
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())