"""Interactive record store whose additions are signed and verified.

A session performs a key-exchange handshake, derives a symmetric key and
IV for the stream cipher, and signs every new record before accepting it.
An optional man-in-the-middle simulation tampers with the record between
signing and verification.
"""

from __future__ import annotations

import random
import string
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from . import ecdsa, lea, mceliece

MAX_RECORDS = 10
MAX_ENTRY_LEN = 1024
SYMMETRIC_KEY_SIZE = 16

_DEFAULT_RECORDS = (
    "This is confidential record #1",
    "This is confidential record #2",
    "This is confidential record #3",
)


class DatabaseFullError(Exception):
    """Raised when a record is added to a full database."""


class Database:
    """An in-memory list of at most MAX_RECORDS text records."""

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self._entries: list[str] = []
        for entry in entries:
            self.add(entry)

    def add(self, entry: str) -> None:
        """Append a record; raises DatabaseFullError or ValueError."""
        if len(self._entries) >= MAX_RECORDS:
            raise DatabaseFullError("Database full, cannot add more.")
        if len(entry) >= MAX_ENTRY_LEN:
            raise ValueError(f"record must be shorter than {MAX_ENTRY_LEN} characters")
        self._entries.append(entry)

    def remove(self, number: int) -> str:
        """Remove and return the record with 1-based ``number``."""
        if not 1 <= number <= len(self._entries):
            raise IndexError(f"no record number {number}")
        return self._entries.pop(number - 1)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)


def default_database() -> Database:
    """Return a database holding the three initial records."""
    return Database(_DEFAULT_RECORDS)


def format_records(database: Database) -> str:
    """Render the numbered record listing."""
    lines = [f"\nRecords (total {len(database)}):\n"]
    lines.extend(f"{number:2d}: {entry}\n" for number, entry in enumerate(database, 1))
    return "".join(lines)


def _on_off(flag: bool) -> str:
    return "ON" if flag else "OFF"


class Session:
    """Keys, settings and the database for one interactive session."""

    def __init__(
        self,
        database: Database | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.database = database if database is not None else default_database()
        self.mitm = False
        self.verbose = False
        self.mceliece = mceliece.generate_keypair(self.rng)
        self.symmetric_key = bytes(
            self.rng.getrandbits(8) for _ in range(SYMMETRIC_KEY_SIZE)
        )
        self.cipher = lea.set_key(self.symmetric_key)
        self.iv = bytes(self.rng.getrandbits(8) for _ in range(lea.BLOCK_SIZE))
        self.keypair = ecdsa.keygen(self.rng)

    def add_record(self, text: str) -> list[str]:
        """Sign, verify and store a record; return the messages produced."""
        if len(self.database) >= MAX_RECORDS:
            return ["Database full, cannot add more."]

        text = text[: MAX_ENTRY_LEN - 1]
        payload = text.encode("utf-8")
        messages: list[str] = []

        signature = ecdsa.sign(self.keypair, payload, self.rng)
        if self.verbose:
            messages.append(
                f"[VERBOSE] ECDSA Signature: r={signature.r}, s={signature.s}"
            )

        witness = payload
        if self.mitm:
            messages.append("[MITM] flipping first byte of the record...")
            if witness:
                witness = bytes([witness[0] ^ 0xFF]) + witness[1:]

        ok = ecdsa.verify(self.keypair.public_key, witness, signature)
        if self.verbose:
            messages.append(
                f"[VERBOSE] Verification result: {'PASS' if ok else 'FAIL'}"
            )
        if not ok:
            messages.append(
                "Signature verification failed! Tamper detected, record rejected."
            )
            return messages

        self.database.add(text)
        messages.append("Record added and verified.")
        return messages

    def remove_record(self, number: int | None) -> list[str]:
        """Remove the record with 1-based ``number``; return the messages."""
        if not len(self.database):
            return ["No records to remove."]
        if number is None:
            return ["Invalid selection."]
        try:
            self.database.remove(number)
        except IndexError:
            return ["Invalid selection."]
        return ["Record removed."]

    def toggle_mitm(self) -> list[str]:
        """Switch the tampering simulation on or off."""
        self.mitm = not self.mitm
        return [f"MITM simulation is now {_on_off(self.mitm)}"]

    def toggle_verbose(self) -> list[str]:
        """Switch verbose output on or off."""
        self.verbose = not self.verbose
        messages = [f"Verbose mode is now {_on_off(self.verbose)}"]
        if self.verbose:
            messages.extend(self.verbose_info())
        return messages

    def verbose_info(self) -> list[str]:
        """Describe the algorithms and key material in use."""
        public = self.keypair.public_key
        return [
            f"[VERBOSE] Algorithms: McEliece (n={mceliece.N},k={mceliece.K},"
            f"t={mceliece.T}), LEA-OFB, ECDSA",
            f"[VERBOSE] Symmetric key (hex): {self.symmetric_key.hex()}",
            f"[VERBOSE] IV (hex): {self.iv.hex()}",
            f"[VERBOSE] ECDSA public key: (x={public.x}, y={public.y})",
        ]


class _Scanner:
    """Reads whitespace-delimited tokens, integers and lines from a stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending = ""

    def _getc(self) -> str:
        if self._pending:
            char, self._pending = self._pending, ""
            return char
        return self._stream.read(1)

    def _ungetc(self, char: str) -> None:
        if char:
            self._pending = char

    def _skip_whitespace(self) -> None:
        while True:
            char = self._getc()
            if not char or not char.isspace():
                self._ungetc(char)
                return

    def token(self, limit: int) -> str | None:
        self._skip_whitespace()
        chars: list[str] = []
        while len(chars) < limit:
            char = self._getc()
            if not char or char.isspace():
                self._ungetc(char)
                break
            chars.append(char)
        return "".join(chars) or None

    def integer(self) -> int | None:
        self._skip_whitespace()
        char = self._getc()
        sign = ""
        if char in ("+", "-"):
            sign, char = char, self._getc()
        digits: list[str] = []
        while char and char in string.digits:
            digits.append(char)
            char = self._getc()
        self._ungetc(char)
        if not digits:
            return None
        return int(sign + "".join(digits))

    def char(self) -> str:
        return self._getc()

    def line(self, size: int) -> str:
        chars: list[str] = []
        while len(chars) < size - 1:
            char = self._getc()
            if not char:
                break
            chars.append(char)
            if char == "\n":
                break
        return "".join(chars)


def _authenticate(user: str, password: str) -> bool:
    """Accept every user; no credential store is configured."""
    return True


def _menu(session: Session) -> str:
    return (
        "\nMenu:\n"
        " 1. View records\n"
        " 2. Add record\n"
        " 3. Remove record\n"
        f" 4. Toggle MITM (currently {_on_off(session.mitm)})\n"
        f" 5. Toggle Verbose (currently {_on_off(session.verbose)})\n"
        " 6. Exit\n"
        "Choice: "
    )


def run(
    input_stream: TextIO | None = None,
    output: TextIO | None = None,
    rng: random.Random | None = None,
) -> int:
    """Run the interactive menu; return the process exit status."""
    input_stream = input_stream if input_stream is not None else sys.stdin
    output = output if output is not None else sys.stdout
    scanner = _Scanner(input_stream)

    def say(text: str) -> None:
        output.write(text)
        output.flush()

    def say_lines(lines: Iterable[str]) -> None:
        say("".join(f"{line}\n" for line in lines))

    say("Username: ")
    user = scanner.token(31) or ""
    say("Password: ")
    password = scanner.token(31) or ""
    if not _authenticate(user, password):
        say("Authentication failed!\n")
        return 1
    say("Authentication successful!\n")

    session = Session(default_database(), rng)
    if session.verbose:
        say_lines(session.verbose_info())

    while True:
        say(_menu(session))
        choice = scanner.integer()
        if choice is None:
            break
        if choice == 1:
            say(format_records(session.database))
        elif choice == 2:
            if len(session.database) >= MAX_RECORDS:
                say_lines(session.add_record(""))
                continue
            say("Enter new record: ")
            scanner.char()
            text = scanner.line(MAX_ENTRY_LEN)
            if text.endswith("\n"):
                text = text[:-1]
            say_lines(session.add_record(text))
        elif choice == 3:
            if not len(session.database):
                say_lines(session.remove_record(None))
                continue
            say(format_records(session.database))
            say("Enter record number to remove: ")
            say_lines(session.remove_record(scanner.integer()))
        elif choice == 4:
            say_lines(session.toggle_mitm())
        elif choice == 5:
            say_lines(session.toggle_verbose())
        elif choice == 6:
            say("Goodbye!\n")
            break
        else:
            say("Invalid option.\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Start an interactive session on standard input and output."""
    return run(sys.stdin, sys.stdout, random.Random())


if __name__ == "__main__":
    sys.exit(main())