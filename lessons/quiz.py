"""A timed multiple-choice quiz read from question files."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional, Sequence, TextIO, Union

VALID_ANSWERS = ("A", "B", "C", "D")
POINTS_CORRECT = 10.0
PENALTY_WRONG = 2.5
_RULE = "----------------------------------------------------"

SUBJECTS = {
    1: ("PHY.txt", "Physics"),
    2: ("CHEM.txt", "Chemistry"),
    3: ("C++.txt", "C++"),
    4: ("CS.txt", "Computer Science"),
    5: ("GK.txt", "General Knowledge"),
    6: ("IC.txt", "Indian Constitution"),
}


@dataclass
class Question:
    """One question, its four options and the correct answer line."""

    question: str = ""
    option_a: str = ""
    option_b: str = ""
    option_c: str = ""
    option_d: str = ""
    correct_answer: str = ""

    def lines(self) -> list[str]:
        """Return the question followed by its options."""
        return [self.question, self.option_a, self.option_b, self.option_c, self.option_d]


@dataclass
class QuizReport:
    """The outcome of one quiz run."""

    correct: int = 0
    wrong: int = 0
    unattempted: int = 0
    score: float = 0.0
    elapsed_seconds: int = 0

    def lines(self) -> list[str]:
        """Return the lines of the analysis report."""
        return [
            "\t\t   ANALYSIS REPORT",
            _RULE,
            f"\t\tCorrect Answers: {self.correct}",
            f"\t\tWrong Answers: {self.wrong}",
            f"\t\tUnattempted Answers: {self.unattempted}",
            f"\t\tTotal Score: {self.score:g} points",
            f"\t\tTime Taken: {self.elapsed_seconds} seconds",
            _RULE,
        ]


def parse_questions(lines: Iterable[str]) -> list[Question]:
    """Collect questions from lines; each one follows a line holding "Question".

    The six lines after such a marker are the question text, the four options
    and the correct answer. Lines missing at the end are left empty.
    """
    stream = (line.rstrip("\n") for line in lines)
    questions = []
    for line in stream:
        if "Question" in line:
            fields = [next(stream, "") for _ in range(6)]
            questions.append(Question(*fields))
    return questions


def read_questions(path: Union[str, Path]) -> list[Question]:
    """Read the questions stored in a file."""
    with open(path) as handle:
        return parse_questions(handle)


def time_limit_for_choice(choice: int, custom: Optional[int] = None) -> int:
    """Return the quiz duration in seconds for a menu choice.

    Choice 1 is one minute, 2 is two minutes, 3 takes ``custom`` seconds and
    anything else falls back to one minute.
    """
    if choice == 1:
        return 60
    if choice == 2:
        return 120
    if choice == 3:
        if custom is None:
            raise ValueError("a custom time limit is required for choice 3")
        return custom
    return 60


class Quiz:
    """Asks questions in order until they run out or time is up."""

    def __init__(
        self,
        questions: Sequence[Question],
        time_limit: int,
        negative_marking: bool = False,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.questions = list(questions)
        self.time_limit = time_limit
        self.negative_marking = negative_marking
        self.clock = clock

    def run(self, answers: Iterable[str], out: Optional[TextIO] = None) -> QuizReport:
        """Ask every question, taking one answer per question, and score them.

        A missing answer counts as unattempted, like any answer that is not
        exactly one of A, B, C or D.
        """
        out = out if out is not None else sys.stdout
        report = QuizReport()
        supply: Iterator[str] = iter(answers)
        start = self.clock()
        for question in self.questions:
            if int(self.clock() - start) >= self.time_limit:
                print("Time's up! Quiz ended.", file=out)
                break
            print("\n".join(question.lines()), file=out)
            print("Enter your answer (A, B, C, or D): ", end="", file=out)
            answer = next(supply, "")
            if answer in VALID_ANSWERS:
                if answer == question.correct_answer[:1]:
                    print("Correct!", file=out)
                    report.score += POINTS_CORRECT
                    report.correct += 1
                else:
                    print(
                        f"Incorrect. The correct answer is: {question.correct_answer}",
                        file=out,
                    )
                    report.wrong += 1
                    if self.negative_marking:
                        report.score -= PENALTY_WRONG
            else:
                print("Invalid input. Please enter A, B, C, or D.", file=out)
                report.unattempted += 1
            print(file=out)
        report.elapsed_seconds = int(self.clock() - start)
        return report


class _Console:
    """Reads words, single characters and whole lines from one stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._buffer = ""

    def _fill(self) -> None:
        chunk = self._stream.readline()
        if not chunk:
            raise EOFError
        self._buffer += chunk

    def _skip_space(self) -> None:
        while True:
            self._buffer = self._buffer.lstrip()
            if self._buffer:
                return
            self._fill()

    def word(self) -> str:
        self._skip_space()
        end = next(
            (i for i, ch in enumerate(self._buffer) if ch.isspace()), len(self._buffer)
        )
        token, self._buffer = self._buffer[:end], self._buffer[end:]
        return token

    def char(self) -> str:
        self._skip_space()
        ch, self._buffer = self._buffer[0], self._buffer[1:]
        return ch

    def number(self) -> Optional[int]:
        try:
            return int(self.word())
        except ValueError:
            return None

    def ignore(self) -> None:
        if not self._buffer:
            try:
                self._fill()
            except EOFError:
                return
        self._buffer = self._buffer[1:]

    def line(self) -> str:
        if not self._buffer:
            try:
                self._fill()
            except EOFError:
                return ""
        text, _, self._buffer = self._buffer.partition("\n")
        return text

    def lines(self) -> Iterator[str]:
        while True:
            yield self.line()


def _ask_time_limit(console: _Console) -> int:
    print(
        "Choose quiz duration:\n1. 1 minute\n2. 2 minutes\n3. Custom time\n"
        "Enter your choice: ",
        end="",
        flush=True,
    )
    choice = console.number()
    if choice == 3:
        print("Enter custom time limit in seconds: ", end="", flush=True)
        custom = console.number()
        return time_limit_for_choice(3, custom if custom is not None else 0)
    if choice not in (1, 2):
        print("Invalid choice. Using default time limit of 1 minute.")
    return time_limit_for_choice(choice if choice is not None else 0)


def _subject_menu() -> str:
    names = "".join(f"{number}. {name}\n" for number, (_, name) in SUBJECTS.items())
    return f"\n\t\tSubject Menu\n\n{names}\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the quiz menu until the user chooses to exit."""
    parser = argparse.ArgumentParser(prog="quiz", description="Timed quiz game.")
    parser.add_argument(
        "--directory", default=".", help="directory holding the question files"
    )
    args = parser.parse_args(argv)
    directory = Path(args.directory)
    console = _Console(sys.stdin)
    report = QuizReport()
    try:
        while True:
            print("\n\t\tMAIN MENU\n\n1. Play Quiz\n2. Exit\n\nEnter your choice: ", end="")
            choice = console.number()
            if choice == 2:
                print("Exiting the program. Goodbye!")
                return 0
            if choice != 1:
                print("Invalid choice. Please enter 1 or 2.\n")
                continue
            print(_subject_menu())
            print("Enter the number corresponding to the subject: ", end="", flush=True)
            subject = console.number()
            print("\n")
            print("\t\tQuiz customizations\n")
            time_limit = _ask_time_limit(console)
            print()
            print("Do you want negative marking for wrong answers? (Y/N): ", end="", flush=True)
            negative = console.char() in ("Y", "y")
            print()
            print("\t\tQUIZ STARTS NOW !!\n")
            entry = SUBJECTS.get(subject) if subject is not None else None
            if entry is None:
                print("Invalid subject choice. Please enter a number between 1 and 5.\n")
            else:
                try:
                    questions = read_questions(directory / entry[0])
                except OSError:
                    print("Error opening file.", file=sys.stderr)
                    return 1
                console.ignore()
                report = Quiz(questions, time_limit, negative).run(console.lines())
            print("Do you want to see the Analysis Report? (Y/N): ", end="", flush=True)
            if console.char() in ("Y", "y"):
                print("\n".join(report.lines()))
                print()
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())