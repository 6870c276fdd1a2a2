import io
import sys

import pytest

from lessons.quiz import (
    Question,
    Quiz,
    QuizReport,
    main,
    parse_questions,
    read_questions,
    time_limit_for_choice,
)

SAMPLE = [
    "Question 1\n",
    "What is H2O?\n",
    "A. Water\n",
    "B. Salt\n",
    "C. Sugar\n",
    "D. Sand\n",
    "A\n",
    "Question 2\n",
    "Unit of force?\n",
    "A. Joule\n",
    "B. Newton\n",
    "C. Watt\n",
    "D. Volt\n",
    "B\n",
]


def _questions():
    return parse_questions(SAMPLE)


def _fixed_clock():
    return 0.0


def test_parse_questions_reads_fields():
    questions = _questions()
    assert len(questions) == 2
    assert questions[0] == Question(
        "What is H2O?", "A. Water", "B. Salt", "C. Sugar", "D. Sand", "A"
    )
    assert questions[1].correct_answer == "B"


def test_parse_questions_ignores_lines_without_marker():
    assert parse_questions(["intro\n", "nothing here\n"]) == []


def test_parse_questions_leaves_missing_fields_empty():
    questions = parse_questions(["Question 1\n", "Only text\n"])
    assert questions == [Question("Only text", "", "", "", "", "")]


def test_read_questions_round_trip(tmp_path):
    path = tmp_path / "PHY.txt"
    path.write_text("".join(SAMPLE))
    assert read_questions(path) == _questions()


def test_read_questions_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_questions(tmp_path / "absent.txt")


@pytest.mark.parametrize("choice, expected", [(1, 60), (2, 120), (7, 60)])
def test_time_limit_for_choice(choice, expected):
    assert time_limit_for_choice(choice) == expected


def test_time_limit_custom():
    assert time_limit_for_choice(3, 45) == 45


def test_time_limit_custom_required():
    with pytest.raises(ValueError):
        time_limit_for_choice(3)


def test_run_counts_correct_answer():
    out = io.StringIO()
    report = Quiz(_questions()[:1], 60, clock=_fixed_clock).run(["A"], out)
    assert report.correct == 1
    assert report.score == 10
    assert "Correct!" in out.getvalue()


def test_run_negative_marking():
    report = Quiz(_questions()[:1], 60, True, clock=_fixed_clock).run(["C"], io.StringIO())
    assert report.wrong == 1
    assert report.score == -2.5


def test_run_without_negative_marking_keeps_zero():
    out = io.StringIO()
    report = Quiz(_questions()[:1], 60, False, clock=_fixed_clock).run(["D"], out)
    assert report.score == 0
    assert "Incorrect. The correct answer is: A" in out.getvalue()


def test_run_invalid_and_missing_answers_are_unattempted():
    out = io.StringIO()
    report = Quiz(_questions(), 60, clock=_fixed_clock).run(["a"], out)
    assert report.unattempted == 2
    assert report.correct == 0
    assert "Invalid input. Please enter A, B, C, or D." in out.getvalue()


def test_run_shows_question_and_options():
    out = io.StringIO()
    Quiz(_questions()[:1], 60, clock=_fixed_clock).run(["A"], out)
    text = out.getvalue()
    assert text.startswith("What is H2O?\nA. Water\nB. Salt\nC. Sugar\nD. Sand\n")
    assert "Enter your answer (A, B, C, or D): " in text


def test_run_stops_when_time_is_up():
    ticks = iter([0.0, 0.0, 61.0, 61.0])
    out = io.StringIO()
    report = Quiz(_questions(), 60, clock=lambda: next(ticks)).run(["A", "B"], out)
    assert report.correct == 1
    assert "Time's up! Quiz ended." in out.getvalue()
    assert report.elapsed_seconds == 61


def test_report_lines():
    report = QuizReport(correct=1, wrong=2, unattempted=3, score=5.0, elapsed_seconds=4)
    lines = report.lines()
    assert lines[0] == "\t\t   ANALYSIS REPORT"
    assert "\t\tCorrect Answers: 1" in lines
    assert "\t\tTotal Score: 5 points" in lines
    assert "\t\tTime Taken: 4 seconds" in lines


def test_main_exit(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("2\n"))
    assert main([]) == 0
    assert "Exiting the program. Goodbye!" in capsys.readouterr().out


def test_main_plays_quiz(monkeypatch, capsys, tmp_path):
    (tmp_path / "PHY.txt").write_text("".join(SAMPLE))
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\n1\n1\nN\nA\nB\nY\n2\n"))
    assert main(["--directory", str(tmp_path)]) == 0
    text = capsys.readouterr().out
    assert "QUIZ STARTS NOW !!" in text
    assert "\t\tCorrect Answers: 2" in text
    assert "\t\tWrong Answers: 0" in text


def test_main_missing_file(monkeypatch, capsys, tmp_path):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\n2\n1\nN\n"))
    assert main(["--directory", str(tmp_path)]) == 1
    assert "Error opening file." in capsys.readouterr().err