"""Utilities for importing quizzes from a human-friendly text file.

File format: optional header lines followed by question blocks separated by
blank lines or '---':

    TITLE: Capitals of Central Asia
    DESCRIPTION: Five quick ones        (optional)
    TOPIC: Geography                    (optional, defaults to General)

    Q: Question text. Additional lines until the next marker are treated as
       part of the question.
    A: First option text
    B: Second option text
    C: Third option text
    D: Fourth option text
    CORRECT: A|B|C|D
    TIMELIMIT: seconds   (optional, defaults to 20)

DESCRIPTION may continue onto the following lines, blank ones included, up
to the next header key or question. When the header has no TITLE the file
name is used instead.
"""

from __future__ import annotations

from pathlib import Path

from pulse_quiz.constants.quiz_constants import OPTION_LETTERS
from pulse_quiz.core.errors import MalformedQuestion, MalformedQuiz, QuizImportError
from pulse_quiz.core.models import QuestionDraft, QuizDraft

_HEADER_KEYS = ("TITLE", "DESCRIPTION", "TOPIC")


def load_quiz_from_file(file_path: Path) -> QuizDraft:
    try:
        text = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise QuizImportError(f"{file_path.name} is not a UTF-8 text file.") from exc
    return parse_quiz_text(text, default_title=file_path.stem.replace("_", " "))


def parse_quiz_text(text: str, default_title: str = "") -> QuizDraft:
    header, blocks = _split_blocks(text)
    questions = [_parse_block(block) for block in blocks if block]
    if not questions:
        raise QuizImportError("Quiz file did not contain any questions.")
    try:
        return QuizDraft.create(
            header.get("TITLE") or default_title,
            questions,
            description=header.get("DESCRIPTION"),
            topic=header.get("TOPIC"),
        )
    except MalformedQuiz as exc:
        raise QuizImportError(str(exc)) from exc


def _starts_section(line: str) -> bool:
    upper = line.upper()
    if upper.startswith(("Q:", "CORRECT:", "TIMELIMIT:")):
        return True
    return len(line) > 1 and upper[0] in OPTION_LETTERS and line[1] == ":"


def _split_blocks(text: str) -> tuple[dict[str, str], list[str]]:
    header: dict[str, str] = {}
    blocks: list[str] = []
    current_block: list[str] = []
    in_header = True
    in_description = False
    for raw_line in text.splitlines():
        stripped = raw_line.strip()
        if in_header:
            key, separator, value = stripped.partition(":")
            key = key.strip().upper()
            if separator and key in _HEADER_KEYS:
                header[key] = value.strip()
                in_description = key == "DESCRIPTION"
                continue
            # Description lines run on until the next header key or question.
            if in_description and stripped != "---" and not _starts_section(stripped):
                header["DESCRIPTION"] += "\n" + stripped
                continue
            in_description = False
            if stripped:
                in_header = False
        if stripped == "---":
            if current_block:
                blocks.append("\n".join(current_block).strip())
                current_block = []
            continue
        if stripped:
            current_block.append(raw_line)
        elif current_block:
            blocks.append("\n".join(current_block).strip())
            current_block = []
    if current_block:
        blocks.append("\n".join(current_block).strip())
    if "DESCRIPTION" in header:
        header["DESCRIPTION"] = header["DESCRIPTION"].strip()
    return header, blocks


def _parse_block(block: str) -> QuestionDraft:
    question_lines: list[str] = []
    options: dict[str, str] = {}
    correct_letter: str | None = None
    time_limit_seconds: int | None = None
    current_section: str | None = None

    for raw_line in block.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        upper = line.upper()
        if upper.startswith("Q:"):
            question_lines = [line[2:].strip()]
            current_section = "Q"
            continue

        if upper.startswith("CORRECT:"):
            correct_letter = line.split(":", 1)[1].strip().upper()
            current_section = None
            continue

        if upper.startswith("TIMELIMIT:"):
            raw_value = line.split(":", 1)[1].strip()
            try:
                time_limit_seconds = int(raw_value)
            except ValueError as exc:
                raise QuizImportError("TIMELIMIT must be an integer number of seconds.") from exc
            current_section = None
            continue

        if len(line) > 2 and line[0].upper() in OPTION_LETTERS and line[1] == ":":
            letter = line[0].upper()
            options[letter] = line[2:].strip()
            current_section = letter
            continue

        if current_section == "Q":
            question_lines.append(line)
        elif current_section in OPTION_LETTERS:
            options[current_section] = options[current_section] + f"\n{line}"
        else:
            raise QuizImportError(f"Encountered text outside of a known section: '{line}'.")

    if not question_lines:
        raise QuizImportError("Question text missing (Q: ...)")
    if len(options) != len(OPTION_LETTERS):
        raise QuizImportError("Each question must define exactly four options (A-D).")
    if correct_letter is None:
        raise QuizImportError("Each question must name its CORRECT option.")

    try:
        return QuestionDraft.create(
            "\n".join(question_lines),
            [options[letter] for letter in OPTION_LETTERS],
            correct_letter,
            time_limit_seconds,
        )
    except MalformedQuestion as exc:
        raise QuizImportError(str(exc)) from exc
