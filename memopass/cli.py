"""memopass command-line interface.

Usage examples:
    python -m memopass generate --first-name Ann --last-name Lee --dob 1990-05-01 \\
        --answer "What was the name of your first pet?=Rex" \\
        --answer "What city were you born in?=Blue92"
    python -m memopass check mypassword
    python -m memopass check -f passwords.txt
    python -m memopass questions
"""

import argparse
import asyncio
import logging
import sys

from memopass import (
    SECURITY_QUESTIONS,
    ProfileError,
    QuestionAnswer,
    UserProfile,
    check_breach,
    score_strength,
    synthesize,
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="memopass",
        description="Generate memorable passwords and check them against known breaches.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command")

    # ── generate ───────────────────────────────────────────────────────
    gen_p = sub.add_parser("generate", help="Generate a password from a profile")
    gen_p.add_argument("--first-name", default="")
    gen_p.add_argument("--last-name", default="")
    gen_p.add_argument("--dob", default="", help="Date of birth (YYYY-MM-DD)")
    gen_p.add_argument(
        "-a", "--answer",
        action="append",
        default=[],
        metavar="QUESTION=ANSWER",
        help="Security question and answer (repeat; at least two, at most five)",
    )
    gen_p.add_argument(
        "-c", "--count", type=int, default=1,
        help="Number of passwords to generate (default: 1)",
    )
    gen_p.add_argument(
        "--check",
        action="store_true",
        help="Also check each generated password against breach databases",
    )

    # ── check ──────────────────────────────────────────────────────────
    check_p = sub.add_parser(
        "check", help="Check passwords against breach databases",
    )
    check_p.add_argument("passwords", nargs="*", help="Passwords to check")
    check_p.add_argument(
        "-f", "--file",
        help="Read passwords from a file (one per line)",
    )

    # ── questions ──────────────────────────────────────────────────────
    sub.add_parser("questions", help="List the available security questions")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "generate":
        return _cmd_generate(args)
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "questions":
        return _cmd_questions()

    parser.print_help()
    return 0


def _parse_answers(raw: list[str]) -> list[QuestionAnswer]:
    answers = []
    for item in raw:
        question, sep, answer = item.partition("=")
        if not sep:
            raise ProfileError(f"Expected QUESTION=ANSWER, got {item!r}")
        answers.append(QuestionAnswer(question.strip(), answer))
    return answers


def _print_report(pwd: str, result=None) -> None:
    report = score_strength(pwd)
    bar = "#" * report.score + "-" * (5 - report.score)
    print(f"            Strength: [{bar}] {report.label} ({report.score}/5)")
    if result is not None:
        if result.is_pwned:
            print(f"            ! Found {result.count:,} times in known breaches")
        else:
            print("            Not found in any known breaches")


def _cmd_generate(args: argparse.Namespace) -> int:
    try:
        profile = UserProfile(
            first_name=args.first_name,
            last_name=args.last_name,
            dob=args.dob,
            security_answers=_parse_answers(args.answer),
        )
        profile.validate()
    except ProfileError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for _ in range(args.count):
        pwd = synthesize(profile)
        print(f"  {pwd}")
        result = asyncio.run(check_breach(pwd)) if args.check else None
        _print_report(pwd, result)

    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    passwords = list(args.passwords)

    if args.file:
        with open(args.file) as f:
            passwords.extend(line.strip() for line in f if line.strip())

    if not passwords:
        print("Error: provide passwords as arguments or via --file", file=sys.stderr)
        return 1

    breached = False
    for pwd in passwords:
        result = asyncio.run(check_breach(pwd))
        if result.is_pwned:
            print(f"  BREACHED  '{pwd}' -- found {result.count:,} times")
            breached = True
        else:
            print(f"  Safe      '{pwd}' -- not found in any known breaches")
        _print_report(pwd)

    return 1 if breached else 0


def _cmd_questions() -> int:
    for i, question in enumerate(SECURITY_QUESTIONS, 1):
        print(f"  {i}. {question}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
