"""PassAudit command-line interface.

Usage examples:
    passaudit assess --reuse no --password-manager yes --mfa yes
    passaudit assess 'Tr0ub4dor&3xyz' --reuse yes --password-manager no --mfa no --json
    passaudit score mypassword
    passaudit score -f passwords.txt
"""

import argparse
import getpass
import json
import logging
import sys

from passaudit import (
    SurveyAnswers,
    check_requirements,
    evaluate,
    has_common_patterns,
    is_common_password,
    score_breakdown,
    score_password,
    strength_label,
)

logger = logging.getLogger(__name__)

_YES_NO = ("yes", "no")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="passaudit",
        description="Assess password strength and account security posture.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log scoring details to stderr",
    )
    sub = parser.add_subparsers(dest="command")

    # ── assess ─────────────────────────────────────────────────────────
    assess_p = sub.add_parser(
        "assess", help="Full risk assessment of a password and security habits",
    )
    assess_p.add_argument(
        "password", nargs="?",
        help="Password to assess (prompted for when omitted)",
    )
    assess_p.add_argument(
        "--reuse", choices=_YES_NO, required=True,
        help="Do you reuse this password?",
    )
    assess_p.add_argument(
        "--password-manager", choices=_YES_NO, required=True,
        help="Do you use a password manager?",
    )
    assess_p.add_argument(
        "--mfa", choices=_YES_NO, required=True,
        help="Is MFA enabled?",
    )
    assess_p.add_argument(
        "--json", action="store_true",
        help="Print the assessment as JSON",
    )

    # ── score ──────────────────────────────────────────────────────────
    score_p = sub.add_parser("score", help="Score password strength only")
    score_p.add_argument("passwords", nargs="*", help="Passwords to score")
    score_p.add_argument(
        "-f", "--file",
        help="Read passwords from a file (one per line)",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "assess":
        return _cmd_assess(args)
    if args.command == "score":
        return _cmd_score(args)

    parser.print_help()
    return 0


def _cmd_assess(args: argparse.Namespace) -> int:
    password = args.password
    if password is None:
        password = getpass.getpass("Password: ")

    if not password:
        print("Error: please enter a password", file=sys.stderr)
        return 2

    try:
        answers = SurveyAnswers(
            reuse=args.reuse,
            password_manager=args.password_manager,
            mfa=args.mfa,
        )
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    result = evaluate(password, answers)
    profile = result.profile

    if args.json:
        payload = result.to_dict()
        payload["passwordStrength"] = profile.password_strength
        print(json.dumps(payload, indent=2))
    else:
        _, message = strength_label(profile.password_strength)
        print(f"  Strength: {_bar(profile.password_strength)} {profile.password_strength}/100")
        print(f"            {message}")
        print(f"  Risk:     {result.risk_level.upper()} ({result.risk_score}/100)")

        if result.vulnerabilities:
            print("  Vulnerabilities:")
            for v in result.vulnerabilities:
                print(f"            ! {v}")

        print("  Recommendations:")
        for rec in result.recommendations:
            print(f"            [{rec.priority}] {rec.text}")

        print("  Breakdown:")
        for row in score_breakdown(profile):
            print(f"            {row['label']:<18} {row['value']:<9} ({row['status']})")

    return 0 if result.risk_level == "low" else 1


def _cmd_score(args: argparse.Namespace) -> int:
    passwords = list(args.passwords)

    if args.file:
        with open(args.file) as f:
            passwords.extend(line.strip() for line in f if line.strip())

    if not passwords:
        print("Error: provide passwords as arguments or via --file", file=sys.stderr)
        return 1

    weak = False
    for pwd in passwords:
        score = score_password(pwd)
        tier, _ = strength_label(score)
        weak = weak or score < 50
        print(f"  {_bar(score)} {score:>3}/100  {tier.title():<10} '{pwd}'")

        missing = [name for name, met in check_requirements(pwd).items() if not met]
        if missing:
            print(f"            missing: {', '.join(missing)}")
        if is_common_password(pwd):
            print("            ! Common password detected")
        if has_common_patterns(pwd):
            print("            ! Predictable patterns found")

    logger.debug("scored %d password(s)", len(passwords))
    return 1 if weak else 0


def _bar(score: int, width: int = 20) -> str:
    filled = round(score / 100 * width)
    return "[" + "#" * filled + "-" * (width - filled) + "]"


if __name__ == "__main__":
    sys.exit(main())
