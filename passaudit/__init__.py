"""PassAudit -- password security-posture assessment.

Core functions for strength scoring, dictionary and pattern detection,
and the rule-based risk assessment built from a password plus three
yes/no answers about reuse, password-manager use and MFA.

Everything here is local, deterministic computation.  Nothing is sent
over the network and the password is never logged.
"""

import logging
import re
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Mapping

logger = logging.getLogger(__name__)


# ── Fixed tables ───────────────────────────────────────────────────────────

COMMON_PASSWORDS = (
    "password", "123456", "12345678", "qwerty", "abc123", "monkey", "1234567",
    "letmein", "trustno1", "dragon", "baseball", "iloveyou", "master", "sunshine",
    "ashley", "bailey", "passw0rd", "shadow", "123123", "654321", "superman",
    "qazwsx", "michael", "football", "welcome", "jesus", "ninja", "mustang",
    "password1", "admin", "administrator", "root", "toor", "pass", "test",
)

COMMON_PATTERNS = (
    re.compile(r"(.)\1{2,}"),                                   # aaa, 111
    re.compile(r"^(012|123|234|345|456|567|678|789|890)+"),
    re.compile(
        r"^(abc|bcd|cde|def|efg|fgh|ghi|hij|ijk|jkl|klm|lmn|mno|nop|opq"
        r"|pqr|qrs|rst|stu|tuv|uvw|vwx|wxy|xyz)+",
        re.IGNORECASE,
    ),
    re.compile(r"^(qwerty|asdfgh|zxcvbn)+", re.IGNORECASE),
    re.compile(r"(19|20)[0-9]{2}"),                             # years
    re.compile(r"^.{1,7}\Z"),                                   # very short
)

SUBSTITUTION_MAP = MappingProxyType({
    "@": "a", "4": "a", "8": "b", "(": "c", "3": "e", "1": "i", "!": "i",
    "0": "o", "$": "s", "5": "s", "7": "t", "+": "t",
})

_LEET = str.maketrans(dict(SUBSTITUTION_MAP))

_LOWER = re.compile(r"[a-z]")
_UPPER = re.compile(r"[A-Z]")
_DIGIT = re.compile(r"[0-9]")
_SPECIAL = re.compile(r"[!@#$%^&*()_+\-=\[\]{};':\"\\|,.<>/?]")
_SPECIAL_NARROW = re.compile(r"[!@#$%^&*]")

PRIORITY_ORDER = MappingProxyType({"critical": 0, "high": 1, "medium": 2, "low": 3})

ANSWERS = frozenset({"yes", "no"})

MAX_RECOMMENDATIONS = 7

MASK = "\u2022" * 12


# ── Records ────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class SurveyAnswers:
    """Self-reported security practices, each ``"yes"`` or ``"no"``."""

    reuse: str
    password_manager: str
    mfa: str

    def __post_init__(self):
        for name, question in _QUESTIONS.items():
            value = getattr(self, name)
            if value not in ANSWERS:
                raise ValueError(
                    f"Please answer: {question} (expected 'yes' or 'no', got {value!r})"
                )

    @classmethod
    def from_mapping(cls, data: Mapping[str, str]) -> "SurveyAnswers":
        """Build answers from form data.

        Accepts the form's ``passwordManager`` key as well as
        ``password_manager``.  Values are case-folded and stripped.
        """
        manager = data.get("passwordManager", data.get("password_manager"))
        return cls(
            reuse=_clean(data.get("reuse")),
            password_manager=_clean(manager),
            mfa=_clean(data.get("mfa")),
        )


_QUESTIONS = {
    "reuse": "Do you reuse this password?",
    "password_manager": "Do you use a password manager?",
    "mfa": "Is MFA enabled?",
}


def _clean(value):
    if isinstance(value, str):
        return value.strip().lower()
    return value


@dataclass(frozen=True)
class SecurityProfile:
    password_strength: int
    password_length: int
    has_uppercase: bool
    has_lowercase: bool
    has_numbers: bool
    has_special_chars: bool
    is_common_password: bool
    has_common_patterns: bool
    reuses_password: bool
    uses_password_manager: bool
    has_mfa: bool
    timestamp: str


@dataclass(frozen=True)
class Recommendation:
    priority: str
    text: str

    @property
    def rank(self) -> int:
        return PRIORITY_ORDER[self.priority]


@dataclass(frozen=True)
class AssessmentResult:
    risk_level: str
    risk_score: int
    vulnerabilities: tuple[str, ...]
    recommendations: tuple[Recommendation, ...]
    profile: SecurityProfile = field(repr=False, compare=False)

    def to_dict(self) -> dict:
        """Return the assessment with the form's camelCase keys."""
        return {
            "riskLevel": self.risk_level,
            "riskScore": self.risk_score,
            "vulnerabilities": list(self.vulnerabilities),
            "recommendations": [asdict(r) for r in self.recommendations],
        }


# ── Strength analysis ──────────────────────────────────────────────────────


def normalize_password(password: str) -> str:
    """Lower-case *password* and undo common leetspeak substitutions."""
    return password.lower().translate(_LEET)


def calculate_entropy(password: str) -> float:
    """Ratio of distinct characters to length (0.0 for the empty string)."""
    if not password:
        return 0.0
    return len(set(password)) / len(password)


def is_common_password(password: str) -> bool:
    """True if *password* contains a dictionary word, before or after
    leetspeak normalization."""
    lower = password.lower()
    normalized = normalize_password(lower)
    return any(
        common in lower or common in normalized
        for common in COMMON_PASSWORDS
    )


def has_common_patterns(password: str) -> bool:
    return any(pattern.search(password) for pattern in COMMON_PATTERNS)


def check_requirements(password: str) -> dict[str, bool]:
    """Return the live requirement checklist shown next to the input."""
    return {
        "length":    len(password) >= 12,
        "uppercase": bool(_UPPER.search(password)),
        "lowercase": bool(_LOWER.search(password)),
        "numbers":   bool(_DIGIT.search(password)),
        "special":   bool(_SPECIAL.search(password)),
    }


def score_password(password: str) -> int:
    """Score *password* from 0 (trivial) to 100 (strong).

    Length sets the base (10/20/30/40), character classes add up to 30
    more, dictionary and pattern hits subtract 30 and 20.
    """
    length = len(password)
    if length >= 16:
        score = 40
    elif length >= 12:
        score = 30
    elif length >= 8:
        score = 20
    else:
        score = 10

    if _LOWER.search(password):
        score += 5
    if _UPPER.search(password):
        score += 5
    if _DIGIT.search(password):
        score += 5
    if _SPECIAL.search(password):
        score += 10

    types = (_LOWER, _UPPER, _DIGIT, _SPECIAL_NARROW)
    if sum(1 for t in types if t.search(password)) >= 3:
        score += 5

    if is_common_password(password):
        score -= 30
    if has_common_patterns(password):
        score -= 20

    # Ratio is at most 1.0, so neither bonus can trigger.
    entropy = calculate_entropy(password)
    if entropy > 4:
        score += 20
    elif entropy > 3:
        score += 10

    return max(0, min(100, score))


def strength_label(score: int) -> tuple[str, str]:
    """Map a strength score to a ``(tier, message)`` pair."""
    if score >= 80:
        return "strong", "Strong: Your password demonstrates excellent security characteristics."
    if score >= 60:
        return "moderate", "Moderate: Your password is acceptable but has room for improvement."
    if score >= 40:
        return "weak", "Weak: Your password is vulnerable and should be strengthened."
    return "very weak", "Very Weak: Your password is highly vulnerable to attacks."


# ── Risk assessment ────────────────────────────────────────────────────────

_ADVICE = MappingProxyType({
    "length": Recommendation(
        "high",
        "Increase password length to at least 12-16 characters. Longer passwords "
        "exponentially increase crack time and provide better protection against "
        "brute-force attacks.",
    ),
    "special": Recommendation(
        "high",
        "Add special characters (!@#$%^&*) to your password. This increases the "
        "character pool and makes password cracking significantly more difficult.",
    ),
    "common": Recommendation(
        "critical",
        "Your password contains common words or patterns found in breach databases. "
        "Replace it immediately with a truly random passphrase or use a password "
        "generator.",
    ),
    "pattern": Recommendation(
        "high",
        "Avoid sequential patterns (123, abc) or keyboard patterns (qwerty). These "
        "are among the first combinations attackers try during password cracking "
        "attempts.",
    ),
    "reuse": Recommendation(
        "critical",
        "Never reuse passwords across multiple sites. If one service is breached, "
        "attackers will try your credentials on other platforms (credential stuffing "
        "attacks). Use unique passwords for each account.",
    ),
    "manager": Recommendation(
        "high",
        "Adopt a reputable password manager (1Password, Bitwarden, LastPass). This "
        "allows you to maintain unique, complex passwords for every account without "
        "memorization burden.",
    ),
    "mfa": Recommendation(
        "critical",
        "Enable Multi-Factor Authentication (MFA) immediately. Even if your password "
        "is compromised, MFA blocks 99.9% of automated attacks. Prefer authenticator "
        "apps or hardware keys over SMS.",
    ),
})

GENERAL_TIPS = (
    Recommendation(
        "medium",
        'Consider using a passphrase instead of a password. Example: '
        '"correct-horse-battery-staple" is both memorable and secure due to its '
        'length and randomness.',
    ),
    Recommendation(
        "medium",
        "Regularly audit your accounts at haveibeenpwned.com to check if your "
        "credentials have appeared in known data breaches.",
    ),
    Recommendation(
        "low",
        "Enable login alerts and review active sessions regularly. This helps you "
        "detect unauthorized access attempts early.",
    ),
)


def build_profile(password: str, answers: SurveyAnswers, *, now: datetime | None = None) -> SecurityProfile:
    """Score *password* once and freeze it together with *answers*."""
    now = now or datetime.now(timezone.utc)
    profile = SecurityProfile(
        password_strength=score_password(password),
        password_length=len(password),
        has_uppercase=bool(_UPPER.search(password)),
        has_lowercase=bool(_LOWER.search(password)),
        has_numbers=bool(_DIGIT.search(password)),
        has_special_chars=bool(_SPECIAL.search(password)),
        is_common_password=is_common_password(password),
        has_common_patterns=has_common_patterns(password),
        reuses_password=answers.reuse == "yes",
        uses_password_manager=answers.password_manager == "yes",
        has_mfa=answers.mfa == "yes",
        timestamp=now.isoformat(),
    )
    logger.debug(
        "profile: strength=%d length=%d common=%s patterns=%s",
        profile.password_strength, profile.password_length,
        profile.is_common_password, profile.has_common_patterns,
    )
    return profile


def identify_vulnerabilities(profile: SecurityProfile) -> tuple[str, ...]:
    checks = (
        (profile.password_strength < 50, "Weak password strength"),
        (profile.is_common_password, "Common password detected"),
        (profile.has_common_patterns, "Predictable patterns found"),
        (profile.reuses_password, "Password reuse across sites"),
        (not profile.uses_password_manager, "Manual password management"),
        (not profile.has_mfa, "No multi-factor authentication"),
        (profile.password_length < 12, "Password too short"),
    )
    return tuple(label for hit, label in checks if hit)


def _recommendations(profile: SecurityProfile) -> tuple[Recommendation, ...]:
    recs: list[Recommendation] = []

    if profile.password_strength < 70:
        if profile.password_length < 12:
            recs.append(_ADVICE["length"])
        if not profile.has_special_chars:
            recs.append(_ADVICE["special"])
        if profile.is_common_password:
            recs.append(_ADVICE["common"])
        if profile.has_common_patterns:
            recs.append(_ADVICE["pattern"])

    if profile.reuses_password:
        recs.append(_ADVICE["reuse"])
    if not profile.uses_password_manager:
        recs.append(_ADVICE["manager"])
    if not profile.has_mfa:
        recs.append(_ADVICE["mfa"])

    if len(recs) < 5:
        recs.extend(GENERAL_TIPS)

    # sorted() is stable: equal priorities keep insertion order
    recs = sorted(recs, key=lambda r: r.rank)
    return tuple(recs[:MAX_RECOMMENDATIONS])


def build_assessment(profile: SecurityProfile) -> AssessmentResult:
    """Turn a profile into a risk level, vulnerabilities and recommendations.

    Risk starts at ``100 - strength`` and grows with each poor practice:
    +20 for reuse, +10 without a password manager, +15 without MFA.
    Only the upper bound is clamped.
    """
    risk = 100 - profile.password_strength
    if profile.reuses_password:
        risk += 20
    if not profile.uses_password_manager:
        risk += 10
    if not profile.has_mfa:
        risk += 15

    if risk <= 30:
        level = "low"
    elif risk <= 60:
        level = "medium"
    else:
        level = "high"

    result = AssessmentResult(
        risk_level=level,
        risk_score=min(100, risk),
        vulnerabilities=identify_vulnerabilities(profile),
        recommendations=_recommendations(profile),
        profile=profile,
    )
    logger.debug(
        "assessment: risk=%d level=%s vulnerabilities=%d recommendations=%d",
        result.risk_score, result.risk_level,
        len(result.vulnerabilities), len(result.recommendations),
    )
    return result


def evaluate(password: str, answers) -> AssessmentResult:
    """Assess *password* together with the survey *answers*.

    *answers* is a :class:`SurveyAnswers` or a mapping with ``reuse``,
    ``passwordManager`` and ``mfa`` keys valued ``"yes"``/``"no"``.
    Raises :class:`ValueError` for missing or invalid answers.
    """
    if not isinstance(answers, SurveyAnswers):
        answers = SurveyAnswers.from_mapping(answers)
    return build_assessment(build_profile(password, answers))


def score_breakdown(profile: SecurityProfile) -> list[dict]:
    """Return the rows of the results breakdown table.

    Each row is a dict with keys ``label``, ``value`` and ``status``
    (``good``, ``warning`` or ``danger``).
    """
    strength = profile.password_strength
    if strength >= 70:
        strength_status = "good"
    elif strength >= 40:
        strength_status = "warning"
    else:
        strength_status = "danger"

    return [
        {
            "label": "Password Strength",
            "value": f"{strength}/100",
            "status": strength_status,
        },
        {
            "label": "Password Reuse",
            "value": "Yes" if profile.reuses_password else "No",
            "status": "danger" if profile.reuses_password else "good",
        },
        {
            "label": "Password Manager",
            "value": "Yes" if profile.uses_password_manager else "No",
            "status": "good" if profile.uses_password_manager else "warning",
        },
        {
            "label": "MFA Status",
            "value": "Enabled" if profile.has_mfa else "Disabled",
            "status": "good" if profile.has_mfa else "danger",
        },
    ]
