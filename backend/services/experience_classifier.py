"""Rule-based experience tier classification."""

import logging
import re

from models.schemas.analysis import ExperienceTier

logger = logging.getLogger(__name__)

# "5+ years of experience", "3 yrs exp" and "experience: 4 years"
YEARS_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r"(\d+)\+?\s*years?\s*(?:of\s*)?(?:experience|exp)"),
    re.compile(r"(\d+)\+?\s*yrs?\s*(?:of\s*)?(?:experience|exp)"),
    re.compile(r"(?:experience|exp).{0,20}?(\d+)\+?\s*years?"),
    re.compile(r"(?:experience|exp).{0,20}?(\d+)\+?\s*yrs?"),
)

SENIOR_KEYWORDS: tuple[str, ...] = (
    "senior", "lead", "manager", "director", "head of", "chief", "principal",
    "architect", "consultant", "expert", "specialist", "team lead",
)

MID_KEYWORDS: tuple[str, ...] = (
    "developer", "engineer", "analyst", "associate", "coordinator",
    "experience", "worked on", "developed", "implemented", "designed",
)

ENTRY_KEYWORDS: tuple[str, ...] = (
    "fresher", "graduate", "entry level", "recent graduate", "new graduate",
    "intern", "trainee", "beginner", "student", "looking for opportunities",
)

SENIOR_MIN_YEARS = 5
INTERMEDIATE_MIN_YEARS = 2


def extract_max_years(text: str) -> int:
    """Largest explicit "N years of experience" figure in the text, or 0."""
    text_lower = text.lower()
    max_years = 0
    for pattern in YEARS_PATTERNS:
        for match in pattern.finditer(text_lower):
            try:
                years = int(match.group(1))
            except (TypeError, ValueError):
                continue
            max_years = max(max_years, years)
    return max_years


def _contains_any(text_lower: str, keywords: tuple[str, ...]) -> bool:
    return any(keyword in text_lower for keyword in keywords)


def classify_experience(text: str) -> ExperienceTier:
    """Map resume text to an experience tier.

    Rules are evaluated in order, first match wins:
    - senior: 5+ years, or any senior keyword
    - intermediate: 2+ years, or a mid keyword with no entry keyword
    - entry: everything else

    A senior keyword therefore beats a co-occurring entry keyword, while an
    entry keyword only blocks the mid-keyword route.
    """
    text_lower = text.lower()
    max_years = extract_max_years(text)
    has_senior = _contains_any(text_lower, SENIOR_KEYWORDS)
    has_mid = _contains_any(text_lower, MID_KEYWORDS)
    has_entry = _contains_any(text_lower, ENTRY_KEYWORDS)

    logger.debug(
        "Experience signals: max_years=%d senior=%s mid=%s entry=%s",
        max_years, has_senior, has_mid, has_entry,
    )

    if max_years >= SENIOR_MIN_YEARS or has_senior:
        return ExperienceTier.SENIOR
    if max_years >= INTERMEDIATE_MIN_YEARS or (has_mid and not has_entry):
        return ExperienceTier.INTERMEDIATE
    return ExperienceTier.ENTRY
