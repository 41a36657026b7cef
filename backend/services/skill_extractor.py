"""Heuristic skill extraction used when Gemini is unavailable.

Combines:
1. Vocabulary matching: case-insensitive substring search for known skills
2. Phrase patterns: "experience with X", "proficient in X", "X development"...

Hits keep the spelling they were found with. A vocabulary hit ("React") and a
phrase hit ("react") for the same skill are both kept; only exact duplicates
are dropped.
"""

import logging
import re

logger = logging.getLogger(__name__)

# Known skill vocabulary, in reporting order
SKILL_VOCABULARY: tuple[str, ...] = (
    # Programming languages
    "JavaScript", "Python", "Java", "C++", "C#", "TypeScript", "PHP", "Ruby", "Go", "Rust",
    "Swift", "Kotlin", "Scala", "R", "MATLAB", "C", "Perl", "Shell", "Bash",
    # Web
    "React", "Angular", "Vue.js", "Node.js", "Express", "Django", "Flask", "Spring",
    "HTML", "CSS", "SCSS", "SASS", "Bootstrap", "Tailwind", "jQuery", "Webpack",
    "Next.js", "Nuxt.js", "Gatsby", "Redux", "MobX", "Vuex",
    # Databases
    "MongoDB", "MySQL", "PostgreSQL", "SQLite", "Redis", "Elasticsearch", "Oracle",
    "SQL Server", "Cassandra", "DynamoDB", "Firebase", "SQL",
    # Cloud & DevOps
    "AWS", "Azure", "Google Cloud", "GCP", "Docker", "Kubernetes", "Jenkins",
    "GitLab CI", "GitHub Actions", "Terraform", "Ansible", "Chef", "Puppet",
    # Mobile
    "React Native", "Flutter", "iOS", "Android", "Xamarin", "Ionic",
    # Tools & practices
    "Git", "SVN", "Mercurial", "Jira", "Confluence", "Slack", "Teams",
    "REST", "GraphQL", "API", "Microservices", "Agile", "Scrum", "Kanban",
    "TDD", "BDD", "CI/CD", "DevOps", "Linux", "Ubuntu", "Windows", "macOS",
    # Data & analytics
    "Pandas", "NumPy", "Matplotlib", "Seaborn", "Scikit-learn", "TensorFlow",
    "PyTorch", "Keras", "OpenCV", "Tableau", "Power BI", "Excel",
    # Engineering & electronics
    "Arduino", "Raspberry Pi", "IoT", "Sensors", "Automation", "Control Systems",
    "Solar Energy", "Renewable Energy", "Electronics", "Circuit Design",
    "Embedded Systems", "Microcontrollers", "PCB Design", "MATLAB Simulink",
)

# Each pattern captures exactly one candidate skill token
SKILL_PHRASE_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r"\b(?:programming|coding|development)\s+in\s+(\w+)", re.IGNORECASE),
    re.compile(r"\b(\w+)\s+(?:programming|development|coding)", re.IGNORECASE),
    re.compile(r"\bexperience\s+with\s+(\w+)", re.IGNORECASE),
    re.compile(r"\bproficient\s+in\s+(\w+)", re.IGNORECASE),
    re.compile(r"\bknowledge\s+of\s+(\w+)", re.IGNORECASE),
)

# Phrase captures outside this length range are noise ("a", "in", run-on tokens)
MIN_PHRASE_SKILL_LEN = 3
MAX_PHRASE_SKILL_LEN = 19


def extract_skills_vocabulary(text: str) -> list[str]:
    """Return vocabulary skills that occur anywhere in the text, case-insensitively."""
    text_lower = text.lower()
    return [skill for skill in SKILL_VOCABULARY if skill.lower() in text_lower]


def extract_skills_phrases(text: str) -> list[str]:
    """Return tokens introduced by skill phrases such as "proficient in X"."""
    found: list[str] = []
    for pattern in SKILL_PHRASE_PATTERNS:
        for match in pattern.finditer(text):
            token = match.group(1)
            if MIN_PHRASE_SKILL_LEN <= len(token) <= MAX_PHRASE_SKILL_LEN:
                found.append(token)
    return found


def extract_skills(text: str) -> list[str]:
    """Extract skills from free text.

    Returns vocabulary hits followed by phrase hits, without exact duplicates.
    Empty or unrelated text yields an empty list.
    """
    skills = list(dict.fromkeys(extract_skills_vocabulary(text) + extract_skills_phrases(text)))
    logger.debug("Heuristic skills found: %s", skills)
    return skills
