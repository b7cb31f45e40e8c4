"""Keyword lexicons shared by the four content analyzers.

All lexicons are lower-case phrases. Matching is case-insensitive, tolerant
of extra whitespace between words, and anchored on word boundaries so that
"led" never fires inside "enabled".
"""

import re
from collections.abc import Iterable
from types import MappingProxyType

# Strong past-tense action verbs accepted as a bullet opener
ACTION_VERBS: frozenset[str] = frozenset({
    "accelerated", "achieved", "analyzed", "automated", "boosted", "built",
    "championed", "created", "cut", "decreased", "delivered", "designed",
    "developed", "diagnosed", "directed", "drove", "established", "executed",
    "exceeded", "expanded", "generated", "grew", "headed", "implemented",
    "improved", "increased", "launched", "led", "managed", "mentored",
    "migrated", "negotiated", "optimized", "orchestrated", "owned",
    "partnered", "pioneered", "redesigned", "reduced", "resolved", "saved",
    "scaled", "secured", "shipped", "spearheaded", "streamlined",
    "transformed", "won",
})

# The ten canonical competency categories, each with its trigger phrases
COMPETENCY_LEXICON = MappingProxyType({
    "Job Knowledge": (
        "expertise", "technical", "domain", "strategy", "analytics", "platform",
        "architecture", "infrastructure", "framework", "revenue", "enterprise",
        "retention", "pricing", "market", "data-driven", "clinical", "certified",
    ),
    "Problem-Solving": (
        "solve", "solved", "solving", "problem", "problems", "resolved",
        "diagnosed", "troubleshot", "root cause", "analyzed", "optimized",
        "a/b test", "a/b testing", "debugged",
    ),
    "Communication": (
        "presented", "presentation", "communicated", "wrote", "documented",
        "articulated", "briefed", "reported", "negotiated", "storytelling",
        "pitched", "published",
    ),
    "Social Skill": (
        "collaborated", "partnered", "cross-functional", "stakeholder",
        "stakeholders", "team", "teams", "customer", "customers", "clients",
        "relationships", "community",
    ),
    "Integrity": (
        "compliance", "ethical", "ethics", "audit", "accuracy", "accountable",
        "transparency", "trust", "regulatory", "confidential", "safety",
        "quality assurance",
    ),
    "Adaptability": (
        "adapted", "pivoted", "transitioned", "migrated", "migration",
        "flexible", "ambiguity", "change management", "restructured",
        "transformed", "new market",
    ),
    "Learning Agility": (
        "learned", "upskilled", "certification", "self-taught", "mastered",
        "iterated", "iteration", "feedback", "experiment", "experiments",
        "research",
    ),
    "Leadership": (
        "led", "managed", "spearheaded", "directed", "mentored", "owned",
        "headed", "supervised", "coached", "orchestrated", "championed",
        "team of",
    ),
    "Creativity": (
        "designed", "created", "invented", "innovative", "pioneered",
        "launched", "launch", "built", "redesign", "redesigned", "redesigning",
        "conceived", "prototype", "prototyped",
    ),
    "Motivation": (
        "drove", "exceeded", "achieved", "achieving", "increased",
        "increasing", "grew", "growth", "delivered", "delivering",
        "accelerated", "surpassed", "improved", "improving", "initiative",
    ),
})

# Passive or diffuse phrasing that parsers and recruiters both discount
PASSIVE_MARKERS: tuple[str, ...] = (
    "was responsible for", "were responsible for", "responsible for",
    "helped with", "helped to", "assisted in", "assisted with",
    "participated in", "was done by", "was involved in",
)

# Generic filler that hides the actual achievement from a skimming reader
GENERIC_PHRASES: tuple[str, ...] = (
    "responsible for", "worked on", "helped with", "involved in",
    "participated in", "participating in", "assisted with", "various",
    "some stuff", "stuff",
)

# Connectors that spell out the "so what?" of a bullet
OUTCOME_CONNECTORS: tuple[str, ...] = (
    "resulting in", "resulted in", "leading to", "thereby", "achieving",
    "generating", "saving", "improving", "increasing", "reducing",
    "which enabled", "enabling",
)

# Outcome verbs counted as the "result" half of problem -> solution framing
OUTCOME_VERBS: tuple[str, ...] = OUTCOME_CONNECTORS + (
    "increased", "reduced", "improved", "grew", "decreased", "saved",
    "cut", "boosted", "lifted", "doubled", "tripled",
)

# Product-management jargon: noise for a general audience in high density
PM_JARGON: tuple[str, ...] = (
    "roadmap", "stakeholder alignment", "cross-functional", "north star metric",
    "okr", "okrs", "sprint", "sprints", "backlog", "rice", "mvp",
    "go-to-market", "product-market fit",
)

# PM Intelligence signal lexicons
OWNERSHIP_VERBS: tuple[str, ...] = (
    "led", "drove", "spearheaded", "owned", "headed", "directed",
    "championed", "launched",
)

COLLABORATION_PHRASES: tuple[str, ...] = (
    "cross-functional", "partnered with", "collaborated with",
    "aligned stakeholders", "stakeholder alignment", "stakeholders",
    "team of", "with engineering", "with design",
)

PROBLEM_WORDS: tuple[str, ...] = (
    "problem", "problems", "challenge", "challenges", "issue", "issues",
    "pain point", "pain points", "bottleneck", "churn", "solve", "solved",
)

# Characters that break naive résumé parsers
DECORATION_RE = re.compile(r"[{}<>|\\~`]")

_WORD_RE = re.compile(r"\S+")


def compile_phrases(phrases: Iterable[str]) -> re.Pattern:
    """Compile phrases into one case-insensitive, whitespace-tolerant pattern.

    Longer phrases are tried first so "team of" wins over "team".
    """
    parts = []
    for phrase in sorted(set(phrases), key=len, reverse=True):
        words = phrase.split()
        parts.append(r"\s+".join(re.escape(word) for word in words))
    return re.compile(rf"(?<![\w-])(?:{'|'.join(parts)})(?![\w-])", re.IGNORECASE)


def find_phrases(pattern: re.Pattern, text: str) -> list[str]:
    """Distinct lower-cased matches, in order of first appearance."""
    seen: dict[str, None] = {}
    for match in pattern.finditer(text):
        seen.setdefault(" ".join(match.group(0).lower().split()), None)
    return list(seen)


def tokenize(text: str) -> list[str]:
    """Whitespace tokens of ``text``."""
    return _WORD_RE.findall(text)


def first_word(text: str) -> str:
    """First token, lower-cased with surrounding punctuation removed."""
    words = tokenize(text)
    if not words:
        return ""
    return words[0].strip(".,;:!?\"'()[]").lower()
