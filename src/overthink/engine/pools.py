"""Candidate pools for the procedural generator.

Read-only configuration data: tuples, frozensets and mapping proxies built
once at import time and never written afterwards.
"""

from __future__ import annotations

from types import MappingProxyType

# ── Title ────────────────────────────────────────────────────────────

DRAMATIC_PREFIXES: tuple[str, ...] = (
    "THE INEVITABLE",
    "THE CATASTROPHIC",
    "THE UNRESOLVED",
    "THE IRREVERSIBLE",
    "THE DEEPLY ALARMING",
    "THE STATISTICALLY SIGNIFICANT",
    "THE EXISTENTIALLY CHARGED",
    "THE CHRONICALLY UNRESOLVED",
    "THE QUIETLY DEVASTATING",
    "THE ACADEMICALLY CONCERNING",
    "THE PERENNIALLY UNFINISHED",
    "THE SUSPICIOUSLY FAMILIAR",
    "THE UNCOMFORTABLY RELATABLE",
    "THE STRUCTURALLY INEVITABLE",
)

DRAMATIC_NOUNS: tuple[str, ...] = (
    "EMOTIONAL CASCADE",
    "COGNITIVE SPIRAL",
    "EXISTENTIAL TRAJECTORY",
    "PSYCHOLOGICAL UNDERTOW",
    "DECISION VORTEX",
    "ANALYTICAL PARADOX",
    "TEMPORAL RECKONING",
    "NEUROLOGICAL EVENT",
    "PHILOSOPHICAL QUANDARY",
    "INTERNAL MONOLOGUE",
    "CONSEQUENCE MATRIX",
    "ANXIETY FEEDBACK LOOP",
    "UNCERTAINTY GRADIENT",
    "NARRATIVE ARC",
    "RISK TOPOLOGY",
)

# Words of three letters or fewer never survive the length filter; the short
# entries are kept so the set reads as a plain English stop-word list.
STOP_WORDS: frozenset[str] = frozenset({
    "the", "and", "for", "are", "but", "not", "you", "all", "can", "had",
    "her", "was", "one", "our", "out", "get", "has", "him", "his", "how",
    "its", "may", "now", "see", "two", "who", "did", "does", "any", "too",
    "that", "with", "this", "from", "they", "will", "have", "been", "into",
    "your", "when", "what", "more", "also", "than", "then", "some", "even",
    "just", "like", "over", "such", "here", "very", "much", "should",
    "could", "would", "there", "their", "them", "these", "those", "which",
    "where", "while", "about", "after", "before", "because", "being", "were",
    "only", "other", "still", "really", "actually", "maybe", "might", "must",
    "shall", "each", "every", "both", "either", "neither", "whether", "again",
    "ever", "yours", "mine", "ourselves", "myself", "yourself",
})

# ── Narrative ────────────────────────────────────────────────────────

SUMMARY_TEMPLATES: tuple[str, ...] = (
    "After exhaustive cognitive simulation spanning 847 theoretical scenarios, "
    "the system has identified measurable turbulence in your current trajectory.",
    "A thorough multi-pass analysis reveals structural instability in the decision "
    "space surrounding this inquiry. The data is not encouraging.",
    "Cross-referencing your question against seventeen known behavioral archetypes, "
    "the system has flagged a statistically non-trivial probability of regret.",
    "Initial triage of this question triggered three separate alarm protocols. "
    "The situation has been escalated to the Dramatic Analysis Unit.",
    "Preliminary modeling indicates this question belongs to a well-documented "
    "category of decisions that humans make, reconsider, and then make again.",
    "The system has processed your inquiry using an advanced cascade of speculative "
    "heuristics. The results are both definitive and deeply ambiguous.",
    "Upon reflection (0.003 seconds of it) the analytical engine has concluded that "
    "this question deserves far more attention than you've given it.",
    "Your question was run against the full corpus of human second-guessing. "
    "Several concerning patterns emerged immediately.",
    "After consulting internal uncertainty tables and applying a proprietary regret "
    "coefficient, a risk profile has been assembled. You won't love it.",
    "The cognitive simulation completed successfully. The news is mixed. "
    "The emotional implications are not.",
)

CONCLUSION_TEMPLATES: tuple[str, ...] = (
    "Historical precedent strongly suggests you will proceed regardless of these "
    "findings. The system respects your autonomy and documents its objections.",
    "All available evidence points toward a path you've already emotionally chosen. "
    "This report exists to provide intellectual cover for that choice.",
    "The analysis is complete. The conclusion is inevitable. The action you take "
    "will be the one you were always going to take.",
    "Based on prior behavioral patterns across comparable datasets, the outcome of "
    "this decision was determined approximately six minutes before you ran this command.",
    "While the risk index is elevated, humans have historically proceeded under far "
    "worse conditions. This is both reassuring and alarming.",
    "The system recommends caution, restraint, and careful deliberation. The system "
    "acknowledges these recommendations will be ignored within 48 hours.",
    "After extensive analysis, the most scientifically defensible conclusion is: it "
    "depends. On things you haven't told us. And possibly on Mercury.",
    "This report has been generated. The implications have been flagged. The "
    "consequences remain, as always, entirely your responsibility.",
    "The data suggests two equally valid paths forward. You already know which one "
    "you'll take. So does the system.",
    "In the fullness of time, this decision will seem either obviously correct or "
    "obviously catastrophic. The system looks forward to being cited either way.",
)

CLOSING_LINES: tuple[str, ...] = (
    "You opened the chat window before running this command, didn't you?",
    "The system notes this is your third overthought decision this week. "
    "Statistically speaking, that's fine.",
    "This report will self-justify in approximately 72 hours.",
    "For what it's worth: the fact that you asked means you already know the answer.",
    "The system wishes you clarity, but expects you'll settle for validation.",
    "Proceed with caution. Or don't. The system will generate a report either way.",
    "If this were easy, you wouldn't need a dramatic analysis engine. You're welcome.",
    "Consider this report peer-reviewed by everyone who has ever been in your situation.",
    "The system has done its part. The rest is, unfortunately, up to you.",
    "A follow-up report is available whenever you spiral again. The system will be here.",
    "You already know what you're going to do. This report told you it was okay.",
    "Whatever you decide, the system supports you and will absolutely say 'I told you so.'",
    "Take a breath. Then do the thing you were going to do anyway. "
    "That's all any of us can do.",
    "Overthinking: complete. Action: TBD by the most chaotic part of your brain.",
    "The system detected 3 instances of the word 'should' in your future internal "
    "monologue. You're going to be fine.",
)

# ── Probabilities ────────────────────────────────────────────────────

OUTCOME_LABELS: tuple[str, ...] = (
    "chance of immediate regret",
    "chance of mild existential dread",
    "chance of ambiguous, unresolvable outcome",
    "chance of catastrophic nostalgia",
    "chance of unexpected, inconvenient clarity",
    "chance of productive downward spiral",
    "chance of overanalyzing the analysis itself",
    "chance of dramatic internal monologue",
    "chance of second-guessing this decision tomorrow",
    "chance of googling the same question in 3 days",
    "chance of late-night retroactive justification",
    "chance of unsolicited opinion from a friend",
    "chance of creating a pros/cons list that solves nothing",
    "chance of consulting a horoscope",
    "chance of blaming Mercury retrograde",
    "chance of writing a journal entry about this",
    "chance of inexplicable calm followed by panic",
    "chance of doing it anyway regardless of this report",
)

# ── Citations ────────────────────────────────────────────────────────

JOURNAL_NAMES: tuple[str, ...] = (
    "Journal of Existential Hesitation",
    "International Review of Questionable Decisions",
    "Proceedings of the Annual Regret Symposium",
    "Journal of Romantic Miscalculation",
    "Quarterly Bulletin of Applied Catastrophizing",
    "Annals of Unnecessary Second-Guessing",
    "Transactions on Cognitive Overload",
    "Institute for Advanced Overanalysis",
    "Review of Premature Conclusions",
    "Journal of Speculative Self-Sabotage",
    "Archives of Temporal Panic",
    "Reports on Unresolved Ambiguity",
    "Compendium of Midnight Decisions",
    "Survey of Avoidant Coping Strategies",
    "Journal of Theoretical What-Ifs",
    "Bulletin of the Society for Spiraling Thoughts",
    "Proceedings on Human Indecision (Special Issue)",
    "Cambridge Handbook of Feelings You Cannot Name",
    "Oxford Review of Things You Almost Said",
    "Wiley Encyclopedia of Overthought Outcomes",
)

AUTHOR_SUFFIXES: tuple[str, ...] = (
    "et al.",
    "& Associates",
    "(Independent Research Division)",
    "(Posthumous Edition)",
    "(Retracted, then re-instated)",
    "(Peer-reviewed by one very tired colleague)",
)

# ── Risk ─────────────────────────────────────────────────────────────

RISK_KEYWORDS: MappingProxyType[str, int] = MappingProxyType({
    # Romantic peril
    "ex": 25, "text": 10, "love": 15, "date": 12,
    "relationship": 18, "breakup": 28, "feelings": 14,
    "heart": 16, "miss": 20, "crush": 13,
    # Professional anxiety
    "quit": 22, "job": 15, "career": 12, "boss": 10,
    "fire": 20, "fired": 25, "resign": 22, "startup": 18, "salary": 10,
    # Existential dread
    "life": 8, "meaning": 20, "purpose": 18, "late": 15, "old": 10,
    "future": 12, "dead": 30, "die": 28, "worth": 16, "point": 14,
    "regret": 22, "mistake": 18, "wrong": 12, "mess": 10,
    "failing": 20, "failed": 22, "failure": 25,
    # Financial anxiety
    "money": 12, "debt": 20, "broke": 18, "invest": 8, "savings": 10,
    # Social pressure
    "family": 15, "friend": 8, "alone": 20, "lonely": 22,
    "trust": 14, "lie": 16, "truth": 10, "tell": 8,
    # Decision paralysis
    "should": 5, "could": 4, "would": 4, "maybe": 8,
    "start": 6, "stop": 8, "leave": 14, "stay": 10,
    "change": 10, "try": 5, "move": 12, "wait": 6,
    "never": 12, "always": 8, "finally": 10,
})

RISK_BASE_MIN = 20
RISK_BASE_SPAN = 20
RISK_MAX = 100
