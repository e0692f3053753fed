"""
Insight engine - turns the current wheel into a summary and next steps.

Pure: same categories + scores in, same InsightResult out. No caching,
the whole thing is linear in the number of areas.
"""

from typing import Mapping, Sequence

from config import PRIORITY_COUNT
from models import Category, InsightResult

PLACEHOLDER_SUMMARY = (
    "Rate each area from 0–10 to see how balanced your current Wheel of Life feels."
)

SUMMARY_TEMPLATE = (
    "Your average score is {average:.1f}/10 across {count} areas. "
    "A balanced wheel is less about perfection and more about feeling steady overall."
)

HIGHLIGHT_TEMPLATE = (
    "{label}: {score}/10 — a small improvement here could have an outsized "
    "impact on your overall balance."
)

# Keyed by category id, never by label.
ACTION_SUGGESTIONS: dict[str, str] = {
    "health": (
        "Pick one tiny habit this week (a 10‑minute walk, stretching, or lights‑out time) "
        "that would noticeably improve your energy."
    ),
    "career": (
        "Clarify your next small career move: a conversation, a course, or a project "
        "that moves you one step forward."
    ),
    "relationships": (
        "Schedule one meaningful check‑in or shared activity with someone important to you."
    ),
    "finance": (
        "Decide on one simple money habit: a weekly budget review, an automatic transfer, "
        "or tracking expenses."
    ),
    "growth": (
        "Choose one skill or topic to focus on this month and block out two learning "
        "sessions in your calendar."
    ),
    "fun": (
        "Plan a small, guilt‑free activity this week that’s just for enjoyment and recharge."
    ),
    "environment": (
        "Identify one small improvement to your space (decluttering, lighting, or setup) "
        "and schedule it."
    ),
    "spirituality": (
        "Set aside a short daily or weekly ritual (reflection, journaling, or quiet time) "
        "to reconnect with your values."
    ),
}

FALLBACK_ACTION_TEMPLATE = (
    'Choose one small, realistic action this week that would move your "{label}" '
    "score up by just one point."
)


def suggest_for_category(category_id: str, label: str) -> str:
    """Bespoke action for a built-in id, generic template otherwise."""
    suggestion = ACTION_SUGGESTIONS.get(category_id)
    if suggestion is not None:
        return suggestion
    return FALLBACK_ACTION_TEMPLATE.format(label=label)


def _is_score(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def rank_priorities(
    categories: Sequence[Category],
    scores: Mapping[str, float],
    limit: int = PRIORITY_COUNT,
) -> list[Category]:
    """
    Lowest-scoring categories first.

    sorted() is stable, so equal scores keep registry order.
    """
    rated = [c for c in categories if _is_score(scores.get(c.label))]
    ranked = sorted(rated, key=lambda c: scores[c.label])
    return ranked[:limit]


def generate_insights(
    categories: Sequence[Category],
    scores: Mapping[str, float],
) -> InsightResult:
    """Summary, highlights and actions for the current wheel."""
    rated = [c for c in categories if _is_score(scores.get(c.label))]
    if not rated:
        return InsightResult(summary=PLACEHOLDER_SUMMARY)

    values = [scores[c.label] for c in rated]
    average = sum(values) / len(values)
    summary = SUMMARY_TEMPLATE.format(average=average, count=len(rated))

    highlights = []
    actions = []
    for category in rank_priorities(rated, scores):
        highlights.append(
            HIGHLIGHT_TEMPLATE.format(label=category.label, score=scores[category.label])
        )
        actions.append(suggest_for_category(category.id, category.label))

    return InsightResult(summary=summary, highlights=highlights, actions=actions)
