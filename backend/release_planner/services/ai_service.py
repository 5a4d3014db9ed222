"""AI executive summary of a release's cost estimate."""
import logging
from typing import Iterable

from openai import AsyncOpenAI

from release_planner.config import get_settings
from release_planner.engine.calculator import CalculationEngine
from release_planner.engine.currency import format_currency
from release_planner.models import Allocation, Release, Resource
from release_planner.services.planning import assigned_resource_ids

logger = logging.getLogger(__name__)

NOT_CONFIGURED_MESSAGE = "AI summary unavailable: OPENAI_API_KEY not configured."
FAILED_MESSAGE = "Error generating executive summary. Please check your API key and try again."
EMPTY_MESSAGE = "Could not generate summary."

SUMMARY_PROMPT = """You are a Senior Project Manager Assistant.
Analyze the following estimation data for the release "{name}".

Start Month: {start_month}
End Month: {end_month}
Total Estimated Cost: {total}

Resource Breakdown:
{resource_lines}

Please provide a professional Executive Summary (approx 150 words).
Highlight the total cost, the primary cost drivers (resources), and any observations about the resource mix (Onsite vs Offshore).
Keep the tone corporate and concise.
"""


def build_summary_prompt(
    release: Release,
    resources: Iterable[Resource],
    allocations: Iterable[Allocation],
    engine: CalculationEngine | None = None,
) -> str:
    """Prompt text from the same per-resource totals the cost report uses."""
    engine = engine or CalculationEngine()
    resources = list(resources)
    allocations = list(allocations)
    breakdown = engine.release_cost_breakdown(release, resources, allocations)
    by_id = {r.id: r for r in resources}
    lines = []
    for rid in assigned_resource_ids(release.id, allocations):
        res = by_id.get(rid)
        if res is None:
            continue
        cost = format_currency(breakdown.by_resource[rid], "USD")
        lines.append(f"- {res.name} ({res.role}, {res.location.value}): {cost}")
    return SUMMARY_PROMPT.format(
        name=release.name,
        start_month=release.start_month,
        end_month=release.end_month,
        total=format_currency(breakdown.total, "USD"),
        resource_lines="\n".join(lines) or "- No resources assigned",
    )


async def generate_executive_summary(
    release: Release,
    resources: Iterable[Resource],
    allocations: Iterable[Allocation],
) -> str:
    """Narrative summary text. Never raises; failures come back as a plain message."""
    settings = get_settings()
    if not settings.openai_api_key:
        return NOT_CONFIGURED_MESSAGE

    try:
        prompt = build_summary_prompt(release, resources, allocations)
        client = AsyncOpenAI(api_key=settings.openai_api_key)
        response = await client.chat.completions.create(
            model=settings.openai_model,
            messages=[
                {"role": "system", "content": "You write concise executive summaries for project cost estimates."},
                {"role": "user", "content": prompt},
            ],
            temperature=0.3,
        )
        content = response.choices[0].message.content or ""
        return content.strip() or EMPTY_MESSAGE
    except Exception as e:
        logger.warning("Executive summary for release %s failed: %s", release.id, e)
        return FAILED_MESSAGE
