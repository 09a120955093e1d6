"""Categorization backfill and matching entry point with APScheduler.

- Periodic backfill of missing categorization columns on stored ideas
- ``--once`` runs a single backfill pass
- ``--match <idea_id>`` ranks diaspora mentors for one idea
- ``--categorize <idea_id>`` categorizes one idea
- ``--stats`` logs categorization coverage
"""

import asyncio
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from .categorizer import describe_sdgs
from .config import Config, load_config
from .database import SupabaseClient
from .exceptions import IdeaNotFoundError
from .llm import PrioritySuggester
from .matching import load_match_config
from .services import (
    backfill_categorization,
    categorization_report,
    categorize_idea,
    match_idea,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)


def build_suggester(config: Config) -> Optional[PrioritySuggester]:
    """Return the LLM priority suggester, or None when the fallback is off."""
    if not config.ai_fallback_enabled:
        return None
    return PrioritySuggester(
        api_key=config.anthropic_api_key,
        model=config.anthropic_model,
        timeout=config.llm_timeout_seconds,
    )


async def run_backfill(config: Optional[Config] = None) -> dict:
    """Run one categorization backfill pass over all stored ideas."""
    config = config or load_config()
    start_time = datetime.now(timezone.utc)
    logger.info("Starting categorization backfill")

    try:
        db = SupabaseClient(config.supabase_url, config.supabase_key)
        result = await backfill_categorization(
            db,
            suggest_priorities=build_suggester(config),
            page_size=config.backfill_page_size,
        )
    except Exception as e:
        logger.error("Backfill failed: %s", e, exc_info=True)
        raise

    duration = (datetime.now(timezone.utc) - start_time).total_seconds()
    logger.info(
        "Backfill finished in %.2f seconds: %d processed, %d updated, %d skipped",
        duration, result["processed"], result["updated"], result["skipped"],
    )
    return result


def run_match(idea_id: str, config: Optional[Config] = None) -> int:
    """Match one idea and log the ranking. Returns a process exit code."""
    config = config or load_config()
    db = SupabaseClient(config.supabase_url, config.supabase_key)
    weights = load_match_config(config.match_config_path)

    try:
        outcome = match_idea(db, idea_id, weights)
    except IdeaNotFoundError as e:
        logger.error("%s", e)
        return 1

    logger.info("%s (%s)", outcome.message, outcome.idea_title or idea_id)
    for rank, match in enumerate(outcome.matches, start=1):
        logger.info(
            "  %d. %s score=%d [%s]",
            rank, match.profile_name, match.score, "; ".join(match.reasoning.details),
        )
    if outcome.matches and not outcome.persisted:
        logger.warning("Matches were computed but not saved for idea %s", idea_id)
    return 0


async def run_categorize(idea_id: str, config: Optional[Config] = None) -> int:
    """Categorize one idea, persist and log the tags. Returns a process exit code."""
    config = config or load_config()
    db = SupabaseClient(config.supabase_url, config.supabase_key)

    try:
        tags = await categorize_idea(
            db,
            idea_id,
            suggest_priorities=build_suggester(config),
            use_ai_fallback=config.use_ai_fallback,
        )
    except IdeaNotFoundError as e:
        logger.error("%s", e)
        return 1

    logger.info(
        "Idea %s: priorities=%s budget=%s location=%s complexity=%s",
        idea_id, tags.moroccan_priorities, tags.budget_tier, tags.location_type, tags.complexity,
    )
    if tags.sdg_alignment:
        for label in describe_sdgs(tags.sdg_alignment.sdg_tags):
            logger.info("  %s", label)
    return 0


def run_stats(config: Optional[Config] = None) -> int:
    """Log categorization coverage across stored ideas."""
    config = config or load_config()
    db = SupabaseClient(config.supabase_url, config.supabase_key)
    stats = categorization_report(db)

    logger.info("Ideas: %d", stats.total)
    for name, coverage in stats.coverage.items():
        logger.info("  %s: %d (%d%%)", name, coverage.count, coverage.percentage)
    for code, count in sorted(stats.priorities.items(), key=lambda kv: -kv[1]):
        logger.info("  priority %s: %d", code, count)
    logger.info("Uncategorized ideas: %d", len(stats.uncategorized))
    return 0


def start_scheduler():
    """Start APScheduler for periodic categorization backfill."""
    config = load_config()

    logging.getLogger().setLevel(config.log_level)

    logger.info("Initializing categorization backfill")
    logger.info("Backfill interval: %d minutes", config.backfill_interval_minutes)
    if not config.ai_fallback_enabled:
        logger.info("Priority suggester disabled; rules only")

    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)

    scheduler = AsyncIOScheduler(event_loop=loop)

    scheduler.add_job(
        run_backfill,
        trigger=IntervalTrigger(minutes=config.backfill_interval_minutes),
        args=[config],
        id="categorization_backfill",
        name="Backfill idea categorization",
        replace_existing=True,
        max_instances=1,  # Prevent overlapping runs
    )

    scheduler.start()
    logger.info("Scheduler started")

    logger.info("Running initial backfill...")
    loop.create_task(run_backfill(config))

    try:
        loop.run_forever()
    except (KeyboardInterrupt, SystemExit):
        logger.info("Shutting down scheduler...")
        scheduler.shutdown()
        logger.info("Scheduler stopped")


def main(argv: Optional[list] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv

    if argv and argv[0] == "--once":
        asyncio.run(run_backfill())
        return 0
    if argv and argv[0] == "--match":
        if len(argv) < 2:
            logger.error("Usage: --match <idea_id>")
            return 2
        return run_match(argv[1])
    if argv and argv[0] == "--categorize":
        if len(argv) < 2:
            logger.error("Usage: --categorize <idea_id>")
            return 2
        return asyncio.run(run_categorize(argv[1]))
    if argv and argv[0] == "--stats":
        return run_stats()

    start_scheduler()
    return 0


if __name__ == "__main__":
    sys.exit(main())
