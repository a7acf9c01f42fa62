"""Run the category tree integrity check on a schedule"""

import argparse
import logging
from datetime import datetime
from typing import List, Optional

from apscheduler.schedulers.blocking import BlockingScheduler

from category_tree.config import settings
from category_tree.jobs.integrity_check import check_category_tree
from category_tree.utils.logger import setup_logging

logger = logging.getLogger(__name__)


def build_scheduler(interval_minutes: int) -> BlockingScheduler:
    """Scheduler with the integrity job registered, first run immediately"""
    scheduler = BlockingScheduler()
    scheduler.add_job(
        check_category_tree,
        'interval',
        minutes=interval_minutes,
        id='category_tree_integrity',
        replace_existing=True,
        next_run_time=datetime.now()
    )
    return scheduler


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point, returns the process exit code"""
    setup_logging()
    parser = argparse.ArgumentParser(description="Periodically scan the category tree for orphans")
    parser.add_argument(
        "--interval",
        type=int,
        default=settings.INTEGRITY_CHECK_INTERVAL_MINUTES,
        help="Minutes between scans"
    )
    parser.add_argument("--once", action="store_true", help="Run a single scan and exit")
    args = parser.parse_args(argv)

    if args.once:
        result = check_category_tree()
        print(result)
        return 1 if result["status"] == "error" else 0

    scheduler = build_scheduler(args.interval)
    logger.info(f"Starting {settings.APP_NAME} integrity monitor ({settings.ENVIRONMENT}), interval {args.interval} minutes")
    try:
        scheduler.start()
    except (KeyboardInterrupt, SystemExit):
        logger.info("Integrity monitor stopped")
    return 0
