import json
import logging
import sys
import argparse

from core.config_loader import load_config
from core.app_context import AppContext
from core.matcher.models import JobProfile
from database.database import configure_engine, init_db
from database.uow import candidate_uow

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def positive_int(value):
    """argparse type for result limits."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return number


def load_job_file(path):
    """Load a job description JSON file.

    Expected keys: requirements, location, minExperienceYears, summary and
    an optional precomputed queryEmbedding for the similarity search.
    """
    with open(path, "r") as f:
        data = json.load(f)
    return JobProfile.from_dict(data), data.get('queryEmbedding')


def run_match(args, ctx):
    job, query_embedding = load_job_file(args.job_file)
    logger.info(f"Matching candidates for job with {len(job.requirements)} requirements")

    with candidate_uow() as repos:
        service = ctx.matching_service(repos)
        result = service.find_matching_candidates(job, query_embedding, max_results=args.top)

    output = {
        'candidates': [c.to_dict() for c in result.candidates],
        'searchMetadata': result.search_metadata,
    }
    json.dump(output, sys.stdout, indent=2, default=str)
    sys.stdout.write("\n")
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(description="Rank candidates against a job opening")
    parser.add_argument("--config", default="config.yaml", help="Path to config.yaml")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("init-db", help="Create database tables")

    match_parser = subparsers.add_parser("match", help="Match candidates to a job JSON file")
    match_parser.add_argument("job_file", help="Path to job JSON file")
    match_parser.add_argument("--top", type=positive_int, default=None, help="Override result limit")

    args = parser.parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # Weight validation failures are fatal here, before any matching runs
    config = load_config(args.config)
    configure_engine(config.database.url)

    if args.command == "init-db":
        init_db()
        logger.info("Database initialized")
        return 0

    ctx = AppContext.build(config)
    return run_match(args, ctx)


if __name__ == "__main__":
    sys.exit(main())
