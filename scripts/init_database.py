#!/usr/bin/env python
"""
Database initialization script for the movie catalog.

This script:
1. Creates the database schema (movies, reviews, watch_history)
2. Optionally seeds a handful of sample movies with reviews and watch history
3. Verifies that every table exists

Usage:
    # Create tables only
    python scripts/init_database.py

    # Start over with sample data
    python scripts/init_database.py --reset --seed
"""

import sys
import argparse
from datetime import date, timedelta
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from movie_catalog.core import MovieService, ReviewService, WatchHistoryService
from movie_catalog.database import init_database, verify_schema
from movie_catalog.database.connection import DEFAULT_DB_PATH
from movie_catalog.utils.logging_config import configure_script_logging, get_logger

logger = get_logger(__name__)


SAMPLE_MOVIES = [
    {
        "title": "The Matrix",
        "release_year": 1999,
        "description": "A hacker learns that his world is a simulation.",
        "rating": 8.7,
        "duration_minutes": 136,
        "genre": "Action, Sci-Fi",
        "review": (9.0, "Still holds up."),
        "status": "Completed",
    },
    {
        "title": "Spirited Away",
        "release_year": 2001,
        "description": "A girl wanders into a world of spirits.",
        "rating": 8.6,
        "duration_minutes": 125,
        "genre": "Animation, Fantasy",
        "review": (9.5, None),
        "status": "Watching",
    },
    {
        "title": "Heat",
        "release_year": 1995,
        "description": "A detective hunts a crew of professional thieves.",
        "rating": 8.3,
        "duration_minutes": 170,
        "genre": "Crime, Thriller",
        "review": None,
        "status": "Planned",
    },
    {
        "title": "Arrival",
        "release_year": 2016,
        "description": "A linguist is recruited to talk to visitors from space.",
        "rating": 7.9,
        "duration_minutes": 116,
        "genre": "Drama, Sci-Fi",
        "review": None,
        "status": None,
    },
]


def print_section(title):
    """Print a formatted section header."""
    print(f"\n{'='*60}")
    print(f"{title}")
    print('='*60)


def seed_sample_data(db_manager, verbose=True):
    """
    Insert the sample movies with their reviews and watch history.

    Args:
        db_manager: DatabaseManager instance
        verbose: Print progress

    Returns:
        Number of movies inserted
    """
    if verbose:
        print_section("Seeding Sample Data")

    today = date.today()
    with db_manager.session_scope() as session:
        movies = MovieService(session)
        reviews = ReviewService(session, movies)
        history = WatchHistoryService(session, movies)

        for sample in SAMPLE_MOVIES:
            fields = {k: v for k, v in sample.items() if k not in ("review", "status")}
            movie = movies.save(**fields)

            if sample["review"]:
                rating, comment = sample["review"]
                reviews.save(movie.id, rating=rating, watch_date=today - timedelta(days=7), comment=comment)

            if sample["status"]:
                history.create(
                    movie_id=movie.id,
                    status=sample["status"],
                    added_date=today - timedelta(days=30),
                    completed_date=today if sample["status"] == "Completed" else None,
                )

            if verbose:
                print(f"  + {movie.title} ({movie.release_year})")

    return len(SAMPLE_MOVIES)


def main():
    """Main entry point for database initialization."""

    parser = argparse.ArgumentParser(
        description="Initialize the movie catalog database",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Create missing tables
  python scripts/init_database.py

  # Drop everything and load sample data
  python scripts/init_database.py --reset --seed
        """
    )

    parser.add_argument(
        '--reset',
        action='store_true',
        help='Drop and recreate database tables (WARNING: deletes all data)'
    )
    parser.add_argument(
        '--seed',
        action='store_true',
        help='Insert sample movies, reviews, and watch history'
    )
    parser.add_argument(
        '--db-path',
        type=str,
        default=DEFAULT_DB_PATH,
        help=f'Path to SQLite database file (default: {DEFAULT_DB_PATH})'
    )
    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Suppress verbose output'
    )

    args = parser.parse_args()
    verbose = not args.quiet
    configure_script_logging()

    if verbose:
        print("="*60)
        print("Movie Catalog Database Initialization")
        print("="*60)
        print(f"\nDatabase: {args.db_path}")
        print(f"Mode: {'Reset' if args.reset else 'Keep existing'}")

    try:
        db_manager = init_database(db_path=args.db_path, reset=args.reset)

        if args.seed:
            count = seed_sample_data(db_manager, verbose=verbose)
            logger.info(f"Seeded {count} movies")

        success = verify_schema(db_manager)

        if verbose:
            print_section("Summary")
            print("\n[SUCCESS] Database ready." if success else "\n[ERROR] Schema incomplete.")
            print("\nNext: uvicorn movie_catalog.api.main:app --port 8000")
            print("="*60)

        sys.exit(0 if success else 1)

    except Exception as e:
        logger.exception(f"Initialization failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
