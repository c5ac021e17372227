"""Create tables and seed the category/source reference entities."""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from common.cli_helpers import setup_logging
from storage.connection import create_tables, get_session
from storage.models import Category, Source

logger = logging.getLogger(__name__)

# (name, slug, color, display_order)
CATEGORIES = [
    ("Innovation", "innovation", "cyan", 1),
    ("Science", "science", "violet", 2),
    ("Space", "space", "violet", 3),
    ("Health", "health", "rose", 4),
    ("Environment", "environment", "mint", 5),
    ("Community", "community", "mint", 6),
    ("Education", "education", "gold", 7),
    ("Kindness", "kindness", "rose", 8),
    ("Progress", "progress", "gold", 9),
    ("The Weird", "weird", "orange", 10),
]

# (name, slug, url, api_source, reliability_score)
SOURCES = [
    ("Reuters", "reuters", "https://reuters.com", "newsapi", 5),
    ("AP News", "ap", "https://apnews.com", "newsapi", 5),
    ("BBC", "bbc", "https://bbc.com", "newsapi", 5),
    ("Nature", "nature", "https://nature.com", "rss", 5),
    ("The Lancet", "lancet", "https://thelancet.com", "rss", 5),
    ("NASA", "nasa", "https://nasa.gov", "rss", 5),
    ("The Guardian", "guardian", "https://theguardian.com", "guardian", 4),
    ("Bloomberg", "bloomberg", "https://bloomberg.com", "newsapi", 4),
    ("Wired", "wired", "https://wired.com", "newsapi", 4),
    ("MIT Tech Review", "mittr", "https://technologyreview.com", "rss", 5),
    ("Ars Technica", "arstechnica", "https://arstechnica.com", "rss", 4),
    ("Good News Network", "gnn", "https://goodnewsnetwork.org", "rss", 3),
    ("Reasons to be Cheerful", "rtbc", "https://reasonstobecheerful.world", "rss", 4),
    ("Future Crunch", "futurecrunch", "https://futurecrunch.com", "rss", 4),
    ("STAT News", "statnews", "https://statnews.com", "rss", 5),
    ("Space.com", "spacecom", "https://space.com", "rss", 4),
    ("ESA", "esa", "https://esa.int", "rss", 5),
    ("Science Daily", "sciencedaily", "https://sciencedaily.com", "rss", 4),
    ("Positive News", "positivenews", "https://positive.news", "rss", 4),
    ("New Scientist", "newscientist", "https://newscientist.com", "rss", 4),
]


def seed_reference_data(session: Session) -> tuple[int, int]:
    """Insert any missing categories and sources. Returns (categories, sources) added."""
    existing_categories = set(session.execute(select(Category.slug)).scalars())
    categories_added = 0
    for name, slug, color, order in CATEGORIES:
        if slug in existing_categories:
            continue
        session.add(Category(name=name, slug=slug, color=color, display_order=order))
        categories_added += 1

    existing_sources = set(session.execute(select(Source.slug)).scalars())
    sources_added = 0
    for name, slug, url, api_source, reliability in SOURCES:
        if slug in existing_sources:
            continue
        session.add(Source(
            name=name,
            slug=slug,
            url=url,
            api_source=api_source,
            reliability_score=reliability,
        ))
        sources_added += 1

    session.commit()
    logger.info("Seeded %d categories and %d sources", categories_added, sources_added)
    return categories_added, sources_added


def init_db() -> None:
    """Create tables and seed reference data on DATABASE_URL."""
    create_tables()
    with get_session() as session:
        seed_reference_data(session)


if __name__ == "__main__":
    setup_logging()
    init_db()
