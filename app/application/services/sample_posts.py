"""
Sample posts inserted on startup when SEED_SAMPLE_POSTS is enabled, so that
a fresh database answers GET /posts with something.
"""
# Standard library imports
import logging
from typing import List

# Local application imports
from ...domain.models.post import Author, BlogPost
from ...domain.repositories.post_repository import PostRepository
from ...utils.datetime_utils import utc_now

logger = logging.getLogger(__name__)


def lorem() -> str:
    """Placeholder body text for the sample posts"""
    return (
        "Lorem ipsum dolor sit amet, consectetur adipisicing elit, sed do eiusmod "
        "tempor incididunt ut labore et dolore magna aliqua. Ut enim ad minim veniam, "
        "quis nostrud exercitation ullamco laboris nisi ut aliquip ex ea commodo "
        "consequat. Duis aute irure dolor in reprehenderit in voluptate velit esse "
        "cillum dolore eu fugiat nulla pariatur. Excepteur sint occaecat cupidatat non "
        "proident, sunt in culpa qui officia deserunt mollit anim id est laborum."
    )


def build_sample_posts() -> List[BlogPost]:
    created = utc_now()
    return [
        BlogPost(
            id=None,
            title="10 things -- you won't believe #4",
            content=lorem(),
            author=Author(first_name="Billy", last_name="Bob"),
            created=created,
        ),
        BlogPost(
            id=None,
            title="Lions and tigers and bears oh my",
            content=lorem(),
            author=Author(first_name="Lefty", last_name="Lil"),
            created=created,
        ),
    ]


async def seed_sample_posts(post_repository: PostRepository) -> int:
    """
    Insert the sample posts if the store is empty
    
    Args:
        post_repository: Repository to seed
        
    Returns:
        Number of posts inserted (0 when the store already had posts)
    """
    existing = await post_repository.count()
    if existing > 0:
        logger.info(f"Skipping sample posts, {existing} post(s) already stored")
        return 0
    
    inserted = await post_repository.insert_many(build_sample_posts())
    logger.info(f"Seeded {len(inserted)} sample posts")
    return len(inserted)
