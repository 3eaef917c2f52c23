"""
Seed the advocates table with sample advocates (name, city, degree, specialties, experience, phone).
Run from apps/api: uv run python scripts/seed_db.py [--count 100] [--reset]
"""
import argparse
import asyncio
import logging
import random
import sys
from pathlib import Path

# Ensure advocates is importable when run from repo root or apps/api
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sqlalchemy import delete

from advocates.db.session import async_session
from advocates.db.models import Advocate, AdvocateSpecialty

logger = logging.getLogger(__name__)

DEFAULT_COUNT = 100
RANDOM_SEED = 42

FIRST_NAMES = [
    "John", "Jane", "Alice", "Michael", "Emily", "Chris", "Jessica", "David",
    "Laura", "Daniel", "Sarah", "James", "Megan", "Joshua", "Amanda", "Maria",
    "Robert", "Lisa", "Amelia", "Noah",
]
LAST_NAMES = [
    "Doe", "Smith", "Johnson", "Brown", "Davis", "Martinez", "Taylor", "Harris",
    "Clark", "Lewis", "Lee", "King", "Green", "Walker", "Hall", "Garcia",
    "Chen", "Rodriguez", "Thompson", "Williams",
]
CITIES = [
    "New York", "Los Angeles", "Chicago", "Houston", "Phoenix", "Philadelphia",
    "San Antonio", "San Diego", "Dallas", "San Jose", "Austin", "Jacksonville",
    "Boston", "Seattle", "Denver",
]
DEGREES = ["MD", "PhD", "MSW"]
SPECIALTIES = [
    "Bipolar",
    "LGBTQ",
    "Medication/Prescribing",
    "Suicide History/Attempts",
    "General Mental Health (anxiety, depression, stress, grief, life transitions)",
    "Men's issues",
    "Relationship Issues (family, friends, couple, etc)",
    "Trauma & PTSD",
    "Personality disorders",
    "Personal growth",
    "Substance use/abuse",
    "Pediatrics",
    "Women's issues (post-partum, infertility, family planning)",
    "Chronic pain",
    "Weight loss & nutrition",
    "Eating disorders",
    "Diabetic Diet and nutrition",
    "Coaching (leadership, career, academic and wellness)",
    "Life coaching",
    "Obsessive-compulsive disorders",
    "Neuropsychological evaluations & testing (ADHD testing)",
    "Attention and Hyperactivity (ADHD)",
    "Sleep issues",
    "Schizophrenia and psychotic disorders",
    "Learning disorders",
    "Domestic abuse",
]


def build_advocates(count: int, seed: int = RANDOM_SEED) -> list[Advocate]:
    rng = random.Random(seed)
    advocates = []
    for _ in range(count):
        picked = rng.sample(SPECIALTIES, k=rng.randint(1, 4))
        advocate = Advocate(
            first_name=rng.choice(FIRST_NAMES),
            last_name=rng.choice(LAST_NAMES),
            city=rng.choice(CITIES),
            degree=rng.choice(DEGREES),
            years_of_experience=rng.randint(0, 30),
            phone_number=rng.randint(2_000_000_000, 9_999_999_999),
        )
        advocate.specialty_rows = [
            AdvocateSpecialty(position=i, name=name) for i, name in enumerate(picked)
        ]
        advocates.append(advocate)
    return advocates


async def seed(count: int, reset: bool) -> None:
    async with async_session() as session:
        if reset:
            await session.execute(delete(AdvocateSpecialty))
            await session.execute(delete(Advocate))
        session.add_all(build_advocates(count))
        await session.commit()
    logger.info("Seeded %d advocates", count)


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--count", type=int, default=DEFAULT_COUNT)
    parser.add_argument("--reset", action="store_true", help="Delete existing advocates first")
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO)
    asyncio.run(seed(args.count, args.reset))


if __name__ == "__main__":
    main()
