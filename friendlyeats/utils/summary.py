"""
Dataset summary.

Per-restaurant review statistics and aggregate consistency checks.
"""

import logging
import os
from collections import Counter, defaultdict
from datetime import datetime, timezone
from typing import List

import pandas as pd

from friendlyeats.pipeline.fabricator import SampleData

logger = logging.getLogger(__name__)

SUMMARY_COLUMNS = [
    'restaurant_id', 'name', 'city', 'category', 'price',
    'review_count', 'average_rating', 'computed_average', 'total_yums'
]


def restaurant_summary(data: SampleData) -> pd.DataFrame:
    """
    Build one row per restaurant.

    average_rating is the stored running aggregate; computed_average is
    recomputed from the reviews, so the two differ only if aggregation
    went wrong (or the legacy formula was used).

    Returns:
        DataFrame sorted by review_count (descending), then name
    """
    rows = []
    reviews = pd.DataFrame(
        [
            {
                'restaurant_id': r.restaurant_id,
                'rating': r.rating,
                'yum_count': r.yum_count,
            }
            for r in data.reviews
        ],
        columns=['restaurant_id', 'rating', 'yum_count']
    )
    by_restaurant = reviews.groupby('restaurant_id')

    for restaurant in data.restaurants:
        row = {
            'restaurant_id': restaurant.restaurant_id,
            'name': restaurant.name,
            'city': restaurant.city,
            'category': restaurant.category,
            'price': restaurant.price,
            'review_count': restaurant.review_count,
            'average_rating': restaurant.average_rating,
            'computed_average': 0.0,
            'total_yums': 0,
        }
        if restaurant.restaurant_id in by_restaurant.groups:
            group = by_restaurant.get_group(restaurant.restaurant_id)
            row['computed_average'] = float(group['rating'].mean())
            row['total_yums'] = int(group['yum_count'].sum())
        rows.append(row)

    df = pd.DataFrame(rows, columns=SUMMARY_COLUMNS)
    if not df.empty:
        df = df.sort_values(['review_count', 'name'], ascending=[False, True])
        df = df.reset_index(drop=True)
    return df


def write_summary(data: SampleData, output_dir: str) -> str:
    """
    Save the restaurant summary as CSV.

    Returns:
        Path to generated CSV file
    """
    df = restaurant_summary(data)

    os.makedirs(output_dir, exist_ok=True)
    stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    output_path = os.path.join(output_dir, f"sample_data_{stamp}.csv")
    df.to_csv(output_path, index=False)

    logger.info(f"Summary saved to {output_path} ({len(df)} restaurants)")
    return output_path


def check_consistency(data: SampleData, tolerance: float = 1e-6) -> List[str]:
    """
    Compare stored aggregates against the records they summarize.

    Returns:
        Human-readable problems; empty when the dataset is consistent
    """
    problems = []

    reviews_per_restaurant = Counter(r.restaurant_id for r in data.reviews)
    ratings = defaultdict(list)
    for review in data.reviews:
        ratings[review.restaurant_id].append(review.rating)

    for restaurant in data.restaurants:
        expected = reviews_per_restaurant.get(restaurant.restaurant_id, 0)
        if restaurant.review_count != expected:
            problems.append(
                f"Restaurant {restaurant.restaurant_id} has reviewCount "
                f"{restaurant.review_count}, expected {expected}"
            )
        values = ratings.get(restaurant.restaurant_id)
        if values:
            mean = sum(values) / len(values)
            if abs(restaurant.average_rating - mean) > tolerance:
                problems.append(
                    f"Restaurant {restaurant.restaurant_id} has averageRating "
                    f"{restaurant.average_rating:.4f}, expected {mean:.4f}"
                )

    yums_per_review = Counter(y.review_id for y in data.yums)
    for review in data.reviews:
        expected = yums_per_review.get(review.review_id, 0)
        if review.yum_count != expected:
            problems.append(
                f"Review {review.review_id} has yumCount {review.yum_count}, "
                f"expected {expected}"
            )

    pairs = Counter((y.user_id, y.review_id) for y in data.yums)
    for (user_id, review_id), count in pairs.items():
        if count > 1:
            problems.append(f"User {user_id} yummed review {review_id} {count} times")

    if problems:
        logger.warning(f"Found {len(problems)} consistency problems")
    return problems
