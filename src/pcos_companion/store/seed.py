"""Bootstrap reference content loaded when the store is created."""

import logging
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .facade import Storage

logger = logging.getLogger(__name__)


SAMPLE_CONTENT = [
    {
        "title": "Understanding PCOS: The Basics",
        "description": (
            "What polycystic ovary syndrome is, how it is diagnosed, "
            "and the symptoms most people notice first."
        ),
        "content_type": "article",
        "category": "Medical",
        "image_url": "https://images.unsplash.com/photo-1576091160550-2173dba999ef",
        "tags": ["pcos", "diagnosis", "symptoms"],
    },
    {
        "title": "Eating for Insulin Resistance",
        "description": (
            "Building balanced plates with protein, fibre and low-glycaemic "
            "carbohydrates to keep blood sugar steady."
        ),
        "content_type": "article",
        "category": "Nutrition",
        "image_url": "https://images.unsplash.com/photo-1512621776951-a57141f2eefd",
        "tags": ["nutrition", "insulin", "diet"],
    },
    {
        "title": "Anti-Inflammatory Foods Guide",
        "description": "A visual guide to foods that may help reduce inflammation.",
        "content_type": "infographic",
        "category": "Nutrition",
        "image_url": "https://images.unsplash.com/photo-1490645935967-10de6ba17061",
        "tags": ["nutrition", "inflammation"],
    },
    {
        "title": "Strength Training with PCOS",
        "description": (
            "Why resistance training improves insulin sensitivity and a "
            "beginner-friendly weekly routine."
        ),
        "content_type": "video",
        "category": "Exercise",
        "image_url": "https://images.unsplash.com/photo-1534438327276-14e5300c3a48",
        "video_url": "https://www.youtube.com/watch?v=pcos-strength-basics",
        "tags": ["exercise", "strength", "insulin"],
    },
    {
        "title": "Managing Stress and Cortisol",
        "description": (
            "Breathing, sleep and journaling techniques for keeping stress "
            "hormones in check."
        ),
        "content_type": "article",
        "category": "Mental Health",
        "image_url": "https://images.unsplash.com/photo-1506126613408-eca07ce68773",
        "tags": ["stress", "cortisol", "mindfulness"],
    },
    {
        "title": "Tracking Your Cycle",
        "description": "How to log periods, flow and symptoms to spot patterns over time.",
        "content_type": "article",
        "category": "Lifestyle",
        "image_url": "https://images.unsplash.com/photo-1584515933487-779824d29309",
        "tags": ["cycle", "tracking", "periods"],
    },
]

SAMPLE_QUOTES = [
    {
        "quote": "You are not your diagnosis. You are so much more.",
        "author": "Unknown",
        "category": "Self-Love",
    },
    {
        "quote": "Small steps every day add up to big changes.",
        "author": "Unknown",
        "category": "Progress",
    },
    {
        "quote": "Almost everything will work again if you unplug it for a few minutes, including you.",
        "author": "Anne Lamott",
        "category": "Rest",
    },
    {
        "quote": "Take care of your body. It's the only place you have to live.",
        "author": "Jim Rohn",
        "category": "Health",
    },
    {
        "quote": "Be gentle with yourself, you're doing the best you can.",
        "author": "Unknown",
        "category": "Self-Love",
    },
]


def seed_reference_content(storage: "Storage", now: datetime) -> None:
    """Load the sample articles and quotes into a fresh store.

    Every content record is stamped with ``now``.
    """
    for payload in SAMPLE_CONTENT:
        storage.educational_content.collection.insert(payload, created_at=now)
    for payload in SAMPLE_QUOTES:
        storage.motivational_quotes.collection.insert(payload)

    logger.info(
        "Seeded %d content items and %d quotes",
        len(SAMPLE_CONTENT),
        len(SAMPLE_QUOTES),
    )
