"""Built-in demo articles shown whenever live ingestion is unavailable."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional, Tuple

from ingestion.connectors.base import build_article
from ingestion.models.domain import Article, CategoryLabel

# (category, hours before now, record)
_DEMO_RECORDS: Tuple[Tuple[CategoryLabel, int, Dict[str, Any]], ...] = (
    (
        "ai",
        2,
        {
            "title": "OpenAI Unveils GPT-5: Next Generation AI Model",
            "description": "OpenAI announces GPT-5 with significant improvements in reasoning and multimodal "
            "capabilities, pushing the boundaries of artificial intelligence.",
            "content": "The new model demonstrates unprecedented performance in complex reasoning tasks and shows "
            "improved safety features.",
            "source": {"name": "TechCrunch", "url": "https://techcrunch.com"},
            "url": "https://techcrunch.com",
            "image": "https://images.unsplash.com/photo-1677442136019-21780ecad995?auto=format&fit=crop&w=800",
        },
    ),
    (
        "robotics",
        5,
        {
            "title": "Boston Dynamics Announces New Atlas Robot with AI Integration",
            "description": "The latest humanoid robot features advanced AI for autonomous decision-making and "
            "complex task execution in industrial environments.",
            "content": "Atlas now features enhanced mobility and can perform complex manipulation tasks in "
            "unstructured environments.",
            "source": {"name": "Wired", "url": "https://wired.com"},
            "url": "https://wired.com",
            "image": "https://images.unsplash.com/photo-1678931561580-7dcc8f7e5b3a?auto=format&fit=crop&w=800",
        },
    ),
    (
        "quantum",
        24,
        {
            "title": "Quantum Computing Breakthrough Achieves 1000 Qubits",
            "description": "Researchers achieve a major milestone in quantum computing, bringing practical quantum "
            "applications closer to reality.",
            "content": "The breakthrough reduces error rates significantly, making quantum computing more viable "
            "for real-world applications.",
            "source": {"name": "Nature", "url": "https://nature.com"},
            "url": "https://nature.com",
            "image": "https://images.unsplash.com/photo-1635070041078-e363dbe005cb?auto=format&fit=crop&w=800",
        },
    ),
    (
        "ai",
        12,
        {
            "title": "Neuralink's First Human Trial Shows Promising Results",
            "description": "Initial results from Neuralink's brain-computer interface trial demonstrate successful "
            "neural signal transmission and decoding.",
            "content": "Patients with paralysis were able to control digital devices using only their thoughts.",
            "source": {"name": "The Verge", "url": "https://theverge.com"},
            "url": "https://theverge.com",
            "image": "https://images.unsplash.com/photo-1555255707-c07966088b7b?auto=format&fit=crop&w=800",
        },
    ),
    (
        "robotics",
        8,
        {
            "title": "Autonomous Delivery Robots Approved for Citywide Deployment",
            "description": "Major city approves expansion of autonomous delivery robots, revolutionizing last-mile "
            "logistics and reducing traffic congestion.",
            "content": "The robots can navigate sidewalks and crosswalks safely, delivering packages within "
            "30 minutes.",
            "source": {"name": "Forbes", "url": "https://forbes.com"},
            "url": "https://forbes.com",
            "image": "https://images.unsplash.com/photo-1544319733-053e92c8d5a0?auto=format&fit=crop&w=800",
        },
    ),
    (
        "ai",
        36,
        {
            "title": "New AI Algorithm Can Predict Protein Folding in Minutes",
            "description": "Breakthrough in computational biology allows AI to predict protein structures with "
            "unprecedented speed and accuracy.",
            "content": "This advancement could accelerate drug discovery and understanding of genetic diseases.",
            "source": {"name": "Science Journal", "url": "https://science.org"},
            "url": "https://science.org",
            "image": "https://images.unsplash.com/photo-1558618666-fcd25c85cd64?auto=format&fit=crop&w=800",
        },
    ),
    (
        "cybersecurity",
        6,
        {
            "title": "Cybersecurity Firm Discovers Critical Zero-Day Vulnerability",
            "description": "Major security flaw discovered in widely used enterprise software, affecting millions "
            "of systems worldwide.",
            "content": "The vulnerability allows remote code execution and requires immediate patching.",
            "source": {"name": "Security Weekly", "url": "https://securityweekly.com"},
            "url": "https://securityweekly.com",
            "image": "https://images.unsplash.com/photo-1550751827-4bd374c3f58b?auto=format&fit=crop&w=800",
        },
    ),
    (
        "robotics",
        18,
        {
            "title": "Tesla Unveils Next-Generation Humanoid Robot Prototype",
            "description": "Tesla's Optimus robot demonstrates new capabilities including object manipulation and "
            "environmental navigation.",
            "content": "The robot can now perform complex manufacturing tasks with human-like dexterity.",
            "source": {"name": "Tesla Blog", "url": "https://tesla.com"},
            "url": "https://tesla.com",
            "image": "https://images.unsplash.com/photo-1485827404703-89b55fcc595e?auto=format&fit=crop&w=800",
        },
    ),
    (
        "ai",
        48,
        {
            "title": "Major Tech Companies Form AI Ethics Consortium",
            "description": "Leading tech companies establish consortium to develop ethical guidelines for AI "
            "development and deployment.",
            "content": "The consortium aims to address bias, transparency, and accountability in AI systems.",
            "source": {"name": "Tech Ethics Review", "url": "https://techethics.org"},
            "url": "https://techethics.org",
            "image": "https://images.unsplash.com/photo-1551288049-bebda4e38f71?auto=format&fit=crop&w=800",
        },
    ),
)


def demo_articles(now: Optional[datetime] = None) -> List[Article]:
    """Return a fresh copy of the demo set; ids are regenerated per call."""
    current = now or datetime.now(timezone.utc)
    articles: List[Article] = []
    for category, hours_ago, record in _DEMO_RECORDS:
        item = {**record, "publishedAt": current - timedelta(hours=hours_ago)}
        articles.append(build_article(item, category=category, now=current))
    return articles
