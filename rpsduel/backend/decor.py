"""Decorative content for message bodies."""

from __future__ import annotations

import random

EMOJIS = ["😭", "😄", "😌", "🤓", "😎", "😤", "🤖", "😶‍🌫️", "🌏", "📸", "💿", "👋", "🌊", "✨"]


def random_emoji(rng: random.Random | None = None) -> str:
    return (rng or random).choice(EMOJIS)
