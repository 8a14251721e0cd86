"""Deterministic draw reports for a seeded sfc32 stream."""

import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict, List

from .prng import Sfc32
from .seeding import Xmur3

logger = logging.getLogger(__name__)


@dataclass
class DrawConfig:
    """What to draw and from which seed."""

    seed: str = ""
    count: int = 5
    skip: int = 0  # draws discarded before recording starts

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"count must be non-negative, got {self.count}")
        if self.skip < 0:
            raise ValueError(f"skip must be non-negative, got {self.skip}")


@dataclass
class DrawLog:
    index: int
    u32: int
    value: float


def run_draws(cfg: DrawConfig) -> Dict[str, Any]:
    """Draw ``cfg.count`` values after ``cfg.skip`` and summarise them."""

    seed_words = Xmur3(cfg.seed).words(4)
    logger.debug("seed %r expanded to words %s", cfg.seed, seed_words)
    rng = Sfc32(*seed_words)

    for _ in range(cfg.skip):
        rng.next_u32()

    log: List[DrawLog] = []
    for index in range(1, cfg.count + 1):
        raw = rng.next_u32()
        log.append(DrawLog(index=index, u32=raw, value=raw / 4294967296.0))

    values = [entry.value for entry in log]
    summary: Dict[str, Any] = {
        "count": len(values),
        "min": min(values) if values else None,
        "max": max(values) if values else None,
        "mean": sum(values) / len(values) if values else None,
    }
    logger.info(
        "drew %d values from seed %r (skipped %d)", cfg.count, cfg.seed, cfg.skip
    )

    return {
        "config": asdict(cfg),
        "seed_words": seed_words,
        "draws": [asdict(entry) for entry in log],
        "summary": summary,
    }
