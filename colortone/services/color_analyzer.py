from __future__ import annotations
import logging
from typing import Dict, Iterable, List

from colortone.domain.dtos import Color, WHITE
from colortone.domain.enums import MergeStrategy

log = logging.getLogger(__name__)


def color_distance(c1: Color, c2: Color) -> float:
    # squared euclidean in RGB, no sqrt
    dr = c1.red - c2.red
    dg = c1.green - c2.green
    db = c1.blue - c2.blue
    return dr * dr + dg * dg + db * db


def mix_colors(c1: Color, c2: Color) -> Color:
    return Color((c1.red + c2.red) / 2, (c1.green + c2.green) / 2, (c1.blue + c2.blue) / 2, alpha=1.0)


def color_saturation(color: Color) -> float:
    """Range-based saturation: strongest channel minus weakest."""
    return max(color.red, color.green, color.blue) - min(color.red, color.green, color.blue)


def find_most_vibrant(colors: Iterable[Color]) -> Color:
    # sorted() is stable, so equal saturations keep their input order
    ranked = sorted(colors, key=color_saturation, reverse=True)
    return ranked[0] if ranked else WHITE


def _nearest(clusters: List[Color], color: Color) -> int:
    # min() keeps the first index on ties
    return min(range(len(clusters)), key=lambda i: color_distance(color, clusters[i]))


def cluster_colors(
    histogram: Dict[Color, int],
    max_clusters: int,
    strategy: MergeStrategy = MergeStrategy.midpoint,
) -> List[Color]:
    """Greedy single pass over the histogram keys (counts are ignored).

    The first ``max_clusters`` colors seed clusters as-is; every later color is
    folded into its nearest cluster. ``midpoint`` replaces the representative
    with the midpoint of it and the new color, ``running_mean`` keeps the exact
    mean of all members.
    """
    strategy = MergeStrategy.parse(strategy)
    clusters: List[Color] = []
    members: List[int] = []
    if max_clusters <= 0:
        return clusters

    for color in histogram:
        if len(clusters) < max_clusters:
            clusters.append(color)
            members.append(1)
            continue
        idx = _nearest(clusters, color)
        rep = clusters[idx]
        if strategy is MergeStrategy.running_mean:
            n = members[idx] + 1
            clusters[idx] = Color(
                rep.red + (color.red - rep.red) / n,
                rep.green + (color.green - rep.green) / n,
                rep.blue + (color.blue - rep.blue) / n,
            )
            members[idx] = n
        else:
            clusters[idx] = mix_colors(rep, color)
    log.debug("Clustered %d colors into %d clusters (%s)", len(histogram), len(clusters), strategy.value)
    return clusters


class ColorAnalyzer:
    def __init__(self, k: int = 5, strategy: MergeStrategy = MergeStrategy.midpoint) -> None:
        self.k = k
        self.strategy = MergeStrategy.parse(strategy)

    def cluster(self, histogram: Dict[Color, int]) -> List[Color]:
        return cluster_colors(histogram, self.k, self.strategy)

    @staticmethod
    def most_vibrant(colors: Iterable[Color]) -> Color:
        return find_most_vibrant(colors)
