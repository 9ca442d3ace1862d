from __future__ import annotations
from enum import Enum

class MergeStrategy(str, Enum):
    midpoint = "midpoint"          # (rep + color) / 2, recent merges dominate
    running_mean = "running_mean"  # exact mean of every color folded in

    @staticmethod
    def parse(value: "MergeStrategy | str") -> "MergeStrategy":
        if isinstance(value, MergeStrategy):
            return value
        return MergeStrategy(str(value).strip().lower())
