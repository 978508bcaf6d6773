"""Nearest-reference matching of face descriptors."""
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import numpy as np

UNKNOWN_LABEL = "unknown"
DEFAULT_DISTANCE_THRESHOLD = 0.55


@dataclass
class LabeledFaceDescriptors:
    """All descriptors computed for one reference person."""
    label: str
    descriptors: List[np.ndarray] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.label:
            raise ValueError("Label is required")
        if not self.descriptors:
            raise ValueError(f"No descriptors for {self.label}")


@dataclass
class FaceMatch:
    label: str
    distance: float

    @property
    def is_unknown(self) -> bool:
        return self.label == UNKNOWN_LABEL

    @property
    def confidence(self) -> Optional[float]:
        if self.is_unknown:
            return None
        return round(1 - self.distance, 2)


def euclidean_distance(a: Sequence[float], b: Sequence[float]) -> float:
    return float(np.linalg.norm(np.asarray(a, dtype=np.float64) - np.asarray(b, dtype=np.float64)))


class FaceMatcher:
    """
    Matches a query descriptor against labeled reference descriptors.

    The distance to a label is the mean Euclidean distance to each of its
    descriptors; the closest label wins unless that distance reaches the
    threshold, in which case the match is ``unknown``.
    """

    def __init__(
        self,
        labeled_descriptors: List[LabeledFaceDescriptors],
        distance_threshold: float = DEFAULT_DISTANCE_THRESHOLD,
    ) -> None:
        if not labeled_descriptors:
            raise ValueError("At least one labeled descriptor set is required")
        self.labeled_descriptors = labeled_descriptors
        self.distance_threshold = distance_threshold

    def compute_mean_distance(self, query: Sequence[float], descriptors: List[np.ndarray]) -> float:
        return sum(euclidean_distance(query, descriptor) for descriptor in descriptors) / len(descriptors)

    def match_descriptor(self, query: Sequence[float]) -> FaceMatch:
        matches = [
            FaceMatch(label=labeled.label, distance=self.compute_mean_distance(query, labeled.descriptors))
            for labeled in self.labeled_descriptors
        ]
        return min(matches, key=lambda match: match.distance)

    def find_best_match(self, query: Sequence[float]) -> FaceMatch:
        best = self.match_descriptor(query)
        if best.distance >= self.distance_threshold:
            return FaceMatch(label=UNKNOWN_LABEL, distance=best.distance)
        return best
