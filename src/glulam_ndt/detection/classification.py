"""
Zone grading rules.

Severity and confidence are assigned by an ordered rule list; the first
rule whose predicate holds wins. Keeping the rules as data makes the
precedence explicit and lets each rule be checked on its own.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from glulam_ndt.config import ThicknessScanConfig
from glulam_ndt.enums import Confidence, Severity


@dataclass(frozen=True)
class ZoneStats:
    """Summary statistics a severity rule looks at."""

    max_tof: float
    avg_tof: float
    point_count: int


@dataclass(frozen=True)
class SeverityRule:
    """A single grading rule."""

    name: str
    confidence: Confidence
    severity: Severity
    predicate: Callable[[ZoneStats, ThicknessScanConfig], bool]

    def matches(self, stats: ZoneStats, config: ThicknessScanConfig) -> bool:
        """Check whether this rule applies to a zone."""
        return self.predicate(stats, config)


SEVERITY_RULES: tuple[SeverityRule, ...] = (
    SeverityRule(
        name="definite",
        confidence=Confidence.HIGH,
        severity=Severity.SEVERE,
        predicate=lambda s, c: s.max_tof >= c.definite_threshold,
    ),
    SeverityRule(
        name="likely",
        confidence=Confidence.HIGH,
        severity=Severity.MODERATE,
        predicate=lambda s, c: s.max_tof >= c.likely_threshold,
    ),
    SeverityRule(
        name="suspicious",
        confidence=Confidence.MEDIUM,
        severity=Severity.MILD,
        predicate=lambda s, c: (
            s.avg_tof >= c.suspicious_threshold and s.point_count >= c.mild_min_points
        ),
    ),
    SeverityRule(
        name="possible",
        confidence=Confidence.LOW,
        severity=Severity.POSSIBLE,
        predicate=lambda s, c: True,
    ),
)


def classify_zone(
    max_tof: float,
    avg_tof: float,
    point_count: int,
    config: ThicknessScanConfig,
    rules: tuple[SeverityRule, ...] = SEVERITY_RULES,
) -> tuple[Confidence, Severity]:
    """
    Grade a zone by the first matching rule.

    Args:
        max_tof: Peak TOF in the zone
        avg_tof: Mean TOF in the zone
        point_count: Number of readings in the zone
        config: Detector settings holding the thresholds
        rules: Ordered rule list (first match wins)

    Returns:
        Tuple of (Confidence, Severity)
    """
    stats = ZoneStats(max_tof=max_tof, avg_tof=avg_tof, point_count=point_count)
    for rule in rules:
        if rule.matches(stats, config):
            return rule.confidence, rule.severity

    # The catch-all rule always matches; only reachable with a custom rule list
    return Confidence.LOW, Severity.POSSIBLE


def needs_more_data(
    span_length: float,
    point_count: int,
    config: ThicknessScanConfig,
) -> tuple[bool, Optional[float]]:
    """
    Decide whether a zone is too sparsely sampled to bound the defect.

    A zone needs more data when it has very few points over a non-trivial
    span, or spans a long stretch with only a handful of points.

    Returns:
        Tuple of (needs_more_data, suggested_interval or None)
    """
    sparse = point_count <= config.sparse_max_points and span_length > config.sparse_max_span
    wide = span_length > config.wide_min_span and point_count < config.wide_min_points

    if sparse or wide:
        return True, config.suggested_interval
    return False, None
