from .analyzer_comp import Analyzer, ChainedAnalyzers, StatsKey, analyze_chain, chain_title
from .registry_comp import ANALYZERS, build_analyzer, build_chain
from .spoiler_analyzers_comp import (
    EarlyItemsAnalyzer,
    GoalAnalyzer,
    ItemSphereAnalyzer,
    ItemZoneAnalyzer,
    KeyAnalyzer,
    SpawnLocationAnalyzer,
    SphereCountAnalyzer,
)

__all__ = [
    "ANALYZERS",
    "Analyzer",
    "ChainedAnalyzers",
    "EarlyItemsAnalyzer",
    "GoalAnalyzer",
    "ItemSphereAnalyzer",
    "ItemZoneAnalyzer",
    "KeyAnalyzer",
    "SpawnLocationAnalyzer",
    "SphereCountAnalyzer",
    "StatsKey",
    "analyze_chain",
    "build_analyzer",
    "build_chain",
    "chain_title",
]
