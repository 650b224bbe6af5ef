from .error_budget_comp import ErrorBudget, default_tolerated_errors
from .seed_corpus_comp import SeedCorpus, SeedGenerator, as_generator

__all__ = [
    "ErrorBudget",
    "SeedCorpus",
    "SeedGenerator",
    "as_generator",
    "default_tolerated_errors",
]
