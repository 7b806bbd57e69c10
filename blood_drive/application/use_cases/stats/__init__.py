from .reconcile_stats import ReconcileStatsUseCase

__all__ = ["ReconcileStatsUseCase"]
