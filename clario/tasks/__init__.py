"""Celery tasks package"""

from clario.tasks.scoring_tasks import recalculate_video, recalculate_batch

__all__ = [
    "recalculate_video",
    "recalculate_batch"
]
