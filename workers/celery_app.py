"""Celery application configuration"""

from celery import Celery
from kombu import Queue

from clario.config import settings

# Initialize Celery
celery_app = Celery(
    "clario_scoring",
    broker=settings.celery_broker_url,
    backend=settings.celery_result_backend,
    include=[
        "clario.tasks.scoring_tasks",
    ]
)

# Celery configuration
celery_app.conf.update(
    # Serialization
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",

    # Time settings
    timezone="UTC",
    enable_utc=True,

    # Task tracking
    task_track_started=True,

    # Worker settings
    worker_prefetch_multiplier=1,

    # Task acknowledgment
    task_acks_late=True,  # Acknowledge task after completion
    task_reject_on_worker_lost=True,  # Requeue if worker dies

    # Results
    result_expires=86400,  # Results expire after 24 hours

    # Task routing
    task_routes={
        "scoring.*": {"queue": "scoring"},
    },

    task_queues=(
        Queue("default", routing_key="default"),
        Queue("scoring", routing_key="scoring"),
    ),

    task_default_queue="default",
)

# Nightly full rescore picks up taxonomy changes
celery_app.conf.beat_schedule = {
    "rescore-all-videos": {
        "task": "scoring.recalculate_batch",
        "schedule": 86400.0,
        "args": (None,),
    },
}


# Register worker signal handlers
import workers.worker_config  # noqa: E402,F401


@celery_app.task(bind=True, name="celery.ping")
def ping(self):
    """Simple ping task to test worker connectivity"""
    return "pong"


if __name__ == "__main__":
    celery_app.start()
