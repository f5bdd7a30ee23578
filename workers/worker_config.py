"""Celery worker signal handlers"""

from celery.signals import worker_ready, worker_shutdown, task_prerun, task_postrun, task_failure
import structlog
import os

logger = structlog.get_logger()


@worker_ready.connect
def on_worker_ready(sender, **kwargs):
    logger.info(
        "Celery worker ready",
        hostname=sender.hostname,
        pid=os.getpid()
    )


@worker_shutdown.connect
def on_worker_shutdown(sender, **kwargs):
    logger.info("Celery worker shutting down", hostname=sender.hostname)


@task_prerun.connect
def on_task_prerun(task_id, task, args, kwargs, **_):
    logger.info(
        "Task starting",
        task_id=task_id,
        task_name=task.name,
        args=str(args)[:100]  # Batch id lists can be long
    )


@task_postrun.connect
def on_task_postrun(task_id, task, args, kwargs, retval, state, **_):
    logger.info(
        "Task completed",
        task_id=task_id,
        task_name=task.name,
        state=state
    )


@task_failure.connect
def on_task_failure(task_id, exception, **_):
    logger.error("Task failed", task_id=task_id, error=str(exception))

