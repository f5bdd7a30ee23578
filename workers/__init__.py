"""Celery worker package"""
