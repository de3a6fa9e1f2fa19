from .enrich import enrich_task

__all__ = ["enrich_task"]
