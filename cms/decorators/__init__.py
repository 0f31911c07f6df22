from cms.decorators.guard import guarded

__all__ = ["guarded"]
