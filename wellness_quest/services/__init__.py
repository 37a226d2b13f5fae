"""Session-level services"""

from wellness_quest.services.progress_service import ProgressService

__all__ = ["ProgressService"]
