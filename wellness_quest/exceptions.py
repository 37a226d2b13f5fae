"""
Error types for wellness-quest

Every error logs itself when raised and carries a short message that the
display layer can show next to the quest board.
"""

from datetime import datetime, timezone
from typing import Optional, Dict, Any
from uuid import uuid4
import logging

logger = logging.getLogger(__name__)

DEFAULT_USER_MESSAGE = "Something went wrong with your progress. Please try again."


class WellnessQuestError(Exception):
    """
    Base class for quest, mood and progress errors

    ``request_id`` ties the log line to the ``to_dict()`` payload shown to
    the user. ``user_message`` is what the toast displays; ``message`` stays
    in the logs.

    Example:
        raise WellnessQuestError(
            message="Progress blob could not be written",
            operation="save_state",
            context={"key": "wellness-quest-state-v2"}
        )
    """

    def __init__(
        self,
        message: str,
        request_id: Optional[str] = None,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
        user_message: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.request_id = request_id or str(uuid4())
        self.operation = operation
        self.context = context or {}
        self.cause = cause
        self.user_message = user_message or DEFAULT_USER_MESSAGE
        self.timestamp = datetime.now(timezone.utc)

        self._log_error()

    def _log_error(self) -> None:
        log_data = {
            "error_type": self.__class__.__name__,
            "error_message": self.message,  # 'message' is reserved by logging
            "request_id": self.request_id,
            "operation": self.operation,
            "error_context": self.context,
            "timestamp": self.timestamp.isoformat()
        }

        if self.cause:
            log_data["cause"] = str(self.cause)
            logger.error(f"{self.__class__.__name__}: {self.message}", extra=log_data, exc_info=self.cause)
        else:
            logger.error(f"{self.__class__.__name__}: {self.message}", extra=log_data)

    def to_dict(self) -> Dict[str, Any]:
        """Payload for the display layer's error toast"""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "user_message": self.user_message,
            "request_id": self.request_id,
            "timestamp": self.timestamp.isoformat()
        }


# ==========================================
# Validation Errors (User Input)
# ==========================================

class ValidationError(WellnessQuestError):
    """
    A mood rating or avatar choice was refused

    ``field`` names the rejected input (e.g. "mood") so the
    toast reads e.g. "Invalid mood: Mood must be between 1 and 5".
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        **kwargs
    ):
        self.field = field
        self.value = value
        super().__init__(
            message=message,
            user_message=f"Invalid {field}: {message}" if field else message,
            context={"field": field, "value": value},
            **kwargs
        )


class RecordNotFoundError(WellnessQuestError):
    """Requested catalog record (quest, avatar) does not exist"""

    def __init__(
        self,
        message: str,
        record_type: Optional[str] = None,
        record_id: Optional[str] = None,
        **kwargs
    ):
        self.record_type = record_type
        self.record_id = record_id
        super().__init__(
            message=message,
            user_message=f"{record_type or 'Record'} not found.",
            context={"record_type": record_type, "record_id": record_id},
            **kwargs
        )


# ==========================================
# Storage Errors
# ==========================================

class StorageError(WellnessQuestError):
    """The saved progress blob could not be read or written"""

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        **kwargs
    ):
        self.key = key
        super().__init__(
            message=message,
            user_message="Your progress could not be saved. It is kept for this session.",
            context={"key": key},
            **kwargs
        )


# ==========================================
# Configuration Errors
# ==========================================

class ConfigurationError(WellnessQuestError):
    """An environment setting (LOG_LEVEL, USER_TIMEZONE, ...) is unusable"""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        **kwargs
    ):
        self.config_key = config_key
        super().__init__(
            message=message,
            user_message="Wellness Quest settings are invalid. Check your .env file.",
            context={"config_key": config_key},
            **kwargs
        )


# ==========================================
# Helper Functions
# ==========================================

def wrap_storage_exception(
    error: Exception,
    operation: str,
    key: Optional[str] = None,
    context: Optional[Dict[str, Any]] = None
) -> WellnessQuestError:
    """
    Turn a failed read or write of the progress blob into a StorageError

    Disk and encoding failures become StorageError so the service can keep
    the session going on in-memory state. Anything else is unexpected and
    comes back as a plain WellnessQuestError.

    Args:
        error: The caught exception
        operation: "load" or "save"
        key: Storage key of the progress blob
        context: Extra fields for the log line
    """
    if isinstance(error, (OSError, UnicodeError)):
        return StorageError(
            message=f"Storage {operation} failed: {str(error)}",
            key=key,
            operation=operation,
            cause=error
        )

    return WellnessQuestError(
        message=f"{operation} failed: {str(error)}",
        operation=operation,
        context=context,
        cause=error
    )
