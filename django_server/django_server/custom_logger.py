import logging
import threading
import uuid

# Logger, deren Einträge nie in die Datenbank geschrieben werden, um Endlosschleifen zu vermeiden
IGNORED_LOGGER_NAMES = frozenset([
    'django.db',
    'django.db.backends',
    'django.request',
    'django.server',
    'django.security',
    'django.template',
    'django_server.custom_logger',
    'urllib3',
    'requests',
    'charset_normalizer',
])


class DatabaseLogHandler(logging.Handler):
    """
    Persists log records that carry a `resource_id` extra as LogMessage rows, so they can be listed per gardener.
    Records without a (valid UUID) resource id are left to the other handlers.
    """
    _is_emitting = threading.local()  # Thread-local Flag um Rekursion zu verhindern

    def __init__(self, level=logging.NOTSET):
        super().__init__(level)

    def _related_resource_id(self, record: logging.LogRecord):
        resource_id = getattr(record, 'resource_id', None)
        if resource_id is None:
            return None
        try:
            return uuid.UUID(str(resource_id))
        except ValueError:
            return None

    def _should_ignore_record(self, record: logging.LogRecord) -> bool:
        if getattr(DatabaseLogHandler._is_emitting, 'value', False):
            return True

        record_name = record.name.lower()
        return any(record_name.startswith(ignored) for ignored in IGNORED_LOGGER_NAMES)

    def emit(self, record: logging.LogRecord):
        if self._should_ignore_record(record):
            return

        related_resource_id = self._related_resource_id(record)
        if related_resource_id is None:
            return

        DatabaseLogHandler._is_emitting.value = True
        try:
            from woot_irrigation_backend.services import write_log_message
            write_log_message(record.levelname, self.format(record), related_resource_id)
        except Exception:
            self.handleError(record)
        finally:
            DatabaseLogHandler._is_emitting.value = False
