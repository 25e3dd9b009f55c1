from woot_irrigation_backend.models import LogMessage
from woot_irrigation_backend.serializers import LogMessageSerializer


def write_log_message(level: str, message: str, related_resource_id=None) -> LogMessage:
    return LogMessage.objects.create(
        logLevel=level,
        message=message,
        relatedResourceId=related_resource_id,
    )


def get_log_messages_by_amount(resource_id, amount: int) -> LogMessageSerializer:
    """
    The newest `amount` entries logged for a gardener.
    """
    messages = LogMessage.objects.filter(relatedResourceId=resource_id)[:amount]
    return LogMessageSerializer(messages, many=True)
