import uuid

from django.db import models
from django.utils import timezone

from .gardener import Gardener


class LogMessage(models.Model):
    """
    A log record persisted by the database log handler for the gardener it concerns.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    createdAt = models.DateTimeField(default=timezone.now)
    relatedResourceId = models.UUIDField(blank=True, null=True)
    logLevel = models.CharField(max_length=24)
    message = models.TextField()

    class Meta:
        ordering = ['-createdAt']
        indexes = [
            models.Index(fields=['relatedResourceId', '-createdAt'], name='logmessage_resource_idx'),
        ]

    def __str__(self):
        entry = f"{self.createdAt} {self.logLevel}: {self.message}"
        if self.relatedResourceId is None:
            return entry

        email = Gardener.objects.filter(id=self.relatedResourceId).values_list('email', flat=True).first()
        return f"{email or self.relatedResourceId} --- {entry}"
