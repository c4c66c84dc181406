"""
Shared models for the application
"""

from django.db import models


class BaseModel(models.Model):
    """Abstract base stamping creation and last update times on every row"""

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
