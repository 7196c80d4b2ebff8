"""Business logic services."""

from .provider_service import ProviderService
from .report_service import ReportService
from .moderation_service import ModerationService
