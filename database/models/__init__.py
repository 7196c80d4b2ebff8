from .base import Base
from .provider import ProviderRecord
from .report import ProviderReport, ModerationActionRecord

__all__ = [
    'Base',
    'ProviderRecord',
    'ProviderReport',
    'ModerationActionRecord',
]
