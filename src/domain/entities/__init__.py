# Domain entities - dataclasses for business objects
from .action_result import ActionResult
from .catalog import Catalog, Category, PricingRow, Service, ServiceOverride, StaticPath
from .lead import LeadFailure, LeadResult, LeadSubmission
from .site_settings import AdminCredentials, TelegramSettings

__all__ = [
    "ActionResult",
    "Catalog",
    "Category",
    "PricingRow",
    "Service",
    "ServiceOverride",
    "StaticPath",
    "LeadFailure",
    "LeadResult",
    "LeadSubmission",
    "AdminCredentials",
    "TelegramSettings",
]
