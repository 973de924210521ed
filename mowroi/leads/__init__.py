from .client import LeadDeliveryError, LeadEmailClient
from .email import render_lead_email
from .schema import LeadRequest, LeadValidationError

__all__ = [
    "LeadDeliveryError",
    "LeadEmailClient",
    "LeadRequest",
    "LeadValidationError",
    "render_lead_email",
]
