"""
Observability module for the clinic.

Provides structured logging and domain events with PHI/PII protection.
"""
from .events import log_domain_event
from .logging import SanitizedJSONFormatter, sanitize_dict

__all__ = ['log_domain_event', 'SanitizedJSONFormatter', 'sanitize_dict']
