"""
Domain events logging helpers.

Every service in the project reports what it did through log_domain_event:
role_seeds_applied, role_assigned, claim_attached, profile_registered,
account_deleted and quiz_submitted.
"""
import logging
from typing import Dict, Optional
from .logging import sanitize_dict

logger = logging.getLogger(__name__)

# Results not listed here log at INFO
RESULT_LEVELS = {
    'blocked': logging.WARNING,
}


def log_domain_event(
    event_name: str,
    entity_type: Optional[str] = None,
    entity_id: Optional[str] = None,
    entity_ids: Optional[Dict[str, str]] = None,
    result: str = 'success',
    **extra_fields
):
    """
    Log a domain event with structured data.

    Args:
        event_name: Name of the event (e.g., 'role_assigned', 'quiz_submitted')
        entity_type: Model the event is about (e.g., 'UserRole', 'QuizResult')
        entity_id: ID of that row, once it exists
        entity_ids: Related ids, merged into the record (user_id, quiz_id, ...)
        result: 'success', or 'blocked' when a rule rejected the operation
        **extra_fields: Additional fields to log (will be sanitized)
    """
    event_data = {'event': event_name, 'result': result}
    if entity_type:
        event_data['entity_type'] = entity_type
    if entity_id:
        event_data['entity_id'] = entity_id
    event_data.update(entity_ids or {})
    event_data.update(sanitize_dict(extra_fields))

    logger.log(RESULT_LEVELS.get(result, logging.INFO), f'Domain event: {event_name}', extra=event_data)
