from blindaudit.models.acknowledgment import Acknowledgment
from blindaudit.models.audit_event import AuditEvent
from blindaudit.models.prompt import Prompt
from blindaudit.models.response import Response
from blindaudit.models.suggestion import Suggestion
from blindaudit.models.user import User

__all__ = [ "Acknowledgment", "AuditEvent", "Prompt",
           "Response", "Suggestion", "User" ]
