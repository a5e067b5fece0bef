"""
Status values shared by session requests and skill requests.

State machine (both request kinds):
  pending → accepted
          → rejected

pending is only ever the initial value; it is never a settable target.
"""

STATUS_PENDING = "pending"
STATUS_ACCEPTED = "accepted"
STATUS_REJECTED = "rejected"

REQUEST_STATUSES = (STATUS_PENDING, STATUS_ACCEPTED, STATUS_REJECTED)
SETTABLE_STATUSES = (STATUS_ACCEPTED, STATUS_REJECTED)

# Shared CHECK clause for the status column of both request tables
STATUS_CHECK_SQL = "status IN ('pending', 'accepted', 'rejected')"
