"""directory/ -- In-memory employee directory for StaffDesk.

Layer rule: directory/ imports only stdlib. It does NOT import from api/,
auth/, or core/.
"""
