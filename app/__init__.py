"""Member engagement API: push notification fan-out and CRM contact sync."""
