"""Output targets for the event log."""
