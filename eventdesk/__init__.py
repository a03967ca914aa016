"""EventDesk - terminal client for a remote Event CRUD API."""
