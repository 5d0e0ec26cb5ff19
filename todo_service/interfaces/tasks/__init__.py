"""HTTP interface for the tasks bounded context."""
