"""Services — request-scoped orchestration between routes and infrastructure."""
