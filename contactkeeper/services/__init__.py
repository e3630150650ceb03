"""Business logic for users and contacts. Routes translate these errors to HTTP."""
