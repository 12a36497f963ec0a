"""Pure domain services: access control, lifecycle rules and id allocation."""
