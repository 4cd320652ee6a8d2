"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  -> Write operations (CQRS)
- queries/   -> Read operations (CQRS)
- dto/       -> Data Transfer Objects returned to the presentation layer
- common/    -> Shared interfaces (Command, Query base classes) and helpers

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
- One handler realizes one operation
- The only layer that turns "absent" into ResourceNotFoundError, a lost
  version race into ConflictError, and an ownership mismatch into
  AuthorizationError
"""
