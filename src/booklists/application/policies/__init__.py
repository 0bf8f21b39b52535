from booklists.application.policies.list_policy import can_mutate, ensure_can_mutate

__all__ = ["can_mutate", "ensure_can_mutate"]
