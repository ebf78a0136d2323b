"""Todo domain: tasks owned by a user email.

- SQLAlchemy models for tasks, categories and priorities
- Async TaskRepository with the per-user listing and paginated search
- TaskService with caching, email scoping and search normalization
- Dataclass configuration with TODO_* env overrides
"""
