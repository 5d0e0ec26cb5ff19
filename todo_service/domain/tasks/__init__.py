"""
Tasks bounded context: domain layer.

Holds the task entities, the repository and service ports,
the domain errors, and the task service that validates
task content before handing off to a repository.
"""
