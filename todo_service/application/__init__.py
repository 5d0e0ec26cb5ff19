"""
Application layer package.

Contains the controllers that orchestrate domain services and
translate domain errors into a transport-agnostic vocabulary.
This layer depends on domain ports, never on infrastructure.
"""
