"""Application layer: sales order use cases (CQRS).

- commands/: write-side command dataclasses and their handlers
- queries/: read-side query dataclasses and their handlers
- dtos/: plain result objects returned by handlers
- errors/: ApplicationError plus mapping from domain rejections

Handlers coordinate repository, clock, id generator and logger; every
business rule stays in the domain layer.
"""
