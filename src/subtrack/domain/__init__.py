"""Domain layer for subtrack application.

Services are imported from their modules (e.g. ``subtrack.domain.subscription``)
so that the database layer can import ``subtrack.domain.entities`` without
pulling in every service.
"""
