"""
Dashboard components
Each component is a package with a service, its routes and an ``init_*`` hook
that stores the service in ``app.extensions`` and registers the blueprint.
"""
