"""
API package containing versioned routes and the dependency providers
that assemble DAOs and services for each request.
"""
