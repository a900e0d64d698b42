"""
Version 1 of the API.

The paths of this version are served from the application root because
existing clients call ``/register``, ``/messages`` and so on directly.
"""
