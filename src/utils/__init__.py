"""
Utils package.

AWS access, configuration, CSV parsing and event helpers for the contact sync.
"""
