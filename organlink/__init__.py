"""
OrganLink API.

Role-based service coordinating organ requests, pledges and matches between
patients, donors, doctors and administrators.
"""
__version__ = "1.0.0"
