"""
CareerPath - job board with skill-based job matching.

Job seekers list their skills and see how well they match each posting,
employers manage their postings, and admins review aggregate statistics.
"""

__app_name__ = "CareerPath"
__version__ = "0.1.0"
