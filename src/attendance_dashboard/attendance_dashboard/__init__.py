"""Attendance Dashboard package.

Feature modules (subjects, students, attendance) each hold a domain model,
a repository interface with its JSON-export implementation, and services.
The attendance module carries the reconciliation core that turns a roster and
a sparse list of attendance events into a dense table with statistics.
"""
