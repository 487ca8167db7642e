"""
sqlloader – execute a SQL script file against PostgreSQL, SQLite or MariaDB.

The three names below are stamped at release time and are informational only.
"""
__version__ = "0.3.0"
__commit__ = "none"
__build_date__ = "unknown"
