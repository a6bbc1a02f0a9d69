# 📄 File: growtrack/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as a package of common tools that every part of
# GrowTrack can use, like settings, error types and logging.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package for configuration, core cross-cutting concerns
# (exceptions, security, dependencies) and utilities.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - All application modules importing shared utilities

"""
Shared Kernel - Common Utilities and Infrastructure

- Configuration management
- Supabase client management
- Security and authentication utilities
- Exception hierarchy
- Logging utilities
"""

__all__ = []
