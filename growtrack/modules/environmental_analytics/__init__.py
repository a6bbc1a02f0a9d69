# 📄 File: growtrack/modules/environmental_analytics/__init__.py
# 🧭 Purpose (Layman Explanation):
# The premium analytics area: it shows growers how their grow room conditions relate
# to how well their plants grow.
# 🧪 Purpose (Technical Summary):
# Environmental impact and growth correlation module following the layered
# domain / application / infrastructure / presentation structure.
# 🔗 Dependencies:
# Shared config, core and utils packages
# 🔄 Connected Modules / Calls From:
# growtrack.api.v1.router

"""
Environmental Analytics Module

Layers:
- domain: readings, analytics results, scope, tiers and the pure analytics functions
- application: queries, handlers, export DTOs and the service facade
- infrastructure: Supabase repositories
- presentation: FastAPI routes, schemas and dependencies
"""
